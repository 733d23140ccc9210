import json

import click

from crockid_core import Uid
from .logic import describe, verify_id

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}


def _echo_json(obj) -> None:
    click.echo(json.dumps(obj, **CANONICAL_JSON_KW))


@click.group()
def main():
    pass


@main.command("new")
@click.option("--count", "-n", default=1, show_default=True, type=click.IntRange(min=1))
def new_cmd(count: int):
    for _ in range(count):
        click.echo(str(Uid.new()))


@main.command("verify")
@click.argument("text")
def verify_cmd(text: str):
    result = verify_id(text)
    _echo_json(result)
    if result["status"] != "PASS":
        raise SystemExit(1)


@main.command("convert")
@click.option("--from-int", "from_int", type=str, default=None, help="Decimal integer in [0, 2**160)")
@click.option("--from-hex", "from_hex", type=str, default=None, help="40 hex digits (20 bytes)")
def convert_cmd(from_int: str | None, from_hex: str | None):
    if (from_int is None) == (from_hex is None):
        raise click.UsageError("give exactly one of --from-int or --from-hex")
    try:
        if from_int is not None:
            uid = Uid.from_int(int(from_int, 10))
        else:
            uid = Uid.from_bytes(bytes.fromhex(from_hex))
    except ValueError as e:
        # Fail closed, with a single-line reason.
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)
    _echo_json(describe(uid))


if __name__ == "__main__":
    main()
