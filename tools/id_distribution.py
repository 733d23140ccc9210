"""Generate a batch of ids and report duplicates and per-symbol spread."""
from __future__ import annotations

import json
from pathlib import Path
from warnings import warn

import click
import pandas as pd

from crockid_core import Uid
from crockid_core.protocol import PAYLOAD_SYMBOLS, SYMBOLS

# Max tolerated relative deviation of any symbol's pooled count from uniform
DEFAULT_TOLERANCE = 0.15


def generate_ids(count: int, random=None) -> list[str]:
    return [str(Uid.new(random)) for _ in range(count)]


def symbol_frequencies(ids: list[str]) -> pd.DataFrame:
    """Counts per (payload position, symbol). Rows are positions 0..31."""
    # The check position is excluded: its 37 values are not uniform.
    chars = pd.DataFrame([list(s[:PAYLOAD_SYMBOLS]) for s in ids])
    counts = chars.apply(lambda col: col.value_counts()).T
    counts = counts.reindex(columns=list(SYMBOLS)).fillna(0).astype(int)
    counts.index.name = "position"
    return counts


def summarize(ids: list[str], tolerance: float = DEFAULT_TOLERANCE) -> dict:
    freq = symbol_frequencies(ids)
    pooled = freq.sum(axis=0)
    expected = pooled.sum() / len(SYMBOLS)
    deviation = ((pooled - expected).abs() / expected).max()
    chi2 = (((pooled - expected) ** 2) / expected).sum()
    duplicates = int(pd.Series(ids).duplicated().sum())

    summary = {
        "count": len(ids),
        "duplicates": duplicates,
        "max_relative_deviation": round(float(deviation), 6),
        "chi2": round(float(chi2), 3),
        "degrees_of_freedom": len(SYMBOLS) - 1,
    }
    if duplicates:
        warn(f"{duplicates} duplicate ids in a batch of {len(ids)}")
    if deviation > tolerance:
        warn(f"Symbol spread {deviation:.3f} exceeds tolerance {tolerance}")
    return summary


@click.command()
@click.option("--count", "-n", default=10_000, show_default=True, type=click.IntRange(min=1))
@click.option("--tolerance", default=DEFAULT_TOLERANCE, show_default=True, type=float)
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write the per-position frequency table here")
def main(count: int, tolerance: float, csv_path: Path | None) -> None:
    ids = generate_ids(count)
    summary = summarize(ids, tolerance)
    if csv_path is not None:
        symbol_frequencies(ids).to_csv(csv_path)
        print(f"WROTE: {csv_path}")
    print(json.dumps(summary, sort_keys=True, separators=(",", ":")))
    if summary["duplicates"]:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
