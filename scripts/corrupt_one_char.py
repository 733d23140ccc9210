import sys

from crockid_core.alphabet import normalize, symbol_for, value_for
from crockid_core.protocol import PAYLOAD_SYMBOLS, SYMBOLS


def corrupt(text: str, index: int) -> str:
    """Replace the payload symbol at ``index`` with the next one in the alphabet."""
    if not 0 <= index < PAYLOAD_SYMBOLS:
        raise ValueError(f"index must be in [0, {PAYLOAD_SYMBOLS})")
    old = value_for(normalize(text[index], index))
    new = symbol_for((old + 1) % len(SYMBOLS))
    return text[:index] + new + text[index + 1:]


def main():
    if len(sys.argv) not in (2, 3):
        print("Usage: corrupt_one_char.py <id> [index]")
        raise SystemExit(2)

    text = sys.argv[1]
    index = int(sys.argv[2]) if len(sys.argv) == 3 else 0
    if len(text) <= index:
        print("Id too short to corrupt at that index.")
        raise SystemExit(2)

    out = corrupt(text, index)
    print(out)
    print(f"Corrupted 1 char at index {index}", file=sys.stderr)

if __name__ == "__main__":
    main()
