"""Crockford base32 symbol tables and input normalization."""
from __future__ import annotations

from types import MappingProxyType

from .errors import InvalidCharacter
from .protocol import ALIASES, CHECK_ONLY_SYMBOLS, CHECK_SYMBOLS, SYMBOLS


def _build_normalization(symbols: str) -> MappingProxyType:
    table: dict[str, str] = {}
    for ch in symbols:
        table[ch] = ch
        table[ch.upper()] = ch
    for alias, ch in ALIASES.items():
        table[alias] = ch
        table[alias.upper()] = ch
    return MappingProxyType(table)


_VALUES = MappingProxyType({ch: i for i, ch in enumerate(SYMBOLS)})
_CHECK_VALUES = MappingProxyType({ch: i for i, ch in enumerate(CHECK_SYMBOLS)})

PAYLOAD_NORMALIZATION = _build_normalization(SYMBOLS)
CHECK_NORMALIZATION = _build_normalization(SYMBOLS + CHECK_ONLY_SYMBOLS)


def symbol_for(value: int) -> str:
    """Return the canonical symbol for a 5-bit value (0..31)."""
    if not 0 <= value < len(SYMBOLS):
        raise IndexError(f"symbol value {value} out of range")
    return SYMBOLS[value]


def value_for(symbol: str) -> int:
    """Return the 5-bit value of a canonical symbol."""
    return _VALUES[symbol]


def check_symbol_for(value: int) -> str:
    if not 0 <= value < len(CHECK_SYMBOLS):
        raise IndexError(f"check value {value} out of range")
    return CHECK_SYMBOLS[value]


def check_value_for(symbol: str) -> int:
    return _CHECK_VALUES[symbol]


def normalize(char: str, position: int = 0, check: bool = False) -> str:
    """Map an input character to its canonical symbol.

    Folds case and the look-alikes i/l -> 1 and o -> 0. With ``check`` set,
    the check-only symbols are accepted as well. Anything else raises
    InvalidCharacter carrying the character and its position.
    """
    table = CHECK_NORMALIZATION if check else PAYLOAD_NORMALIZATION
    try:
        return table[char]
    except KeyError:
        raise InvalidCharacter(char, position) from None
