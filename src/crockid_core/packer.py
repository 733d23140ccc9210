"""Pack a 160-bit payload into 5-bit symbol groups and back."""
from __future__ import annotations

from .alphabet import normalize, symbol_for, value_for
from .errors import InvalidLength
from .protocol import BITS_PER_SYMBOL, PAYLOAD_BYTES, PAYLOAD_SYMBOLS

_MASK = (1 << BITS_PER_SYMBOL) - 1


def pack(payload: bytes) -> str:
    """Encode 20 payload bytes as 32 symbols, most significant group first."""
    if len(payload) != PAYLOAD_BYTES:
        raise InvalidLength("bytes", PAYLOAD_BYTES, len(payload))
    n = int.from_bytes(payload, "big")
    # 160 bits split evenly into 32 groups, no padding
    return "".join(
        symbol_for((n >> (BITS_PER_SYMBOL * shift)) & _MASK)
        for shift in range(PAYLOAD_SYMBOLS - 1, -1, -1)
    )


def unpack(symbols: str) -> bytes:
    """Decode 32 symbols (normalized on the way) back into 20 payload bytes."""
    if len(symbols) != PAYLOAD_SYMBOLS:
        raise InvalidLength("symbols", PAYLOAD_SYMBOLS, len(symbols))
    n = 0
    for pos, ch in enumerate(symbols):
        n = (n << BITS_PER_SYMBOL) | value_for(normalize(ch, pos))
    return n.to_bytes(PAYLOAD_BYTES, "big")
