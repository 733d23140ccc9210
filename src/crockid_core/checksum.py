"""Crockford check symbol: payload integer modulo 37."""
from __future__ import annotations

from .alphabet import check_symbol_for
from .protocol import CHECK_MODULUS


def checksum_value(payload: bytes) -> int:
    return int.from_bytes(payload, "big") % CHECK_MODULUS


def checksum(payload: bytes) -> str:
    """Compute the check symbol for a payload.

    Detects any single-symbol substitution: a change of one 5-bit group
    moves the integer by d * 32**k with 0 < |d| < 32, never a multiple
    of 37.
    """
    return check_symbol_for(checksum_value(payload))
