"""crockid core - identifier type, codec and error taxonomy."""
from .checksum import checksum
from .errors import (
    ERRORS,
    ChecksumMismatch,
    DecodeError,
    InvalidCharacter,
    InvalidLength,
    Overflow,
)
from .ids import Uid, parse, uid_literal
from .packer import pack, unpack

__all__ = [
    "Uid",
    "parse",
    "uid_literal",
    "pack",
    "unpack",
    "checksum",
    "ERRORS",
    "DecodeError",
    "InvalidCharacter",
    "InvalidLength",
    "Overflow",
    "ChecksumMismatch",
]
