"""Decode error taxonomy.

Every failure on untrusted input is one of these, each tagged with a
stable code from ``ERRORS``.
"""
from __future__ import annotations

ERRORS = {
    "E_INVALID_CHARACTER": "Character outside the Crockford base32 alphabet",
    "E_INVALID_LENGTH": "Input does not match the fixed 160-bit size",
    "E_CHECKSUM_MISMATCH": "Check symbol does not match payload",
    "E_OVERFLOW": "Integer does not fit in 160 bits",
}


class DecodeError(ValueError):
    code = "E_DECODE"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    @property
    def message(self) -> str:
        return ERRORS.get(self.code, "Decode failed")

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "detail": self.detail}


class InvalidCharacter(DecodeError):
    code = "E_INVALID_CHARACTER"

    def __init__(self, char: str, position: int):
        super().__init__(f"invalid character {char!r} at position {position}")
        self.char = char
        self.position = position

    def to_dict(self) -> dict:
        d = super().to_dict()
        d.update({"char": self.char, "position": self.position})
        return d


class InvalidLength(DecodeError):
    code = "E_INVALID_LENGTH"

    def __init__(self, what: str, expected: int, actual: int):
        super().__init__(f"expected {expected} {what}, got {actual}")
        self.expected = expected
        self.actual = actual

    def to_dict(self) -> dict:
        d = super().to_dict()
        d.update({"expected": self.expected, "actual": self.actual})
        return d


class Overflow(InvalidLength):
    code = "E_OVERFLOW"

    def __init__(self, value: int, bits: int):
        DecodeError.__init__(self, f"integer {value} is outside [0, 2**{bits} - 1]")
        self.expected = bits
        self.actual = value.bit_length()
        self.value = value

    def to_dict(self) -> dict:
        d = DecodeError.to_dict(self)
        d["max_bits"] = self.expected
        return d


class ChecksumMismatch(DecodeError):
    code = "E_CHECKSUM_MISMATCH"

    def __init__(self, expected: str, actual: str):
        super().__init__(f"check symbol {actual!r} does not match computed {expected!r}")
        self.expected = expected
        self.actual = actual

    def to_dict(self) -> dict:
        d = super().to_dict()
        d.update({"expected": self.expected, "actual": self.actual})
        return d
