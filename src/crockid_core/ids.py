"""crockid - Random 160-bit identifiers in checked Crockford base32."""
from __future__ import annotations

import functools
from typing import Callable

import nacl.utils

from .alphabet import normalize
from .checksum import checksum
from .errors import ChecksumMismatch, InvalidLength, Overflow
from .packer import pack, unpack
from .protocol import ENCODED_LEN, MAX_INT, PAYLOAD_BITS, PAYLOAD_BYTES

RandomSource = Callable[[int], bytes]

# libsodium randombytes_buf, shared process-wide
default_random: RandomSource = nacl.utils.random


@functools.total_ordering
class Uid:
    """Immutable 20-byte identifier.

    Equality, ordering and hashing are byte-wise over the payload.
    Build one with ``new`` or one of the ``from_*`` constructors.
    """

    __slots__ = ("_payload",)

    def __init__(self, payload: bytes):
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise TypeError(f"payload must be bytes, not {type(payload).__name__}")
        payload = bytes(payload)
        if len(payload) != PAYLOAD_BYTES:
            raise InvalidLength("bytes", PAYLOAD_BYTES, len(payload))
        object.__setattr__(self, "_payload", payload)

    def __setattr__(self, name, value):
        raise AttributeError("Uid is immutable")

    def __delattr__(self, name):
        raise AttributeError("Uid is immutable")

    # --- construction ---

    @classmethod
    def new(cls, random: RandomSource | None = None) -> Uid:
        """Draw a fresh identifier from a secure random source."""
        source = default_random if random is None else random
        return cls(source(PAYLOAD_BYTES))

    @classmethod
    def from_bytes(cls, data: bytes) -> Uid:
        return cls(data)

    @classmethod
    def from_int(cls, value: int) -> Uid:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be int, not {type(value).__name__}")
        if not 0 <= value <= MAX_INT:
            raise Overflow(value, PAYLOAD_BITS)
        return cls(value.to_bytes(PAYLOAD_BYTES, "big"))

    @classmethod
    def from_str(cls, text: str) -> Uid:
        """Parse the 33-character checked form.

        Case and the look-alikes i/l/o are tolerated. Raises
        InvalidCharacter, InvalidLength or ChecksumMismatch.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")
        last = len(text) - 1
        symbols = "".join(normalize(ch, pos, check=pos == last) for pos, ch in enumerate(text))
        if len(symbols) != ENCODED_LEN:
            raise InvalidLength("characters", ENCODED_LEN, len(symbols))

        body, given = symbols[:-1], symbols[-1]
        payload = unpack(body)
        expected = checksum(payload)
        if given != expected:
            raise ChecksumMismatch(expected, given)
        return cls(payload)

    # --- conversion ---

    def to_bytes(self) -> bytes:
        return bytes(self._payload)

    def to_int(self) -> int:
        return int.from_bytes(self._payload, "big")

    def matches(self, text: str) -> bool:
        """True if ``text`` parses to this identifier."""
        try:
            return Uid.from_str(text) == self
        except (TypeError, ValueError):
            return False

    def __str__(self) -> str:
        return pack(self._payload) + checksum(self._payload)

    def __repr__(self) -> str:
        return f"Uid({str(self)!r})"

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __int__(self) -> int:
        return self.to_int()

    def __eq__(self, other):
        if not isinstance(other, Uid):
            return NotImplemented
        return self._payload == other._payload

    def __lt__(self, other):
        if not isinstance(other, Uid):
            return NotImplemented
        return self._payload < other._payload

    def __hash__(self) -> int:
        return hash(self._payload)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Uid, (self._payload,))


def parse(text: str) -> Uid:
    """Parse an encoded identifier; alias of ``Uid.from_str``."""
    return Uid.from_str(text)


def uid_literal(text: str) -> Uid:
    """Validate a hard-coded identifier.

    Intended for module-level constants, so a bad literal fails when the
    defining module is imported rather than on first use.
    """
    return Uid.from_str(text)
