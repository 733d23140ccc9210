import pytest

from crockid_core import InvalidCharacter, InvalidLength, checksum, pack, unpack
from crockid_core.checksum import checksum_value

EXAMPLE = "aacy7965prs7631zgtk6100gzagmvv7x2"
EXAMPLE_INT = 471569087780948647371060810118848519319753452797
EXAMPLE_BYTES = bytes.fromhex("5299e3a4c5b632730c3f86a6608010faa14decfd")

# (integer payload, encoded form)
VECTORS = [
    (0, "0" * 33),
    (1, "0" * 31 + "11"),
    (32, "0" * 30 + "10*"),
    (33, "0" * 30 + "11~"),
    (36, "0" * 30 + "14u"),
    (2**159, "g" + "0" * 31 + "q"),
    (2**160 - 1, "z" * 32 + "8"),
    (EXAMPLE_INT, EXAMPLE),
]


def test_example_bytes_match_int():
    assert int.from_bytes(EXAMPLE_BYTES, "big") == EXAMPLE_INT


@pytest.mark.parametrize("n, encoded", VECTORS)
def test_pack(n, encoded):
    payload = n.to_bytes(20, "big")
    assert pack(payload) == encoded[:32]
    assert checksum(payload) == encoded[32]


@pytest.mark.parametrize("n, encoded", VECTORS)
def test_unpack(n, encoded):
    assert unpack(encoded[:32]) == n.to_bytes(20, "big")
    assert unpack(encoded[:32].upper()) == n.to_bytes(20, "big")


def test_example_checksum_is_mod_37():
    assert checksum_value(EXAMPLE_BYTES) == EXAMPLE_INT % 37 == 2
    assert checksum(EXAMPLE_BYTES) == "2"


@pytest.mark.parametrize("size", [0, 19, 21])
def test_pack_wrong_size(size):
    with pytest.raises(InvalidLength) as exc:
        pack(b"\x01" * size)
    assert exc.value.expected == 20
    assert exc.value.actual == size


@pytest.mark.parametrize("text", ["", EXAMPLE[:31], EXAMPLE])
def test_unpack_wrong_count(text):
    with pytest.raises(InvalidLength):
        unpack(text)


def test_unpack_reports_position():
    text = EXAMPLE[:10] + "u" + EXAMPLE[11:32]
    with pytest.raises(InvalidCharacter) as exc:
        unpack(text)
    assert exc.value.position == 10
    assert exc.value.char == "u"


def test_checksum_not_constant():
    seen = {checksum(n.to_bytes(20, "big")) for n in range(37)}
    assert len(seen) == 37
