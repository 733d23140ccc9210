"""crockid protocol constants.

Single source of truth for identifier sizes and symbol tables.
Keep this file stable. Encoder and verifier must remain synchronized.
"""

# Payload sizing
PAYLOAD_BYTES = 20
PAYLOAD_BITS = PAYLOAD_BYTES * 8  # 160
BITS_PER_SYMBOL = 5

# Encoded form: [Payload(32) | Check(1)] = 33 symbols
PAYLOAD_SYMBOLS = PAYLOAD_BITS // BITS_PER_SYMBOL
ENCODED_LEN = PAYLOAD_SYMBOLS + 1

MAX_INT = (1 << PAYLOAD_BITS) - 1

# Crockford base32 symbol set (no i, l, o, u), canonical lowercase
SYMBOLS = "0123456789abcdefghjkmnpqrstvwxyz"
# Only valid in the check position
CHECK_ONLY_SYMBOLS = "*~$=u"
CHECK_SYMBOLS = SYMBOLS + CHECK_ONLY_SYMBOLS

# Prime modulus for the check symbol
CHECK_MODULUS = len(CHECK_SYMBOLS)  # 37

# Look-alike characters accepted on input
ALIASES = {
    "i": "1",
    "l": "1",
    "o": "0",
}
