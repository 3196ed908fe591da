# Crockford base32 alphabets. The symbol order is part of every encoded
# value; do not reorder.
LOWERCASE_ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"
UPPERCASE_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

# Five extra symbols (values 32-36) used only for check digits
LOWERCASE_CHECKSUM = LOWERCASE_ALPHABET + "*~$=u"
UPPERCASE_CHECKSUM = UPPERCASE_ALPHABET + "*~$=U"

CHECKSUM_BASE = len(UPPERCASE_CHECKSUM)


def checksum_alphabet(uppercase: bool) -> str:
    return UPPERCASE_CHECKSUM if uppercase else LOWERCASE_CHECKSUM
