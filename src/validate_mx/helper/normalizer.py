"""
Cleanup of identifier strings before validation
"""

import string

from stdnum.exceptions import InvalidFormat

# Separators allowed inside identifiers, removed before any check
DEFAULT_SEPARATORS = " -"

# Uppercasing is restricted to ASCII letters
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def normalize(
    value: str, deletechars: str = DEFAULT_SEPARATORS, uppercase: bool = True
) -> str:
    """
    Remove separator characters and (optionally) convert ASCII letters to
    uppercase. Only the exact characters in deletechars are removed, and
    non-ASCII characters are left untouched.
    Raises stdnum.exceptions.InvalidFormat if the value is not a string
    """
    if not isinstance(value, str):
        raise InvalidFormat("not a string")
    value = "".join(c for c in value if c not in deletechars)
    if uppercase:
        value = value.translate(_ASCII_UPPER)
    return value
