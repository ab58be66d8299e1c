"""
Check digit of the CURP

Each character is mapped to a two-digit value through a fixed alphabet, all
values are concatenated into a digit stream, and the units digit of every
character value (but the last one) is weighted by its position. The check
digit is the complement to 10 of the weighted sum.
"""

from types import MappingProxyType

from .helper.exception import InvArgException, ChecksumInvariantError


# Symbol order defines the value of each symbol ("-" stands for Ñ, "*" is
# the wildcard)
CHECKSUM_ALPHABET = "0123456789ABCDEFGHIJKLMN-OPQRSTUVWXYZ*"

# Value for symbols outside the alphabet
UNKNOWN_SYMBOL_VALUE = "00"

# Number of leading characters the check digit is computed over
PREFIX_LENGTH = 17

_SYMBOL_VALUES = MappingProxyType(
    {symbol: f"{pos:02d}" for pos, symbol in enumerate(CHECKSUM_ALPHABET)}
)


def symbol_value(symbol: str) -> str:
    """
    Return the two-digit value of a symbol ("00" for unknown symbols)
    """
    return _SYMBOL_VALUES.get(symbol, UNKNOWN_SYMBOL_VALUE)


def digit_stream(code: str) -> str:
    """
    Concatenate the two-digit values of all characters in a code
    """
    return "".join(symbol_value(c) for c in code)


def compute_check_digit(code17: str) -> str:
    """
    Compute the check digit over the first 17 characters of a CURP.
    Characters past the 17th are ignored.
     :param code17: the normalized (uppercase, no separators) code prefix
     :return: the check digit, as a one-character string
    """
    if len(code17) < PREFIX_LENGTH:
        raise InvArgException(
            "check digit needs {} characters, got {}", PREFIX_LENGTH, len(code17)
        )
    stream = digit_stream(code17[:PREFIX_LENGTH])

    total = sum(int(stream[i * 2 - 1]) * (19 - i) for i in range(1, PREFIX_LENGTH))
    remainder = total % 10
    digit = 0 if remainder == 0 else 10 - remainder

    if not 0 <= digit <= 9:
        raise ChecksumInvariantError("check digit out of range: {}", digit)
    return str(digit)
