"""
Mexican telephone numbers (format check only)

Local numbers have 7 or 8 digits (8 only in the three large metropolitan
areas). With the long-distance prefix, a number is "01" followed by 10
digits.
"""

import regex

from stdnum.exceptions import ValidationError

from .helper.normalizer import normalize


# Formatting characters removed before checking
PHONE_SEPARATORS = "()-+. "

_AREA_CODE_REGEX = regex.compile(r"01 [0-9]{10}", flags=regex.X)
_LOCAL_REGEX = regex.compile(r"[0-9]{7,8}")


def is_valid_phone_number(phone: str, require_area_code: bool = True) -> bool:
    try:
        number = normalize(phone, PHONE_SEPARATORS, uppercase=False)
    except ValidationError:
        return False
    pattern = _AREA_CODE_REGEX if require_area_code else _LOCAL_REGEX
    return pattern.fullmatch(number) is not None


def phone(number: str, require_area_code: bool = True) -> bool:
    """
    Alias for is_valid_phone_number()
    """
    return is_valid_phone_number(number, require_area_code)
