"""
Validation of the CURP (Clave Única de Registro de Población), the Mexican
national identity code

A CURP has 18 characters:
  * 4 letters taken from the names, the second one a vowel
  * birth date, as YYMMDD
  * sex: H or M
  * region of birth (2 letters), or NE for people born abroad
  * 3 internal consonants of the names
  * a unique key: a digit for people born before 2000, a letter after that
  * a check digit

Follows the python-stdnum conventions: compact() cleans up a value, check()
raises a ValidationError subclass for invalid values and is_valid() turns
that into a boolean.
"""

import logging

import regex

from typing import Dict, Optional

from stdnum.exceptions import (
    ValidationError,
    InvalidLength,
    InvalidFormat,
    InvalidComponent,
    InvalidChecksum,
)

from .checksum import compute_check_digit, PREFIX_LENGTH
from .helper.normalizer import normalize
from .region import is_valid_region, FOREIGN_BORN


logger = logging.getLogger(__name__)

CURP_LENGTH = 18

# Fixed-width fields, in order: (name, width, pattern)
_FIELDS = (
    ("name_code", 4, r"[A-Z] [AEIOU] [A-Z]{2}"),
    ("birth_year", 2, r"[0-9]{2}"),
    ("birth_month", 2, r"0?[1-9] | 1[0-2]"),
    ("birth_day", 2, r"0[1-9] | [12][0-9] | 3[01]"),
    ("sex", 1, r"[HM]"),
    ("region", 2, r"[A-Z]{2}"),
    ("consonants", 3, r"[B-DF-HJ-NP-TV-Z]{3}"),
    ("unique_key", 1, r"[0-9A-Z]"),
    ("check_digit", 1, r"[0-9A-Z]"),
)

_FIELD_REGEX = tuple(
    (name, width, regex.compile(pattern, flags=regex.X | regex.I | regex.A))
    for name, width, pattern in _FIELDS
)

_LETTER = regex.compile(r"[A-Z]", flags=regex.I | regex.A)
_DIGIT = regex.compile(r"[0-9]")

# Display groups for format(): name, birth date, sex & region, consonants,
# unique key & check digit
_GROUPS = ((0, 4), (4, 10), (10, 13), (13, 16), (16, 18))


# --------------------------------------------------------------------------


class CurpFields:
    """
    The fields of a structurally valid CURP. All fields are strings, in the
    same order and width as in the code
    """

    __slots__ = tuple(f[0] for f in _FIELDS)

    def __init__(
        self,
        name_code: str,
        birth_year: str,
        birth_month: str,
        birth_day: str,
        sex: str,
        region: str,
        consonants: str,
        unique_key: str,
        check_digit: str,
    ):
        self.name_code = name_code
        self.birth_year = birth_year
        self.birth_month = birth_month
        self.birth_day = birth_day
        self.sex = sex
        self.region = region
        self.consonants = consonants
        self.unique_key = unique_key
        self.check_digit = check_digit

    @property
    def code(self) -> str:
        return "".join(getattr(self, f) for f in self.__slots__)

    @property
    def born_abroad(self) -> bool:
        return self.region == FOREIGN_BORN

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"<CurpFields {self.code}>"

    def __eq__(self, other):
        if not isinstance(other, CurpFields):
            return NotImplemented
        return all(getattr(self, f) == getattr(other, f) for f in self.__slots__)

    def to_json(self) -> Dict:
        """
        Return the fields as a dict that can be serialised as JSON
        """
        return {f: getattr(self, f) for f in self.__slots__}


def _split_fields(number: str) -> CurpFields:
    """
    Decompose a compact code into its fields, checking the character class
    of each one
    """
    if len(number) != CURP_LENGTH:
        raise InvalidLength()
    values = []
    pos = 0
    for name, width, field_regex in _FIELD_REGEX:
        value = number[pos : pos + width]
        if not field_regex.fullmatch(value):
            raise InvalidFormat(f"invalid {name} field: {value!r}")
        values.append(value)
        pos += width
    return CurpFields(*values)


def _check_unique_key(fields: CurpFields):
    """
    Births from 2000 on (year starting with 0) get a letter as unique key,
    earlier ones a digit
    """
    if fields.birth_year[0] == "0":
        if not _LETTER.fullmatch(fields.unique_key):
            raise InvalidComponent("unique key should be a letter for 2000+ births")
    elif not _DIGIT.fullmatch(fields.unique_key):
        raise InvalidComponent("unique key should be a digit for pre-2000 births")


# --------------------------------------------------------------------------


def compact(number: str) -> str:
    """
    Convert to the minimal representation: uppercase, no separators
    """
    return normalize(number)


def check(number: str) -> str:
    """
    Check a CURP. Return the compact code if valid, raise a
    stdnum.exceptions.ValidationError subclass otherwise
    """
    number = compact(number)
    fields = _split_fields(number)

    if fields.region != FOREIGN_BORN and not is_valid_region(fields.region):
        raise InvalidComponent(f"unknown region code: {fields.region}")

    _check_unique_key(fields)

    if len(number) < PREFIX_LENGTH:
        raise InvalidLength()
    if compute_check_digit(number[:PREFIX_LENGTH]) != fields.check_digit.upper():
        raise InvalidChecksum()

    return number


def is_valid(number: str) -> bool:
    """
    Check a CURP, returning a boolean. It never raises for invalid values
    """
    try:
        return bool(check(number))
    except ValidationError as e:
        logger.debug("invalid CURP %r: %s", number, e)
        return False


def parse(number: str) -> Optional[CurpFields]:
    """
    Decompose a code into its fields, without checking region, unique key
    or check digit. Return None if the code is not structurally valid
    """
    try:
        return _split_fields(compact(number))
    except ValidationError:
        return None


def format(number: str, separator: str = " ") -> str:
    """
    Reformat a CURP for display, splitting it in groups
    """
    number = compact(number)
    return separator.join(number[start:end] for start, end in _GROUPS)


# --------------------------------------------------------------------------


class IdentityCodeValidator:
    """
    Validator object for CURP codes
    """

    pii_name = "Mexican CURP"

    def validate(self, raw_code: str) -> bool:
        """
        Return True if the code is a valid CURP: right structure, known
        region, unique key consistent with the birth year and matching check
        digit
        """
        return is_valid(raw_code)

    def parse(self, raw_code: str) -> Optional[CurpFields]:
        return parse(raw_code)

    def __call__(self, raw_code: str) -> bool:
        return self.validate(raw_code)

    def __repr__(self) -> str:
        return f"<IdentityCodeValidator: {self.pii_name}>"
