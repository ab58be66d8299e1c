"""
Test the CURP validator
"""

import pytest

from stdnum.exceptions import (
    InvalidLength,
    InvalidFormat,
    InvalidComponent,
    InvalidChecksum,
)

import validate_mx.curp as mod


VALID = [
    # Born abroad, before 2000
    "GOMA850101HNEXYZ19",
    # Born abroad, 2000 or later (letter as unique key)
    "GOMA050101HNEXYZA1",
    # Born in Distrito Federal
    "GOMA850101HDFXYZ13",
    # Check digit 0
    "GOMA850102HNEXYZ10",
    # Day 31 in February is not rejected
    "GOMA850231HNEXYZ18",
    # Born in Aguascalientes
    "PEPP700101HASRRD09",
]

INVALID_LENGTH = [
    "",
    "GOMA850101HNEXYZ1",
    "GOMA850101HNEXYZ190",
    "GOMA850101",
]

INVALID_FORMAT = [
    # digit where a letter goes
    "G0MA850101HNEXYZ19",
    # second letter is not a vowel
    "GBMA850101HNEXYZ19",
    # month 13
    "GOMA851301HNEXYZ19",
    # month 00
    "GOMA850001HNEXYZ19",
    # day 32
    "GOMA850132HNEXYZ19",
    # day 00
    "GOMA850100HNEXYZ19",
    # sex not H or M
    "GOMA850101XNEXYZ19",
    # vowel among the internal consonants
    "GOMA850101HNEAYZ19",
    # digit as region
    "GOMA850101H1EXYZ19",
    # non-alphanumeric check digit
    "GOMA850101HNEXYZ1*",
]


def test10_valid():
    for code in VALID:
        assert mod.is_valid(code), code
        assert mod.check(code) == code


def test11_validator_object():
    validator = mod.IdentityCodeValidator()
    for code in VALID:
        assert validator.validate(code)
        assert validator(code)
    assert not validator.validate("GOMA850101HNEXYZ18")


def test20_length():
    for code in INVALID_LENGTH:
        assert not mod.is_valid(code)
        with pytest.raises(InvalidLength):
            mod.check(code)


def test21_structure():
    for code in INVALID_FORMAT:
        assert not mod.is_valid(code), code
        with pytest.raises(InvalidFormat):
            mod.check(code)


def test30_region():
    """
    Unknown region, right check digit
    """
    assert not mod.is_valid("GOMA850101HXXXYZ12")
    with pytest.raises(InvalidComponent):
        mod.check("GOMA850101HXXXYZ12")


def test31_unique_key():
    """
    Unique key inconsistent with the birth year (check digit is right, since
    the unique key does not take part in it)
    """
    for code in ("GOMA850101HNEXYZA9", "GOMA050101HNEXYZ11"):
        assert not mod.is_valid(code)
        with pytest.raises(InvalidComponent):
            mod.check(code)


def test40_checksum():
    for code in (
        "GOMA850101HNEXYZ18",
        "GOMA850101HNEXYZ1A",
        "GOMA850101HDFXYZ19",
        "PEPP700101HASRRD01",
    ):
        assert not mod.is_valid(code)
        with pytest.raises(InvalidChecksum):
            mod.check(code)


def test50_normalization():
    """
    Separators and lowercase do not change the result
    """
    for code in (
        "GOMA-850101-HNE-XYZ-19",
        "GOMA 850101 HNEXYZ19",
        "goma850101hnexyz19",
        " GOMA850101HNEXYZ19 ",
        "G-O-M-A-8-5-0-1-0-1-H-N-E-X-Y-Z-1-9",
    ):
        assert mod.is_valid(code), code
    assert not mod.is_valid("GOMA-850101-HNE-XYZ-18")
    assert not mod.is_valid("goma850101hxxxyz12")


def test60_no_exceptions():
    """
    Any input is a boolean result
    """
    for value in (None, 12, b"GOMA850101HNEXYZ19", "Ñ" * 18, "\n" * 18, "*" * 18):
        assert mod.is_valid(value) is False


def test70_parse():
    fields = mod.parse("goma-850101-hne-xyz-19")
    assert fields == mod.CurpFields(
        "GOMA", "85", "01", "01", "H", "NE", "XYZ", "1", "9"
    )
    assert fields.code == "GOMA850101HNEXYZ19"
    assert fields.born_abroad
    assert fields.to_json() == {
        "name_code": "GOMA",
        "birth_year": "85",
        "birth_month": "01",
        "birth_day": "01",
        "sex": "H",
        "region": "NE",
        "consonants": "XYZ",
        "unique_key": "1",
        "check_digit": "9",
    }


def test71_parse_no_semantics():
    """
    parse() only checks the structure
    """
    fields = mod.parse("GOMA850101HXXXYZ10")
    assert fields.region == "XX"
    assert not fields.born_abroad
    assert mod.parse("GOMA851301HNEXYZ19") is None
    assert mod.parse("GOMA") is None


def test80_format():
    assert mod.format("goma850101hnexyz19") == "GOMA 850101 HNE XYZ 19"
    assert mod.format("GOMA850101HNEXYZ19", "-") == "GOMA-850101-HNE-XYZ-19"


def test51_only_ascii_separators():
    """
    Only "-" and space are separators; other dashes and spaces are invalid
    characters
    """
    for sep in ("–", "—", "−", " ", "\t"):
        code = "GOMA" + sep + "850101HNEXYZ19"
        assert not mod.is_valid(code), repr(code)
        assert mod.parse(code) is None


def test52_only_ascii_uppercase():
    """
    Non-ASCII letters are not folded into ASCII ones
    """
    for code in ("GOMA850101HNEßZ18", "GOMA850101HNEſSZ18"):
        assert len(code) == 17
        assert not mod.is_valid(code), repr(code)
    assert not mod.is_valid("GOMA850101HNEXYZ1ı")
