"""
Mexican region (state) codes, as used in the CURP

Besides the 32 state codes, a CURP may carry the code "NE" (nacido en el
extranjero) for people born abroad; that one is not a state and is not part
of the catalog.
"""

from types import MappingProxyType

from typing import Optional


# Region code for people born outside Mexico
FOREIGN_BORN = "NE"

REGION_NAMES = MappingProxyType(
    {
        "AS": "Aguascalientes",
        "BC": "Baja California",
        "BS": "Baja California Sur",
        "CC": "Campeche",
        "CL": "Coahuila",
        "CM": "Colima",
        "CS": "Chiapas",
        "CH": "Chihuahua",
        "DF": "Distrito Federal",
        "DG": "Durango",
        "GT": "Guanajuato",
        "GR": "Guerrero",
        "HG": "Hidalgo",
        "JC": "Jalisco",
        "MC": "México",
        "MN": "Michoacán",
        "MS": "Morelos",
        "NT": "Nayarit",
        "NL": "Nuevo León",
        "OC": "Oaxaca",
        "PL": "Puebla",
        "QT": "Querétaro",
        "QR": "Quintana Roo",
        "SP": "San Luis Potosí",
        "SL": "Sinaloa",
        "SR": "Sonora",
        "TC": "Tabasco",
        "TS": "Tamaulipas",
        "TL": "Tlaxcala",
        "VZ": "Veracruz",
        "YN": "Yucatán",
        "ZS": "Zacatecas",
    }
)

REGIONS = frozenset(REGION_NAMES)


def is_valid_region(code: str) -> bool:
    """
    Check that a code is one of the 32 region codes (case-insensitive)
    """
    if not isinstance(code, str):
        return False
    return code.upper() in REGIONS


def region_name(code: str) -> Optional[str]:
    """
    Return the name of the state for a region code, or None if the code
    is not valid
    """
    if not is_valid_region(code):
        return None
    return REGION_NAMES[code.upper()]
