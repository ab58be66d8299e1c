"""
Enumeration of the identifier kinds that can be validated
"""

from enum import Enum, auto


class IdEnum(str, Enum):
    CURP = auto()
    REGION = auto()
    POSTAL_CODE = auto()
    PHONE_NUMBER = auto()
