"""
Definition of the main Validator object
"""

import inspect
import logging
from collections import defaultdict

from typing import Dict, Iterable, Tuple, Union, Callable

from ..config import ValidateConfig
from ..curp import IdentityCodeValidator
from ..region import is_valid_region
from ..postal import postal_code
from ..phone import is_valid_phone_number
from ..valenum import IdEnum
from ..helper.exception import InvArgException


logger = logging.getLogger(__name__)

# Alternative names accepted for identifier kinds
_ALIASES = {"postal": IdEnum.POSTAL_CODE, "phone": IdEnum.PHONE_NUMBER}


def id_kind(kind: Union[IdEnum, str]) -> IdEnum:
    """
    Convert an identifier kind name into an IdEnum
    """
    if isinstance(kind, IdEnum):
        return kind
    if isinstance(kind, str):
        name = kind.strip().lower().replace("-", "_")
        if name in _ALIASES:
            return _ALIASES[name]
        try:
            return IdEnum[name.upper()]
        except KeyError:
            pass
    raise InvArgException("unknown identifier kind: {}", kind)


class Validator:
    def __init__(self, config: ValidateConfig = None, **kwargs):
        """
        Initialize a validator object. Either pass a ValidateConfig object
        or the configuration options as keyword arguments
        """
        self.config = config if config is not None else ValidateConfig(**kwargs)
        self.stats = defaultdict(int)
        self._curp = IdentityCodeValidator()
        self._dispatch: Dict[IdEnum, Callable] = {
            IdEnum.CURP: self.curp,
            IdEnum.REGION: self.region,
            IdEnum.POSTAL_CODE: self.postal_code,
            IdEnum.PHONE_NUMBER: self.phone_number,
        }

    def __repr__(self) -> str:
        return f"<Validator (calls: {self.stats['calls']})>"

    def curp(self, value: str) -> bool:
        return self._curp.validate(value)

    def region(self, value: str) -> bool:
        return is_valid_region(value)

    def postal_code(
        self, value: Union[str, int], strong_check: bool = False, data_dir=None
    ) -> bool:
        return postal_code(
            value, strong_check=strong_check, data_dir=data_dir, config=self.config
        )

    def phone_number(self, value: str, require_area_code: bool = None) -> bool:
        if require_area_code is None:
            require_area_code = self.config.require_area_code
        return is_valid_phone_number(value, require_area_code)

    def validate(self, kind: Union[IdEnum, str], value, **options) -> bool:
        """
        Validate a value of the given identifier kind. Options are passed
        to the specific check (e.g. strong_check for postal codes)
        """
        kind = id_kind(kind)
        check = self._dispatch[kind]
        try:
            inspect.signature(check).bind(value, **options)
        except TypeError as e:
            raise InvArgException("invalid options for {}: {}", kind.name, e) from e
        result = check(value, **options)
        self.stats["calls"] += 1
        self.stats["valid" if result else "invalid"] += 1
        if not result:
            logger.debug("invalid %s: %r", kind.name, value)
        return result

    def validate_many(
        self, kind: Union[IdEnum, str], values: Iterable, **options
    ) -> Iterable[Tuple[str, bool]]:
        """
        Validate a sequence of values, producing (value, result) tuples
        """
        kind = id_kind(kind)
        for value in values:
            yield value, self.validate(kind, value, **options)
