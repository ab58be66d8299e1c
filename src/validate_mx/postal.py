"""
Mexican postal codes

Two checks are available:
  * format: a postal code is made of exactly 5 digits
  * existence: the code must be in a list of known postal codes, read from
    a file (one code per line). The list is loaded once per file and
    process, and shared
"""

import logging
import threading
from pathlib import Path

import regex
from stdnum.util import isdigits

from typing import Dict, FrozenSet, Iterable, Optional, Union

from .config import ValidateConfig
from .helper.fileio import openfile


logger = logging.getLogger(__name__)

TYPE_CODE = Union[str, int]

_POSTAL_CODE_REGEX = regex.compile(r"[0-9]{5}")


def _as_int(code: TYPE_CODE) -> Optional[int]:
    if isinstance(code, bool):
        return None
    if isinstance(code, int):
        return code
    if isinstance(code, str):
        code = code.strip()
        if code and isdigits(code):
            return int(code)
    return None


def is_valid_postal_code_format(code: TYPE_CODE) -> bool:
    """
    Check that a postal code is made of exactly 5 digits
    """
    if isinstance(code, int) and not isinstance(code, bool):
        code = str(code)
    if not isinstance(code, str):
        return False
    return _POSTAL_CODE_REGEX.fullmatch(code) is not None


def postal_code_exists(code: TYPE_CODE, known_codes: Iterable[int]) -> bool:
    """
    Check that a postal code is in a set of known codes (compared as
    integers, so "01000" and 1000 are the same code)
    """
    value = _as_int(code)
    if value is None:
        return False
    return value in known_codes


# --------------------------------------------------------------------------


class PostalCodeStore:
    """
    The set of known postal codes held in a file. The file is read on first
    use; a failed read is not cached, so it is retried on the next access
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._codes = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        state = "loaded" if self._codes is not None else "not loaded"
        return f"<PostalCodeStore {self.path} ({state})>"

    @property
    def codes(self) -> FrozenSet[int]:
        """
        The set of postal codes, loading it if needed. Raises OSError if the
        file cannot be read
        """
        if self._codes is None:
            with self._lock:
                if self._codes is None:
                    self._codes = self._load()
        return self._codes

    def _load(self) -> FrozenSet[int]:
        codes = set()
        with openfile(self.path, "rt") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                if not isdigits(line):
                    logger.warning(
                        "%s:%d: skipping invalid postal code %r",
                        self.path,
                        lineno,
                        line,
                    )
                    continue
                codes.add(int(line))
        logger.info("loaded %d postal codes from %s", len(codes), self.path)
        return frozenset(codes)

    def __len__(self) -> int:
        return len(self.codes)

    def __contains__(self, code: TYPE_CODE) -> bool:
        return postal_code_exists(code, self.codes)


# Process-wide stores, indexed by resolved file path
_STORES: Dict[Path, PostalCodeStore] = {}
_STORES_LOCK = threading.Lock()


def get_store(path: Union[str, Path]) -> PostalCodeStore:
    """
    Return the shared store for a postal code file
    """
    key = Path(path).resolve()
    with _STORES_LOCK:
        store = _STORES.get(key)
        if store is None:
            store = _STORES[key] = PostalCodeStore(key)
    return store


def clear_cache():
    """
    Forget all loaded postal code lists
    """
    with _STORES_LOCK:
        _STORES.clear()


# --------------------------------------------------------------------------


def postal_code(
    code: TYPE_CODE,
    strong_check: bool = False,
    data_dir: Optional[Union[str, Path]] = None,
    config: Optional[ValidateConfig] = None,
) -> bool:
    """
    Validate a postal code
     :param code: the postal code
     :param strong_check: if True, check that the code exists in the postal
        code list file. If False, just check the format
     :param data_dir: directory containing the postal code list (if the
        file is not there, the configured data directory is used)
     :param config: configuration object (for the default data directory).
        Without any data directory the strong check fails
    """
    if not strong_check:
        return is_valid_postal_code_format(code)

    if config is None:
        config = ValidateConfig()
    path = config.postal_code_path(data_dir)
    if path is None:
        logger.warning("no data directory given for the postal code list")
        return False
    try:
        return code in get_store(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("cannot read postal code list %s: %s", path, e)
        return False
