from logging import getLogger
from pathlib import Path

from typing import Optional, Union

from .helper.exception import InvArgException


logger = getLogger(__name__)

# Name of the postal code list file inside a data directory
POSTAL_CODE_FILE = "esMX_postcodes.txt"


class ValidateConfig:
    """Configuration for the validators

    Parameters:

        - data_dir: directory holding data files (default: None). No postal
          code list ships with the package, so the strong postal code check
          needs either this or a per-call data directory
        - postal_code_file: name of the postal code list inside data_dir
          (default: "esMX_postcodes.txt")
        - require_area_code: default for phone number checks (default: True)
    """

    _OPTIONS = ("data_dir", "postal_code_file", "require_area_code")

    def __init__(self, **kwargs):
        unknown = set(kwargs) - set(self._OPTIONS)
        if unknown:
            raise InvArgException(
                "unknown configuration options: {}", ", ".join(sorted(unknown))
            )
        data_dir = kwargs.get("data_dir")
        self.data_dir = Path(data_dir) if data_dir else None
        self.postal_code_file = kwargs.get("postal_code_file") or POSTAL_CODE_FILE
        self.require_area_code = kwargs.get("require_area_code", True)

    def __repr__(self) -> str:
        return f"<ValidateConfig data_dir={self.data_dir}>"

    def postal_code_path(
        self, data_dir: Optional[Union[str, Path]] = None
    ) -> Optional[Path]:
        """
        Locate the postal code list: inside data_dir if given and the file
        is there, else in the configured data directory. Return None when
        no data directory is known at all
        """
        if data_dir is not None:
            candidate = Path(data_dir) / self.postal_code_file
            if candidate.is_file() or self.data_dir is None:
                return candidate
            logger.debug(
                "no %s in %s, using %s", self.postal_code_file, data_dir, self.data_dir
            )
        if self.data_dir is None:
            return None
        return self.data_dir / self.postal_code_file
