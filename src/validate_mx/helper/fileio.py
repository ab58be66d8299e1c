"""
Opening of data files, raw text or compressed
"""

import sys
import gzip
import bz2
import lzma
from pathlib import Path

from typing import TextIO, Union


def openfile(name: Union[str, Path], mode: str = "rt") -> TextIO:
    """
    Open files, raw text or compressed (gzip, bzip2 or xz). The name "-"
    stands for stdin/stdout
    """
    name = str(name)
    if name == "-":
        return sys.stdout if mode.startswith("w") else sys.stdin
    elif name.endswith(".gz"):
        return gzip.open(name, mode, encoding="utf-8")
    elif name.endswith(".bz2"):
        return bz2.open(name, mode, encoding="utf-8")
    elif name.endswith(".xz"):
        return lzma.open(name, mode, encoding="utf-8")
    else:
        return open(name, mode, encoding="utf-8")
