import bz2
import lzma
import sys

import validate_mx.helper.fileio as mod


def test10_plain(tmp_path):
    name = tmp_path / "codes.txt"
    name.write_text("01000\n", encoding="utf-8")
    with mod.openfile(name) as f:
        assert f.read() == "01000\n"


def test20_compressed(tmp_path):
    for suffix, opener in ((".bz2", bz2.open), (".xz", lzma.open)):
        name = tmp_path / ("codes.txt" + suffix)
        with opener(name, "wt", encoding="utf-8") as f:
            f.write("06600\n")
        with mod.openfile(name, "rt") as f:
            assert f.read() == "06600\n"


def test30_std():
    assert mod.openfile("-", "rt") is sys.stdin
    assert mod.openfile("-", "wt") is sys.stdout
