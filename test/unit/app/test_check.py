"""
Test the command-line script
"""

import io
import json
from pathlib import Path

import pytest

import validate_mx.app.check as mod


DATADIR = Path(__file__).parents[2] / "data"


def test10_process():
    out = io.StringIO()
    stats = mod.process("curp", ["GOMA850101HNEXYZ19", "GOMA850101HNEXYZ18"], out)
    assert stats == {"calls": 2, "valid": 1, "invalid": 1}
    assert out.getvalue() == "GOMA850101HNEXYZ19\tvalid\nGOMA850101HNEXYZ18\tinvalid\n"


def test20_json():
    out = io.StringIO()
    mod.process("curp", ["GOMA-850101-HNE-XYZ-19", "XX"], out, json_out=True)
    lines = [json.loads(line) for line in out.getvalue().splitlines()]
    assert lines[0]["type"] == "CURP"
    assert lines[0]["valid"] is True
    assert lines[0]["fields"]["region"] == "NE"
    assert lines[1] == {"type": "CURP", "value": "XX", "valid": False}


def test30_phone_options():
    out = io.StringIO()
    stats = mod.process("phone", ["5512345"], out, no_area_code=True)
    assert stats["valid"] == 1
    stats = mod.process("phone", ["5512345"], out)
    assert stats["invalid"] == 1


def test40_main(capsys):
    assert mod.main(["curp", "GOMA850101HNEXYZ19"]) == 0
    assert mod.main(["region", "DF", "XX"]) == 1
    captured = capsys.readouterr()
    assert "DF\tvalid" in captured.out
    assert "XX\tinvalid" in captured.out


def test50_main_infile(tmp_path, capsys):
    infile = tmp_path / "codes.txt"
    infile.write_text("06600\n\n12345\n", encoding="utf-8")
    args = ["postal", "--infile", str(infile), "--strong-check"]
    assert mod.main(args + ["--data-dir", str(DATADIR)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "06600\tvalid\n12345\tinvalid\n"


def test60_no_values():
    with pytest.raises(SystemExit):
        mod.main(["curp"])


def test70_debug_flag(capsys):
    assert mod.main(["--debug", "curp", "GOMA850101HNEXYZ19"]) == 0
    assert capsys.readouterr().out == "GOMA850101HNEXYZ19\tvalid\n"
    # process() takes no stray options
    with pytest.raises(TypeError):
        mod.process("curp", ["GOMA850101HNEXYZ19"], io.StringIO(), debug=True)
