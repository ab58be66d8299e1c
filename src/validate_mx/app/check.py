"""
Command-line script to validate Mexican identifiers
"""

import sys
import json
import logging
import argparse

from typing import Dict, Iterable, List, TextIO

from validate_mx import VERSION
from validate_mx.api import Validator
from validate_mx.config import ValidateConfig
from validate_mx.curp import parse
from validate_mx.helper.fileio import openfile
from validate_mx.valenum import IdEnum


logger = logging.getLogger(__name__)

KINDS = {
    "curp": IdEnum.CURP,
    "region": IdEnum.REGION,
    "postal": IdEnum.POSTAL_CODE,
    "phone": IdEnum.PHONE_NUMBER,
}


def read_values(infile: str) -> Iterable[str]:
    """
    Read values to validate from a file, one per line (empty lines skipped)
    """
    with openfile(infile, "rt") as f:
        for line in f:
            line = line.rstrip("\r\n")
            if line.strip():
                yield line


def write_result(kind: IdEnum, value: str, valid: bool, json_out: bool, out: TextIO):
    if not json_out:
        print(f"{value}\t{'valid' if valid else 'invalid'}", file=out)
        return
    elem = {"type": kind.name, "value": value, "valid": valid}
    if kind == IdEnum.CURP:
        fields = parse(value)
        if fields is not None:
            elem["fields"] = fields.to_json()
    json.dump(elem, out, ensure_ascii=False)
    print(file=out)


def process(
    kind: str,
    values: Iterable[str],
    out: TextIO = None,
    json_out: bool = False,
    strong_check: bool = False,
    data_dir: str = None,
    no_area_code: bool = False,
) -> Dict:
    """
    Validate all values and write the results. Return the stats
    """
    if out is None:
        out = sys.stdout
    kind = KINDS[kind]
    config = ValidateConfig(data_dir=data_dir, require_area_code=not no_area_code)
    validator = Validator(config)

    options = {}
    if kind == IdEnum.POSTAL_CODE:
        options = {"strong_check": strong_check, "data_dir": data_dir}

    for value, valid in validator.validate_many(kind, values, **options):
        write_result(kind, value, valid, json_out, out)
    return dict(validator.stats)


def parse_args(args: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"Validate Mexican identifiers (version {VERSION})"
    )

    g0 = parser.add_argument_group("Input")
    g0.add_argument("kind", choices=sorted(KINDS), help="identifier kind")
    g0.add_argument("values", nargs="*", help="values to validate")
    g0.add_argument("--infile", help="read values from a file, one per line")

    g1 = parser.add_argument_group("Postal codes")
    g1.add_argument(
        "--strong-check",
        action="store_true",
        help="check that the postal code exists in the postal code list",
    )
    g1.add_argument("--data-dir", help="directory containing the postal code list")

    g2 = parser.add_argument_group("Phone numbers")
    g2.add_argument(
        "--no-area-code",
        action="store_true",
        help="validate local numbers (7 or 8 digits), without the 01 prefix",
    )

    g3 = parser.add_argument_group("Other")
    g3.add_argument("--json", action="store_true", help="produce NDJSON output")
    g3.add_argument("--debug", action="store_true", help="debug mode")

    parsed = parser.parse_args(args)
    if not (parsed.values or parsed.infile):
        parser.error("no values to validate (give them as arguments or --infile)")
    return parsed


def main(args: List[str] = None) -> int:
    if args is None:
        args = sys.argv[1:]
    args = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    args = vars(args)
    values = args.pop("values")
    infile = args.pop("infile")
    if infile:
        values = list(values) + list(read_values(infile))
    json_out = args.pop("json")
    args.pop("debug")

    stats = process(args.pop("kind"), values, json_out=json_out, **args)
    logger.debug("stats: %s", stats)
    return 0 if not stats.get("invalid") else 1


if __name__ == "__main__":
    sys.exit(main())
