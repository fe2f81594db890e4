"""
Birth number checking command-line interface.

Reads birth numbers (one per line) from a file or standard input, validates
each of them and writes one result line per number to a file or standard
output.  Optional ``--sex`` and ``--date`` hints are applied to every number.
Input lines are only stripped of surrounding whitespace, formatted numbers
(``891102/0019``) are reported as invalid.

---

# Quick ways to run the script

1. Using a file

>>> birth-number-check numbers.txt -o results.txt

2. Piping data

>>> echo "8911020019" | birth-number-check --sex male --json

The exit status is ``0`` when every number is valid and ``1`` otherwise.
"""

import argparse
import datetime
import json
import sys

from birth_number_lib.data_models.constants import Sex
from birth_number_lib.utils.logger import prepare_logger
from birth_number_lib.validator import BirthNumberValidator


def _parse_date(value: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid date {value!r}, expected YYYY-MM-DD"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate Czech birth numbers (rodné číslo)."
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file with one birth number per line (defaults to STDIN).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=argparse.FileType("w", encoding="utf-8"),
        default=sys.stdout,
        help="Output file (defaults to STDOUT).",
    )
    parser.add_argument(
        "--sex",
        type=str.upper,
        choices=[s.value for s in Sex],
        default=None,
        help="Expected sex of every birth number.",
    )
    parser.add_argument(
        "--date",
        type=_parse_date,
        default=None,
        help="Expected birth date (YYYY-MM-DD) of every birth number.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write one JSON object per line instead of tab separated text.",
    )
    return parser


def format_result(result, as_json: bool) -> str:
    if as_json:
        return json.dumps(result.as_dict(), ensure_ascii=False)
    status = "OK" if result.is_valid else result.error_code.value
    return f"{result.code}\t{status}"


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = prepare_logger("birth_number_cli")

    validator = BirthNumberValidator()

    checked = 0
    invalid = 0
    for line in args.input:
        code = line.strip()
        if not code:
            continue
        result = validator.check(code, expected_sex=args.sex, expected_date=args.date)
        checked += 1
        if not result.is_valid:
            invalid += 1
        args.output.write(format_result(result, args.json) + "\n")

    args.output.flush()
    logger.info("Checked %d birth numbers, %d invalid", checked, invalid)
    return 1 if invalid else 0


if __name__ == "__main__":
    sys.exit(main())
