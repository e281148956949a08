"""Check a SIF CSV file against the WPS field rules before submitting it.

Usage:
    python scripts/check_sif.py path/to/SIF_1234567_QNB_20251031_0930.csv
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from wpsif.core.exceptions import ImportFormatError, SifFormatError
from wpsif.sif import parse_sif
from wpsif.transfer import decode_upload
from wpsif.validation import validate_employee, validate_employer_settings


def check(text: str) -> list[str]:
    """Every problem found in a SIF file, header first."""
    document = parse_sif(text)
    problems = list(document.warnings)
    if document.employer is not None:
        problems.extend(validate_employer_settings(document.employer))
    for index, employee in enumerate(document.employees, start=1):
        for message in validate_employee(employee):
            problems.append(f"Record {index:06d}: {message}")
    return problems


def main() -> int:
    parser = argparse.ArgumentParser(description="Check a WPS SIF CSV file")
    parser.add_argument("path", type=Path, help="SIF CSV file")
    args = parser.parse_args()

    try:
        problems = check(decode_upload(args.path.read_bytes()))
    except (ImportFormatError, SifFormatError) as exc:
        print(f"  {exc}")
        return 2

    for problem in problems:
        print(f"  {problem}")
    print("OK" if not problems else f"{len(problems)} problem(s)")
    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main())
