"""Manual check of the daily congestion tax for a set of passages.

Run from the repository root with:
  PYTHONPATH=src python scripts/tax_check.py --vehicle car \
    2013-02-07T06:23:27 2013-02-07T15:27:00

Passages may also be read from a file with one timestamp per line:
  PYTHONPATH=src python scripts/tax_check.py --vehicle car --file passages.txt

Debug helpers:
  --debug enables library debug logging.
  --traceback prints full tracebacks on errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path

from pycongestiontax import CongestionTaxCalculator, CongestionTaxError, TaxResult


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("passages", nargs="*", help="ISO 8601 timestamps, naive local time.")
    parser.add_argument("--vehicle", help="Vehicle type, for example car or motorcycle.")
    parser.add_argument("--file", type=Path, help="File with one timestamp per line.")
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--traceback", action="store_true")
    return parser.parse_args(argv)


def _read_passages(args: argparse.Namespace) -> list[str]:
    passages = list(args.passages)
    if args.file is not None:
        lines = args.file.read_text(encoding="utf-8").splitlines()
        passages.extend(line.strip() for line in lines if line.strip())
    return passages


def _format_result(result: TaxResult) -> list[str]:
    lines = []
    for charge in result.groups:
        times = ", ".join(passage.strftime("%H:%M:%S") for passage in charge.group.passages)
        lines.append(f"- {charge.group.anchor.date().isoformat()} [{times}] -> {charge.fee}")
    suffix = " (daily maximum)" if result.capped else ""
    lines.append(f"Total: {result.total}{suffix}")
    return lines


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    calculator = CongestionTaxCalculator()
    try:
        result = calculator.evaluate(args.vehicle, _read_passages(args))
    except (CongestionTaxError, OSError) as exc:
        if args.traceback:
            traceback.print_exc()
        print(f"Error: {exc.__class__.__name__}: {exc}", file=sys.stderr)
        return 1

    print(f"Vehicle: {args.vehicle or '-'}")
    for line in _format_result(result):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
