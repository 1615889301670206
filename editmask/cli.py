"""
editmask – command-line interface
=================================

Usage
-----
::

    python -m editmask.cli MASK [VALUE ...] [OPTIONS]

Options
-------
--remove, -r          Strip the mask from each value instead of applying it.
--input, -i           Read values from FILE, one per line.
--compile             Print the compiled mask elements instead of values.
--placeholder, -p     Space placeholder when MASK has no third field.
--date-separator      Character printed for ``/`` (default ``/``).
--time-separator      Character printed for ``:`` (default ``:``).
--system-locale       Take both separators from the process locale.
--output, -o          Output file path (default: stdout).
--format, -f          Output format: ``text`` (default) or ``json``.
--verbose, -v         Enable DEBUG logging.

Examples
--------
::

    python -m editmask.cli "(999) 999-9999;0" 8005551212
    python -m editmask.cli "(999) 999-9999;1" "(800) 555-1212" --remove
    python -m editmask.cli "!99/99/9999;0; " -i dates.txt -f json -o out.json
    python -m editmask.cli ">LL[0-9]-000" --compile
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .errors import InvalidMask
from .models import LocaleSeparators
from .pipeline.locale_provider import system_separators
from .pipeline.mask_formatter import MaskFormatter


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="editmask",
        description="editmask – apply or remove Delphi/Lazarus edit masks",
    )
    p.add_argument("mask", help='Mask text, e.g. "(999) 999-9999;0;_"')
    p.add_argument("values", nargs="*", metavar="VALUE", help="Values to format")
    p.add_argument(
        "--remove", "-r",
        action="store_true",
        help="Remove the mask from each value instead of applying it",
    )
    p.add_argument(
        "--input", "-i",
        default="",
        metavar="FILE",
        help="Read additional values from FILE, one per line",
    )
    p.add_argument(
        "--compile",
        action="store_true",
        help="Print the compiled mask elements and exit",
    )
    p.add_argument(
        "--placeholder", "-p",
        default="_",
        metavar="CHAR",
        help="Space placeholder used when MASK has no third field (default: _)",
    )
    p.add_argument(
        "--date-separator",
        default="/",
        metavar="CHAR",
        help="Date separator printed for '/' (default: /)",
    )
    p.add_argument(
        "--time-separator",
        default=":",
        metavar="CHAR",
        help="Time separator printed for ':' (default: :)",
    )
    p.add_argument(
        "--system-locale",
        action="store_true",
        help="Use the date / time separators of the current locale",
    )
    p.add_argument(
        "--output", "-o",
        default="-",
        metavar="FILE",
        help="Output file (default: stdout)",
    )
    p.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return p


def _format_compiled(formatter: MaskFormatter) -> str:
    lines = [
        f"Pattern      : {formatter.spec.pattern}",
        f"Save literals: {'yes' if formatter.spec.save_formatted else 'no'}",
        f"Placeholder  : {formatter.spec.space_placeholder!r}",
        f"Direction    : {'right-to-left' if formatter.compiled.right_to_left else 'left-to-right'}",
        f"{'─' * 60}",
    ]
    for pos, element in enumerate(formatter.compiled.elements):
        detail = element.to_dict()
        kind = detail.pop("kind")
        extras = ", ".join(f"{k}={v!r}" for k, v in detail.items())
        lines.append(f"  {pos:>3}  {kind:<22} {extras}")
    return "\n".join(lines)


def _read_values(args: argparse.Namespace) -> List[str]:
    values = list(args.values)
    if args.input:
        text = Path(args.input).read_text(encoding="utf-8")
        values.extend(text.splitlines())
    return values


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.system_locale:
            separators = system_separators()
        else:
            separators = LocaleSeparators(args.date_separator, args.time_separator)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        formatter = MaskFormatter(
            args.mask,
            separators=separators,
            default_space_placeholder=args.placeholder,
        )
    except InvalidMask as exc:
        print(f"error: invalid mask {args.mask!r}: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    # ------------------------------------------------------------------
    # Compile-only mode
    # ------------------------------------------------------------------
    if args.compile:
        if args.format == "json":
            output_text = json.dumps(
                {"spec": formatter.spec.to_dict(), "mask": formatter.compiled.to_dict()},
                indent=2,
            )
        else:
            output_text = _format_compiled(formatter)
        _write(output_text, args.output)
        return 0

    # ------------------------------------------------------------------
    # Apply / remove mode
    # ------------------------------------------------------------------
    values = _read_values(args)
    if not values:
        print("error: no values given (pass VALUE arguments or --input FILE)", file=sys.stderr)
        return 2

    transform = formatter.remove if args.remove else formatter.apply
    results = [transform(v) for v in values]

    if args.format == "json":
        output_text = json.dumps(
            {
                "mask": formatter.spec.to_mask_text(),
                "operation": "remove" if args.remove else "apply",
                "results": [
                    {"value": v, "result": r} for v, r in zip(values, results)
                ],
            },
            indent=2,
        )
    else:
        output_text = "\n".join(results)

    _write(output_text, args.output)
    return 0


def _write(output_text: str, output: str) -> None:
    if output == "-":
        print(output_text)
    else:
        Path(output).write_text(output_text + "\n", encoding="utf-8")
        print(f"Output written to {output}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
