#!/usr/bin/env python3
"""Generate 4x6 inch label PDFs from a desktop form or the command line."""

import argparse
import logging
import os
from typing import Dict, Optional, Sequence

from dotenv import load_dotenv

from label_form import LabelFormController
from label_types import OverflowPolicy
from label_variants import get_variant, list_variants


def _parse_field_values(field_pairs: Sequence[str]) -> Dict[str, str]:
    parsed: Dict[str, str] = {}
    for pair in field_pairs:
        if "=" not in pair:
            raise SystemExit(
                f"Invalid --field '{pair}'. Expected format NAME=VALUE."
            )
        key, value = pair.split("=", 1)
        key = key.strip().lower().replace("-", "_")
        if not key:
            raise SystemExit("Field name cannot be empty.")
        parsed[key] = value
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Label fields -> single-page 4x6 inch PDF"
    )
    parser.add_argument(
        "-v", "--variant",
        default=os.getenv("LABEL_PRINTER_VARIANT", "equipment"),
        choices=list(list_variants()),
        help=(
            "Label layout (defaults to LABEL_PRINTER_VARIANT from the "
            "environment/.env, else equipment)."
        ),
    )
    parser.add_argument(
        "-o", "--output-dir",
        default=os.getenv("LABEL_PRINTER_OUTPUT_DIR"),
        help=(
            "Directory for generated PDFs (defaults to LABEL_PRINTER_OUTPUT_DIR "
            "from the environment/.env, else the current directory)."
        ),
    )
    parser.add_argument(
        "--overflow",
        default=OverflowPolicy.TRUNCATE.value,
        choices=[p.value for p in OverflowPolicy],
        help="How to handle descriptions that do not fit (default: truncate).",
    )
    parser.add_argument(
        "--field",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help=(
            "Label field value for --no-gui (repeatable). For example: "
            "--field title='Cordless Drill' --field sku='EQ 42'"
        ),
    )
    parser.add_argument(
        "--no-gui",
        action="store_true",
        help="Generate one label from --field values without opening the form.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for the label printer."""

    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    variant = get_variant(args.variant)
    controller = LabelFormController(
        variant,
        output_dir=args.output_dir,
        overflow=OverflowPolicy(args.overflow),
    )

    if not args.no_gui:
        if args.field:
            raise SystemExit("--field is only used together with --no-gui.")
        from label_printer_gui import run_gui

        run_gui(controller)
        return 0

    try:
        values = _parse_field_values(args.field)
        outcome = controller.generate(values)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    print(outcome.status)
    return 0 if outcome.ok else 1


def run() -> None:
    load_dotenv()
    raise SystemExit(main())


if __name__ == "__main__":
    run()
