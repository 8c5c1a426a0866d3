"""Command-line entry point.

Usage:
    pseudoscss INPUT OUTPUT

Reads INPUT as UTF-8, compiles it behind an HTML5 doctype, and writes the
result to OUTPUT followed by a comment naming INPUT. Any failure is reported
on stderr with exit status 1.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from pseudoscss import Compiler
from pseudoscss.config import CompileConfig
from pseudoscss.errors import PseudoScssError
from pseudoscss.utils.logger import configure_logging, get_logger

DOCTYPE = "<!DOCTYPE html>"

logger = get_logger("pseudoscss.cli")


def provenance_comment(input_path: str) -> str:
    """Trailing comment recording which source produced the output."""
    return f"\n<!-- Generated from {input_path} -->\n"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pseudoscss",
        description="Compile a pseudoscss file to HTML.",
    )
    parser.add_argument("input", help="pseudoscss source file")
    parser.add_argument("output", help="HTML file to write")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        0 on success, 1 on any compile, encoding or I/O failure
    """
    args = build_parser().parse_args(argv)
    configure_logging()

    compiler = Compiler(config=CompileConfig(html=DOCTYPE))
    try:
        html = compiler.compile_file(args.input)
        data = (html + provenance_comment(args.input)).encode("utf-8")
        Path(args.output).write_bytes(data)
    except (PseudoScssError, OSError, UnicodeError) as e:
        print(f"pseudoscss: {e}", file=sys.stderr)
        return 1

    logger.info("Wrote %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
