"""
Command-line interface.

Usage:
    $ python -m objparser model.obj [model.mtl] [-o model.json]
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from objparser.config import MissingMaterialPolicy, ParseOptions
from objparser.errors import ObjParserError
from objparser.io import read_asset_pair, write_record
from objparser.logging_config import setup_logging
from objparser.parser import parse

logger = logging.getLogger("objparser.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="objparser",
        description="Convert an OBJ file and its MTL file into a single JSON record.",
    )
    parser.add_argument("obj", help="OBJ file to read")
    parser.add_argument("mtl", nargs="?", default=None,
                        help="MTL file to read (default: resolved from 'mtllib' or <obj stem>.mtl)")
    parser.add_argument("-o", "--output", default=None, help="JSON file to write (default: stdout)")
    parser.add_argument("--strict", action="store_true", help="Fail on malformed numbers instead of writing NaN")
    parser.add_argument("--require-material", action="store_true", help="Fail when the OBJ has no 'usemtl' line")
    parser.add_argument("--missing-material", choices=[p.value for p in MissingMaterialPolicy],
                        default=MissingMaterialPolicy.ERROR.value,
                        help="What to do when the named material is not in the MTL")
    parser.add_argument("--indent", type=int, default=None, help="JSON indentation")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    options = ParseOptions(
        strict_numbers=args.strict,
        require_material=args.require_material,
        missing_material=MissingMaterialPolicy(args.missing_material),
    )

    try:
        obj_data, mtl_data = read_asset_pair(args.obj, args.mtl)
        record = parse(obj_data, mtl_data, options)
        text = write_record(record, args.output, indent=args.indent)
    except (ObjParserError, OSError) as e:
        logger.error(str(e))
        return 1

    if args.output is None:
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
