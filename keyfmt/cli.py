#!/usr/bin/env python3
"""
Command line access to key templates.

Resolves a single key from layered YAML template files, or lists every
registered template.
Path: keyfmt/cli.py
"""

import argparse
import sys
from enum import Enum
from typing import Dict, List, Optional, Tuple

import structlog

from keyfmt.errors import KeyResolutionError
from keyfmt.keys import Key
from keyfmt.utils.logging import configure_logging

logger = structlog.get_logger()


class LogMode(str, Enum):
    DEBUG = "debug"
    NORMAL = "normal"


def split_params(raw: List[str]) -> Tuple[List[str], Dict[str, str]]:
    """Split name=value tokens into keyword parameters, keeping the rest positional."""
    positional: List[str] = []
    named: Dict[str, str] = {}
    for token in raw:
        name, sep, value = token.partition('=')
        if sep and name:
            named[name] = value
        else:
            positional.append(token)
    return positional, named


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keyfmt", description="Resolve formatted keys from YAML key templates")
    parser.add_argument("section", nargs="?", help="Section name (cache, queue, event, ... or any custom section)")
    parser.add_argument("key", nargs="?", help="Dotted key within the section, e.g. product.book")
    parser.add_argument("params", nargs="*", help="Parameters: name=value for named, bare values for positional")
    parser.add_argument("-c", "--config", action="append", required=True, help="YAML key template file; repeat to layer overrides")
    parser.add_argument("--list", action="store_true", help="List every registered template and exit")
    parser.add_argument("--no-validate", dest="validate", action="store_false", help="Skip schema validation of the template files")
    parser.add_argument("--log", type=LogMode, choices=list(LogMode), default=LogMode.NORMAL, help="Logging level (default: normal)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("debug" if args.log is LogMode.DEBUG else "warning")

    try:
        keys = Key.from_yaml(*args.config, validate=args.validate)
    except Exception as e:
        logger.error("cli.config_load_failed", error=str(e), error_type=type(e).__name__)
        print(f"Error: could not load key templates: {e}", file=sys.stderr)
        return 2

    if args.list:
        for section in keys.store.sections():
            for dotted_key, template in keys.store.templates(section):
                print(f"{section}.{dotted_key} = {template}")
        return 0

    if not args.section or not args.key:
        parser.error("section and key are required unless --list is given")

    positional, named = split_params(args.params)
    try:
        print(keys.resolve(args.section, args.key, *positional, **named))
    except KeyResolutionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
