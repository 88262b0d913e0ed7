#!/usr/bin/env python3

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from clipdir.models import ClipdirError
from clipdir.services import HistoryConfig, HistoryService

logger = logging.getLogger(__name__)

# wl-paste --watch exports one of these in CLIPBOARD_STATE
STATE_NIL = "nil"
STATE_SENSITIVE = "sensitive"
STATE_CLEAR = "clear"
STATE_DATA = "data"


def parse_args(argv: Optional[List[str]] = None, defaults: Optional[HistoryConfig] = None):
    defaults = defaults or HistoryConfig()

    parser = argparse.ArgumentParser(
        prog="clipdir",
        description="clipdir - clipboard history stored as a directory of files"
    )
    parser.add_argument(
        "--storage-path",
        type=Path,
        default=defaults.storage_path,
        help=f"Directory holding clipboard entries (default: {defaults.storage_path})"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    store_parser = subparsers.add_parser(
        "store", help="Store a clipboard entry read from stdin")
    store_parser.add_argument(
        "--state",
        type=str,
        default=os.getenv("CLIPBOARD_STATE", STATE_DATA),
        help="Clipboard state reported by wl-paste --watch (default: data)"
    )
    store_parser.add_argument(
        "--byte-limit",
        type=int,
        default=defaults.byte_limit,
        help=f"Maximum entry size in bytes (default: {defaults.byte_limit})"
    )
    store_parser.add_argument(
        "--dedupe-search-limit",
        type=int,
        default=defaults.dedupe_search_limit,
        help=f"Older entries scanned for duplicates (default: {defaults.dedupe_search_limit})"
    )

    list_parser = subparsers.add_parser(
        "list", help="List clipboard entries prefixed with their id")
    list_parser.add_argument(
        "--preview-length",
        type=int,
        default=defaults.preview_length,
        help=f"Bytes of text shown per entry (default: {defaults.preview_length})"
    )

    subparsers.add_parser(
        "decode", help="Output the clipboard entry whose id starts the stdin line")

    return parser.parse_args(argv)


def build_config(args, defaults: HistoryConfig) -> HistoryConfig:
    overrides = {"storage_path": args.storage_path}
    for name in ("byte_limit", "dedupe_search_limit", "preview_length"):
        if hasattr(args, name):
            overrides[name] = getattr(args, name)
    return HistoryConfig.model_validate({**defaults.model_dump(), **overrides})


def run(args, config: HistoryConfig) -> None:
    service = HistoryService(config)

    if args.command == "store":
        state = args.state.strip().lower()
        if state in (STATE_NIL, STATE_SENSITIVE):
            logger.info(f"Clipboard state '{state}', nothing to store")
            return
        if state == STATE_CLEAR:
            service.delete_newest()
            return
        result = service.store(sys.stdin.buffer.read())
        if not result.dedup.ok:
            logger.warning(
                f"Entry stored, but {len(result.dedup.failures)} duplicate candidates could not be checked")
    elif args.command == "list":
        for line in service.list_previews():
            print(line)
    elif args.command == "decode":
        selection = sys.stdin.buffer.readline()
        service.decode_selection(selection, sys.stdout.buffer)
        sys.stdout.buffer.flush()


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')

    try:
        defaults = HistoryConfig.from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    args = parse_args(argv, defaults)
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    try:
        config = build_config(args, defaults)
        run(args, config)
    except (ClipdirError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
