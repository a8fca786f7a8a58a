"""Command-line interface for kv_parser.

Reads ``key=value`` lines from stdin, then prints one key's record or all
records in input order.

Exit codes:
- 0: record found, or listing printed (even an empty one)
- 1: key not found
- 2: bad invocation (usage printed, stdin left unread) or bad configuration
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import ALL_TOKEN, ParserConfig
from .errors import ConfigError, KeyNotFoundError
from .event_logger import get_event_logger
from .query import format_record, run_query

_HELP_FLAGS = ("-h", "--help")

_EPILOG = f"""\
examples:
    $ kv-parser user < input.txt
    kv[0] = user = alice

    $ kv-parser {ALL_TOKEN} < input.txt
    kv[0] = user = alice
    kv[1] = role = admin
    kv[2] = id = 42

expected input format (stdin):
    key1=value1
    key2=value2

notes:
    - keys must start with a letter and must not contain the delimiter
    - values may contain the delimiter; only the first one splits
    - lines that do not look like key=value are ignored
    - a repeated key keeps its first position and takes the last value
    - an empty <key> lists everything, like {ALL_TOKEN}
    - keys may start with '-'; only a lone -h/--help shows this text

environment:
    KV_PARSER_DELIMITER   single-character delimiter (default '=')
    KV_PARSER_LOG_LEVEL   level for JSON event lines on stderr (default WARNING)
"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="kv-parser",
        usage=f"%(prog)s [-h] <key> | {ALL_TOKEN}",
        description="Parse key=value lines from stdin and print one key or all keys.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "key",
        metavar="<key>",
        help=f"Key to look up, or {ALL_TOKEN} to print every record in input order",
    )
    return p


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    if len(argv) == 1 and argv[0] in _HELP_FLAGS:
        parser.print_help()
        return 0
    if len(argv) != 1:
        parser.error(f"expected exactly one argument: <key> or {ALL_TOKEN}")
    # "--" stops a leading "-" in the key being read as an option.
    args = parser.parse_args(["--", argv[0]])

    try:
        config = ParserConfig.from_env()
    except ConfigError as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2
    get_event_logger().set_level(config.log_level_value)

    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(encoding="utf-8", errors="replace")

    key = args.key or None
    try:
        records = run_query(sys.stdin, key, config)
    except KeyNotFoundError as ex:
        sys.stderr.write(f"{ex}\n")
        return 1

    for record in records:
        sys.stdout.write(format_record(record) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
