"""Lookup and listing over a built :class:`~kv_parser.store.RecordStore`.

A query is either a single key or the "list all" request (``None`` or the
``--all`` token).  :func:`run_query` ties the two phases of an invocation
together: it parses the whole input into a fresh store first, then answers
exactly one query against it.
"""

from __future__ import annotations

import uuid
from typing import Iterable, List, Optional

from .classifier import LineClassifier
from .config import ALL_TOKEN, ParserConfig
from .errors import KeyNotFoundError
from .event_logger import get_event_logger
from .models import Record
from .store import RecordStore

_log = get_event_logger()


def is_list_all(key: Optional[str], all_token: str = ALL_TOKEN) -> bool:
    """Return True when *key* asks for the full listing."""
    return key is None or key == all_token


def query(
    store: RecordStore,
    key: Optional[str],
    all_token: str = ALL_TOKEN,
) -> List[Record]:
    """Answer *key* against *store*.

    Returns every record in order for a listing, or a one-element list for
    a key lookup.

    Raises:
        KeyNotFoundError: if *key* is not in the store.
    """
    if is_list_all(key, all_token):
        return store.all()
    record = store.record(key)
    if record is None:
        raise KeyNotFoundError(key)
    return [record]


def format_record(record: Record) -> str:
    """Format *record* as ``kv[<index>] = <key> = <value>``."""
    return record.render()


def run_query(
    lines: Iterable[str],
    key: Optional[str],
    config: Optional[ParserConfig] = None,
    run_id: Optional[str] = None,
) -> List[Record]:
    """Parse *lines* into a new store, then answer *key* against it.

    Raises:
        KeyNotFoundError: if *key* is a lookup and has no record.
    """
    config = config or ParserConfig()
    run_id = run_id or uuid.uuid4().hex

    store = RecordStore.from_lines(lines, LineClassifier(config.delimiter))
    _log.log_event(
        "store_built",
        run_id=run_id,
        lines_read=store.lines_read,
        records=len(store),
    )

    mode = "all" if is_list_all(key, config.all_token) else "lookup"
    try:
        records = query(store, key, config.all_token)
    except KeyNotFoundError as exc:
        _log.log_event("key_not_found", run_id=run_id, key=exc.key)
        raise

    _log.log_event("query_answered", run_id=run_id, mode=mode, hits=len(records))
    return records
