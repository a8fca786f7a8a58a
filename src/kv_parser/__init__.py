"""kv-parser: parse key=value lines into an ordered, queryable store."""

from .classifier import LineClassifier, classify
from .config import ParserConfig
from .errors import ConfigError, KeyNotFoundError, KvParserError, StoreSealedError
from .event_logger import EventLogger, get_event_logger
from .models import Record
from .query import format_record, run_query
from .store import RecordStore

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "EventLogger",
    "KeyNotFoundError",
    "KvParserError",
    "LineClassifier",
    "ParserConfig",
    "Record",
    "RecordStore",
    "StoreSealedError",
    "classify",
    "format_record",
    "get_event_logger",
    "run_query",
]
