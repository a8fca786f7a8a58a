"""Exceptions raised by the key-value parser."""


class KvParserError(Exception):
    """Base error for this package."""


class ConfigError(KvParserError):
    """Raised when a :class:`~kv_parser.config.ParserConfig` value is invalid."""


class StoreSealedError(KvParserError):
    """Raised when a record store is mutated after its build phase ended."""


class KeyNotFoundError(KvParserError):
    """Raised when a lookup key has no record in the store."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Key not found: {key}")
        self.key = key
