"""Line classification for ``key=value`` input.

A line is a record when, after optional leading whitespace, it starts with
an alphabetic character and contains the delimiter:

    <whitespace>* <alpha> <non-delimiter>* = <anything>

Everything before the first delimiter is the key, taken verbatim (leading
whitespace is kept); everything after it is the value, further delimiters
included.  Lines that do not qualify are skipped without error.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional, Tuple

from .config import DEFAULT_DELIMITER, validate_delimiter

KeyValue = Tuple[str, str]


def _strip_terminator(line: str) -> str:
    """Remove one trailing ``\\n`` or ``\\r\\n``."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class LineClassifier:
    """Decide whether a line is a record and split it into key and value.

    Parameters
    ----------
    delimiter : str
        Single character separating key from value (default ``=``).
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER) -> None:
        self._delimiter = validate_delimiter(delimiter)
        d = re.escape(delimiter)
        # [^\W\d_] is "any letter" in Python's unicode-aware classes. Neither the
        # leading whitespace nor the first letter may be the delimiter itself.
        self._pattern = re.compile(rf"[^\S{d}]*(?!{d})[^\W\d_][^{d}]*{d}")

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def classify(self, line: str) -> Optional[KeyValue]:
        """Return ``(key, value)`` for a record line, ``None`` otherwise."""
        line = _strip_terminator(line)
        if self._pattern.match(line) is None:
            return None
        key, _, value = line.partition(self._delimiter)
        return key, value

    def classify_lines(self, lines: Iterable[str]) -> Iterator[KeyValue]:
        """Yield ``(key, value)`` for every record line, in input order."""
        for line in lines:
            pair = self.classify(line)
            if pair is not None:
                yield pair


_default = LineClassifier()


def classify(line: str) -> Optional[KeyValue]:
    """Classify *line* using the default ``=`` delimiter."""
    return _default.classify(line)
