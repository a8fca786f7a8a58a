"""Data models for parsed key-value records."""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from .config import DEFAULT_DELIMITER


@dataclass(frozen=True)
class Record:
    """A single stored key-value pair and its order index.

    Parameters
    ----------
    index : int
        Zero-based position assigned at the key's first occurrence.
    key : str
        Raw key text, leading whitespace included.
    value : str
        Everything after the first delimiter (may be empty).
    """

    index: int
    key: str
    value: str

    def render(self) -> str:
        """Return the display form ``kv[<index>] = <key> = <value>``."""
        return f"kv[{self.index}] = {self.key} = {self.value}"

    def to_line(self, delimiter: str = DEFAULT_DELIMITER) -> str:
        """Return the record in its input form, ``<key>=<value>``."""
        return f"{self.key}{delimiter}{self.value}"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
