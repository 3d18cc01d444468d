"""Message segment model."""

from dataclasses import dataclass, field
from typing import Any

TEXT = "text"


@dataclass
class Segment:
    """One element of a message: plain text or a typed CQ code.

    `data` keeps insertion order; encode() writes parameters back in the
    same order they were read.
    """
    type: str
    data: dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if not self.type:
            raise ValueError("Segment type must be a non-empty string")

    @classmethod
    def text(cls, content: str) -> "Segment":
        return cls(TEXT, {TEXT: content})

    @property
    def is_text(self) -> bool:
        return self.type == TEXT

    def to_dict(self) -> dict[str, Any]:
        """Array-format representation: {"type": ..., "data": {...}}."""
        return {"type": self.type, "data": dict(self.data)}

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> "Segment":
        """Build a Segment from an array-format message element.

        Array reports carry non-string values (e.g. `"qq": 123`); they are
        stored as strings so the segment encodes the same way as one that
        was decoded from text. Null values are dropped and booleans keep
        their JSON spelling.
        """
        data = obj.get("data") or {}
        return cls(
            obj.get("type") or "",
            {str(k): _to_str(v) for k, v in data.items() if v is not None},
        )


def _to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
