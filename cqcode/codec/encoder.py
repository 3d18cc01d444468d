"""Segment list → raw CQ-code text."""

from typing import Iterable

from .entities import escape
from .segment import TEXT, Segment


def encode_segment(segment: Segment) -> str:
    """Encode a single segment.

    Text segments are written as escaped text without brackets. Every other
    segment becomes `[CQ:type,key=value,...]` with escaped values, keeping
    the order of `segment.data`.
    """
    if segment.is_text:
        return escape(segment.data.get(TEXT, ""))

    parts = ["[CQ:", segment.type]
    for key, value in segment.data.items():
        parts.append(f",{key}={escape(value)}")
    parts.append("]")
    return "".join(parts)


def encode(segments: Iterable[Segment]) -> str:
    """Encode a segment list into a string-format message."""
    return "".join(encode_segment(seg) for seg in segments)
