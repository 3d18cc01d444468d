"""Read-only queries over decoded messages."""

import re
from typing import Union

from .segment import Segment

AT_ALL_CODE = "[CQ:at,qq=all]"

# Optional sign, ASCII digits only (no spaces, underscores or other scripts)
_QQ_RE = re.compile(r'[+-]?[0-9]+')


def is_mention_all(message: Union[str, list[Segment]]) -> bool:
    """Check whether a message mentions everyone.

    For a raw string this is a plain substring test for `[CQ:at,qq=all]`.
    For a segment list it looks for an `at` segment with `qq == "all"`.
    The two checks are independent and can disagree:
    `[CQ:at,name=x,qq=all]` decodes to a mention-all without containing
    the substring.
    """
    if isinstance(message, str):
        return AT_ALL_CODE in message
    return any(seg.type == "at" and seg.data.get("qq") == "all" for seg in message)


def _parse_qq(qq: str) -> int:
    if not _QQ_RE.fullmatch(qq):
        raise ValueError(f"Not a numeric qq: {qq!r}")
    return int(qq)


def mentioned_ids(segments: list[Segment]) -> list[int]:
    """Return the user ids of all `at` segments, excluding `qq=all`.

    Raises:
        ValueError: if an `at` segment has a missing or non-numeric `qq`.
    """
    return [
        _parse_qq(seg.data.get("qq", ""))
        for seg in segments
        if seg.type == "at" and seg.data.get("qq") != "all"
    ]


def _urls(segments: list[Segment], seg_type: str) -> list[str]:
    # One entry per matching segment; missing url -> ""
    return [seg.data.get("url", "") for seg in segments if seg.type == seg_type]


def image_urls(segments: list[Segment]) -> list[str]:
    """Return the `url` of every image segment, in order."""
    return _urls(segments, "image")


def video_urls(segments: list[Segment]) -> list[str]:
    """Return the `url` of every video segment, in order."""
    return _urls(segments, "video")
