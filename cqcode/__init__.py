"""cqcode — CQ-code message codec for OneBot chat bots."""

__version__ = "0.1.0"

from .codec import (  # noqa: E402
    Segment,
    decode,
    encode,
    encode_segment,
    escape,
    escape_brackets,
    image_urls,
    is_mention_all,
    mentioned_ids,
    unescape,
    video_urls,
)
from .errors import CQCodeError, DecodeError  # noqa: E402

__all__ = [
    "__version__",
    "Segment",
    "decode",
    "encode",
    "encode_segment",
    "escape",
    "escape_brackets",
    "unescape",
    "is_mention_all",
    "mentioned_ids",
    "image_urls",
    "video_urls",
    "CQCodeError",
    "DecodeError",
]
