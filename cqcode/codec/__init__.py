"""CQ-code codec — string-format messages ↔ segment lists.

- Escape: reserved character entities (&amp; &#44; &#91; &#93;)
- Tokens: directive/text splitting and directive parsing
- Decode: raw text → segments (malformed codes degrade to text)
- Encode: segments → raw text
- Queries: mentions, image and video urls
"""

from .entities import escape, unescape, escape_brackets
from .segment import Segment
from .tokens import split_tokens, parse_directive
from .decoder import decode
from .encoder import encode, encode_segment
from .queries import is_mention_all, mentioned_ids, image_urls, video_urls

__all__ = [
    # Escape
    "escape",
    "unescape",
    "escape_brackets",
    # Model
    "Segment",
    # Tokens
    "split_tokens",
    "parse_directive",
    # Decode / encode
    "decode",
    "encode",
    "encode_segment",
    # Queries
    "is_mention_all",
    "mentioned_ids",
    "image_urls",
    "video_urls",
]
