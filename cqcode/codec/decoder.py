"""Raw CQ-code text → segment list."""

import logging

from ..errors import DecodeError
from .entities import unescape
from .segment import Segment
from .tokens import parse_directive, split_tokens

logger = logging.getLogger("cqcode.codec.decoder")


def decode(raw: str) -> list[Segment]:
    """Convert a string-format message into its segment list.

    Directives become typed segments; everything else becomes `text`
    segments holding the unescaped text.

    Raises:
        DecodeError: on any internal fault. No partial result is returned.
    """
    try:
        segments = []
        for token in split_tokens(raw):
            parsed = parse_directive(token)
            if parsed is None:
                segments.append(Segment.text(unescape(token)))
            else:
                seg_type, params = parsed
                segments.append(Segment(seg_type, params))
        return segments
    except Exception as e:
        logger.error(f"Raw message convert failed: {e}")
        raise DecodeError(f"Cannot decode message: {e}") from e
