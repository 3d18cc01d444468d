"""Message event binding — keep string and array forms in sync."""

import logging
from dataclasses import dataclass, field
from typing import Any

from .codec.decoder import decode
from .codec.encoder import encode
from .codec.segment import Segment

logger = logging.getLogger("cqcode.event")


@dataclass
class MessageEvent:
    message: str                # string-format (CQ code) message
    array_message: list[Segment] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "MessageEvent":
        """Build an event from a reported payload.

        Clients report `message` either as a segment array or as CQ-code
        text. The missing form is derived from the other one.

        Raises:
            DecodeError: if a string message cannot be decoded.
        """
        message = payload.get("message")

        if isinstance(message, list):
            segments = [Segment.from_dict(item) for item in message]
            return cls(encode(segments), segments, payload)

        if message is None:
            logger.debug("Payload has no message field")
            return cls("", [], payload)

        message = str(message)
        return cls(message, decode(message), payload)
