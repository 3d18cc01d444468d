"""CQ-code entity escaping.

Four characters are reserved by the CQ-code grammar and travel as entities:

    &  -> &amp;
    ,  -> &#44;
    [  -> &#91;
    ]  -> &#93;

`escape` replaces `&` first and `unescape` restores it last, so the entity
markers introduced for the other three are never touched twice.
"""


def escape(text: str) -> str:
    """Escape all reserved characters for use in text or a parameter value."""
    return (
        text.replace("&", "&amp;")
        .replace(",", "&#44;")
        .replace("[", "&#91;")
        .replace("]", "&#93;")
    )


def unescape(text: str) -> str:
    """Reverse of escape(): restore the reserved characters."""
    return (
        text.replace("&#44;", ",")
        .replace("&#91;", "[")
        .replace("&#93;", "]")
        .replace("&amp;", "&")
    )


def escape_brackets(text: str) -> str:
    """Escape only `[` and `]`.

    Neutralises CQ codes injected into user-supplied text while leaving
    commas and ampersands literal.
    """
    return text.replace("[", "&#91;").replace("]", "&#93;")
