"""CQ-code tokenizer and directive parser.

Decoding runs in two stages:

1. split_tokens() cuts the raw message at the edges of every `[CQ:...]`
   span, so each token is either one whole directive or a run of text.
2. parse_directive() matches a single token against the full directive
   grammar and extracts its type and parameters.

A span that looks like a directive but fails the grammar (e.g. `[CQ:]` or
`[CQ:at,qq]`) is not an error. parse_directive() returns None for it and
the decoder keeps it as text.

Directive bodies cannot contain `]`, so nested CQ codes are unsupported.
"""

import re
from typing import Optional

from .entities import unescape

# Zero-width: every position where a `[CQ:...]` span starts
_DIRECTIVE_START_RE = re.compile(r'(?=(\[CQ:[^\]]+\]))')

# [CQ:type(,key=value)*]
_DIRECTIVE_RE = re.compile(r'\[CQ:([^,\[\]]+)((?:,[^,=\[\]]+=[^,\[\]]*)*)\]')


def split_tokens(raw: str) -> list[str]:
    """Split a raw message into directive and text tokens.

    The message is cut before every `[CQ:` that opens a span and after the
    `]` closing it, so stray `[CQ:` text in front of a real directive stays
    a separate token. Joining the result gives back `raw` exactly. Empty
    tokens are dropped.
    """
    cuts = set()
    for match in _DIRECTIVE_START_RE.finditer(raw):
        cuts.add(match.start())
        cuts.add(match.start() + len(match.group(1)))

    tokens = []
    last = 0
    for cut in sorted(cuts) + [len(raw)]:
        if cut > last:
            tokens.append(raw[last:cut])
            last = cut

    return tokens


def parse_directive(token: str) -> Optional[tuple[str, dict[str, str]]]:
    """Parse one `[CQ:type,key=value,...]` token.

    Args:
        token: A single token from split_tokens()

    Returns:
        Tuple of (type, params) with unescaped values in textual order,
        or None if the token is not a well-formed directive.
    """
    m = _DIRECTIVE_RE.fullmatch(token)
    if m is None:
        return None

    params: dict[str, str] = {}
    for pair in m.group(2).split(","):
        if not pair:
            continue
        # Key ends at the first '='; the value may contain more of them
        key, value = pair.split("=", 1)
        params[key] = unescape(value)

    return m.group(1), params
