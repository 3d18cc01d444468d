"""Custom forward-message node builder."""

from typing import Any, Union

from .codec.segment import Segment


def build_forward_nodes(
    uin: int,
    name: str,
    contents: list[Union[str, list[Segment]]],
) -> list[dict[str, Any]]:
    """Build custom forward nodes, one per content item.

    Args:
        uin: Sender QQ number shown on every node
        name: Sender display name shown on every node
        contents: Each item is a string-format message or a segment list

    Returns:
        List of {"type": "node", "data": {"name", "uin", "content"}} dicts.
        Segment lists are stored in array format.
    """
    nodes = []
    for content in contents:
        if not isinstance(content, str):
            content = [seg.to_dict() for seg in content]
        nodes.append({
            "type": "node",
            "data": {
                "name": name,
                "uin": uin,
                "content": content,
            },
        })
    return nodes
