"""Pytest configuration and shared fixtures."""

import pytest

from cqcode.codec.segment import Segment


@pytest.fixture
def mixed_raw():
    """A group message mixing text, a mention, an image and escaped text."""
    return "hi [CQ:at,qq=10001] look&#44; here[CQ:image,file=a.png,url=http://x/a.png?a=1&amp;b=2]"


@pytest.fixture
def mixed_segments():
    return [
        Segment.text("hi "),
        Segment("at", {"qq": "10001"}),
        Segment.text(" look, here"),
        Segment("image", {"file": "a.png", "url": "http://x/a.png?a=1&b=2"}),
    ]
