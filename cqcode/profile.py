"""QQ profile helpers — avatar urls and nickname lookup."""

import logging
from typing import Optional

import httpx

from .config import CQCodeSettings, load_settings

logger = logging.getLogger("cqcode.profile")

# 0 = original size, otherwise square edge in pixels
AVATAR_SIZES = (0, 40, 100, 640)


def _check_size(size: int) -> None:
    if size not in AVATAR_SIZES:
        raise ValueError(f"Avatar size must be one of {AVATAR_SIZES}, got {size}")


def user_avatar_url(user_id: int, size: int = 0) -> str:
    """Avatar url of a QQ user."""
    _check_size(size)
    return f"https://q1.qlogo.cn/g?b=qq&nk={user_id}&s={size}"


def group_avatar_url(group_id: int, size: int = 0) -> str:
    """Avatar url of a QQ group."""
    _check_size(size)
    return f"https://p.qlogo.cn/gh/{group_id}/{group_id}/{size}"


def parse_portrait_response(body: str) -> str:
    """Extract the nickname from a portrait endpoint response.

    The body looks like
    `portraitCallBack({"12345":["http://...",0,0,0,0,0,"nick",0]})`;
    the nickname is the 7th comma-separated field, in quotes.
    """
    fields = body.split(",")
    if len(fields) < 7:
        return ""
    nickname = fields[6]
    return nickname[1:-1]


async def fetch_nickname(user_id: int, settings: Optional[CQCodeSettings] = None) -> str:
    """Look up the nickname of a QQ user.

    Returns:
        The nickname, or "" if the lookup failed or returned nothing.
    """
    settings = settings or load_settings()
    url = settings.nickname_url.format(user_id=user_id)

    try:
        async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
            response = await client.get(url)
            response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning(f"Nickname lookup failed for {user_id}: {e}")
        return ""

    try:
        body = response.content.decode(settings.nickname_encoding, errors="replace")
    except LookupError as e:
        logger.warning(f"Nickname lookup failed for {user_id}: {e}")
        return ""

    if not body:
        return ""
    return parse_portrait_response(body)
