"""cqcode configuration management."""

from pydantic_settings import BaseSettings
from pydantic import Field


class CQCodeSettings(BaseSettings):
    """Settings loaded from environment variables or .env file."""

    # Logging
    log_level: str = Field(default="INFO", description="Root log level for the CLI")

    # Profile lookup
    http_timeout: float = Field(default=10.0, description="Nickname lookup timeout (seconds)")
    nickname_url: str = Field(
        default="https://r.qzone.qq.com/fcg-bin/cgi_get_portrait.fcg?uins={user_id}",
        description="Portrait endpoint; {user_id} is substituted",
    )
    nickname_encoding: str = Field(default="GBK", description="Charset of the portrait endpoint")

    # CLI
    avatar_size: int = Field(default=640, description="Default avatar size (0, 40, 100, 640)")

    model_config = {"env_prefix": "CQCODE_", "env_file": ".env", "extra": "ignore"}


def load_settings() -> CQCodeSettings:
    """Load settings from environment.

    Bad values are logged and replaced with their defaults.
    """
    settings = CQCodeSettings()

    import logging
    logger = logging.getLogger("cqcode.config")

    level = settings.log_level.upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"CQCODE_LOG_LEVEL={settings.log_level!r} is not a log level; using INFO.")
        level = "INFO"
    settings.log_level = level

    if settings.http_timeout <= 0:
        logger.warning(
            f"CQCODE_HTTP_TIMEOUT={settings.http_timeout} is not positive; "
            "nickname lookups will fail immediately."
        )

    return settings
