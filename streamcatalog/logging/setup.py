import sys
import logging
import re
from typing import Any

from loguru import logger

from streamcatalog.config.settings import settings

SENSITIVE_QUERY_PARAMS = ("token", "key", "auth", "sig", "signature", "password")

# "?token=abc123" / "&sig=..." inside stream URLs
_SENSITIVE_PARAM_RE = re.compile(
    r"([?&](?:%s)=)[^&#\s'\"]+" % "|".join(SENSITIVE_QUERY_PARAMS), re.IGNORECASE
)


def mask_url_tokens(text: str) -> str:
    """Replaces credential-looking query parameter values with '****'."""
    return _SENSITIVE_PARAM_RE.sub(r"\1****", text)


def sensitive_data_filter(record: dict[str, Any]) -> bool:
    """Filter function to mask stream URL credentials in log records."""

    def mask_value(value: Any) -> Any:
        if isinstance(value, str):
            return mask_url_tokens(value)
        elif isinstance(value, dict):
            return {k: mask_value(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [mask_value(item) for item in value]
        return value

    record["message"] = mask_url_tokens(record["message"])

    if "extra" in record and isinstance(record["extra"], dict):
        for extra_key, extra_value in list(record["extra"].items()):
            record["extra"][extra_key] = mask_value(extra_value)

    return True  # Keep the record after masking


class LoguruBridgeHandler(logging.Handler):
    """Forwards stdlib logging records (pydantic-settings, third-party code) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: Any = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging's own frames so loguru reports the real call site
        depth = 2
        frame = logging.currentframe()
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging() -> None:
    """Configures the loguru sink from settings and routes stdlib logging through it."""
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=True,
        diagnose=True,
        filter=sensitive_data_filter,
    )

    logging.basicConfig(handlers=[LoguruBridgeHandler()], level=0, force=True)
    logger.info(f"Stream catalog logging ready at {settings.log_level}; stdlib logging bridged.")
