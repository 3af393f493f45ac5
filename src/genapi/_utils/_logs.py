import logging
import sys
from typing import Mapping, Optional

from .constants import SENSITIVE_HEADERS

logger: logging.Logger = logging.getLogger("genapi")


def setup_logging(should_debug: Optional[bool] = None) -> None:
    logging.basicConfig(
        format="[%(asctime)s - %(name)s:%(lineno)d - %(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)
    if not any(
        isinstance(handler, logging.StreamHandler) for handler in logger.handlers
    ):
        logger.addHandler(logging.StreamHandler(sys.stderr))


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of `headers` that is safe to log."""
    return {
        key: "<redacted>" if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }
