"""Logging configuration."""
import logging
import sys
from typing import Optional

from ordergen.core.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    # Set third-party loggers to WARNING
    logging.getLogger("websockets").setLevel(logging.WARNING)
    logging.getLogger("faker").setLevel(logging.WARNING)
