"""Plant Nurse Core Package."""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for Plant Nurse."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
    # Per-query SQL and per-request access lines; API errors are logged by the exception handler
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger("plantnurse")
