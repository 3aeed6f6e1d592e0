from __future__ import annotations
import logging
from backend.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def setup_logging(level: str | None = None) -> None:
    """
    Configure the root logger once for the whole backend.
    uvicorn keeps its own handlers; ours only cover the application loggers.
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
