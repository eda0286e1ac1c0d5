"""Process-wide logging setup."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once at application start-up.

    Modules log through `logging.getLogger(__name__)`; this only decides
    the format and the threshold.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        force=True,
    )
    # httpx logs every request at INFO, which drowns out our own messages
    logging.getLogger("httpx").setLevel(logging.WARNING)
