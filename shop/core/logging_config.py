"""Logging setup for the API process and the CLI scripts."""

import logging

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger.

    Calling it again only adjusts the level, so app reloads and scripts that
    import the app do not stack duplicate handlers.
    """
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(_FORMAT))
    if _handler not in root.handlers:
        root.addHandler(_handler)
    root.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    # SQL echo is noisy at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
