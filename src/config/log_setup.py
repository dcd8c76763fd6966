"""
Pig - Logging Configuration

Applies the configured log level to the root logger once per process.
"""

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO", debug: bool = False) -> None:
    """Configure root logging for the application.

    Args:
        level: Log level name (e.g. ``"INFO"``).
        debug: Force DEBUG regardless of ``level``.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    resolved = "DEBUG" if debug else level.upper()
    numeric = logging.getLevelName(resolved)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level {level!r}.")

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=numeric, format=_LOG_FORMAT)
    root.setLevel(numeric)
