"""Logging configuration for fintrackr.

curses owns the terminal while the app runs, so records go to a log file
in the config directory instead of stderr. ``main`` calls
``configure_logging`` once; every other module only calls ``get_logger``.
"""

import logging

_ROOT_LOGGER_NAME = "fintrackr"
_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_CONFIGURED = False


def _parse_level(level) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return logging.INFO


def configure_logging(level="INFO", path: str | None = None) -> None:
    """Attach a single handler to the ``fintrackr`` logger, once.

    With ``path`` set, records are appended to that file; otherwise they
    are dropped. Later calls only adjust the level.
    """
    global _CONFIGURED
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(_parse_level(level))
    if _CONFIGURED:
        return

    for handler in list(root.handlers):
        root.removeHandler(handler)

    if path:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    else:
        handler = logging.NullHandler()
    root.addHandler(handler)
    root.propagate = False
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)
