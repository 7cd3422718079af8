"""
Logging configuration for the chat API.

``setup_logging`` sends everything through one formatter: records from
the ``chat_api`` package, from the uvicorn server and from strawberry's
execution logger (which reports resolver errors such as an unknown
channel) all reach the same console and optional file handlers on the
root logger.

The configured level applies to those loggers only.  Other libraries
keep the root logger's level, so raising ``LOG_LEVEL`` to ``DEBUG``
does not flood the console with third‑party debug output.
"""

import logging
from pathlib import Path
from typing import Optional

CONSOLE_HANDLER = "chat_api.console"
FILE_HANDLER = "chat_api.file"

# Server and GraphQL loggers whose records are routed through our handlers.
ROUTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "strawberry.execution")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _find_handler(logger: logging.Logger, name: str) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if handler.get_name() == name:
            return handler
    return None


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the chat API loggers.

    Safe to call repeatedly (``create_app`` runs once per app instance):
    the console handler is only attached once and a file handler is only
    added the first time a ``logfile`` is given.

    Parameters
    ----------
    level : str
        Level name (e.g. ``"DEBUG"``) applied to ``chat_api`` and the
        routed server loggers.  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if _find_handler(root, CONSOLE_HANDLER) is None:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile and _find_handler(root, FILE_HANDLER) is None:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger("chat_api").setLevel(numeric_level)
    for name in ROUTED_LOGGERS:
        routed = logging.getLogger(name)
        # uvicorn installs its own handlers and turns propagation off.
        routed.handlers.clear()
        routed.propagate = True
        routed.setLevel(numeric_level)
