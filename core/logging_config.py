"""Logging setup for the app entry point."""
from __future__ import annotations

import logging
import sys

# Per-logger levels applied on top of the root level
LOGGING_LEVELS = {
    "core": logging.INFO,
    "ui": logging.INFO,
    "streamlit": logging.WARNING,
    "urllib3": logging.ERROR,
}

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
HANDLER_NAME = "i18n_console"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure console logging once per process."""
    root = logging.getLogger()
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)
    root.setLevel(level)
    for name, name_level in LOGGING_LEVELS.items():
        logging.getLogger(name).setLevel(max(name_level, level))
