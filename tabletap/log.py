"""Debug log setup for the Textual app."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

from tabletap.config import DEBUG_LOG_PATH, LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(path: str | None = DEBUG_LOG_PATH, level: str = LOG_LEVEL) -> None:
    """Send package logs to the debug file and the Textual devtools console."""
    root = logging.getLogger("tabletap")
    root.setLevel(level)
    root.propagate = False
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    root.addHandler(TextualHandler())

    if not path:
        return
    try:
        log_path = Path(path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as exc:
        # The debug file is optional; never block startup on it.
        root.warning("debug_log_unavailable path=%s error=%r", path, exc)
        return
    file_handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(file_handler)
