"""Log output setup for the observer.

Lines look like ``INFO 14:03:07 New issue: owner/name#12 "Title" (by @user)``.
"""

import logging
from pathlib import Path

LOG_FORMAT = "%(levelname)s %(asctime)s %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Level names are process-wide; WARNING is always printed as WARN
logging.addLevelName(logging.WARNING, "WARN")


def configure_logging(level: str = "INFO", log_file: str | Path | None = None) -> int:
    """Configure root logging for the CLI and return the numeric level.

    Args:
        level: Level name such as INFO or DEBUG (case-insensitive)
        log_file: Optional file that receives the same lines as stderr

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    numeric = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(numeric)

    # PyGitHub logs every request at DEBUG
    logging.getLogger("github").setLevel(max(numeric, logging.INFO))
    return numeric
