"""Logging setup for the command line: brief stderr output plus an optional session log file"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

KEEP_SESSION_LOGS = 5
MAX_LOG_BYTES = 10 * 1024 * 1024

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"


def _remove_old_sessions(log_dir: Path, stem: str) -> None:
    # Room for the session about to start
    sessions = sorted(log_dir.glob(f"{stem}_*.log"), reverse=True)
    for old_log in sessions[KEEP_SESSION_LOGS - 1:]:
        try:
            old_log.unlink()
        except OSError:
            logging.getLogger(__name__).debug(f"Could not remove old session log {old_log}")


def setup_logging(
    log_file: Optional[str] = "logs/seo-research.log",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Optional[Path]:
    """
    Configure the root logger for a CLI run.

    stdout carries the JSON results, so console logging goes to stderr.
    With a log_file, each run writes its own timestamped file next to it
    ("seo-research_20240101_120000.log"); only the newest KEEP_SESSION_LOGS
    files are kept and a file rotates at MAX_LOG_BYTES.

    Args:
        log_file: Base path of the session logs, None for console only
        console_level: Level of the stderr handler
        file_level: Level of the session file handler

    Returns:
        Path of this run's session log, or None
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console)

    if not log_file:
        return None

    base = Path(log_file)
    base.parent.mkdir(parents=True, exist_ok=True)
    _remove_old_sessions(base.parent, base.stem)

    session_log = base.parent / f"{base.stem}_{datetime.now():%Y%m%d_%H%M%S}.log"
    file_handler = RotatingFileHandler(session_log, maxBytes=MAX_LOG_BYTES, backupCount=10, encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(file_handler)

    # Resource loading in nltk logs at DEBUG
    logging.getLogger("nltk").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(f"Session log: {session_log}")
    return session_log
