"""Logging configuration with console and rotating file handlers"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

SESSION_LOGS_KEPT = 5
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10MB


def cleanup_session_logs(log_dir: Path, base_name: str, keep: int = SESSION_LOGS_KEPT) -> int:
    """
    Delete old session logs so that at most `keep - 1` remain before a new one starts.

    Returns:
        Number of files deleted
    """
    # Timestamped names sort chronologically
    existing = sorted(log_dir.glob(f"{base_name}_*.log"), reverse=True)
    deleted = 0
    for old_log in existing[keep - 1:]:
        try:
            old_log.unlink()
            deleted += 1
        except OSError:
            pass  # Locked or already gone
    return deleted


def setup_logging(
    log_file: str = "logs/term-rank.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure logging with two destinations:
    - Console: Brief logs (INFO by default)
    - File: Detailed logs (DEBUG by default) with rotation

    Rotation policy:
    - New log file on each server start (timestamp-based naming)
    - Keep last 5 session files (older ones removed on startup)
    - Rotate when a file reaches 10MB

    Args:
        log_file: Base path to log file (relative to working directory)
        console_level: Console logging level
        file_level: File logging level

    Returns:
        Path of this session's log file
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    cleanup_session_logs(log_path.parent, log_path.stem)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Handlers filter
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

    file_handler = RotatingFileHandler(
        session_log,
        mode='a',
        maxBytes=MAX_LOG_BYTES,
        backupCount=10,
        encoding='utf-8'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    # Chatty libraries stay in the file only
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)

    logging.info(
        f"Logging configured: console={logging.getLevelName(console_level)}, "
        f"file={session_log} ({logging.getLevelName(file_level)})"
    )
    return session_log
