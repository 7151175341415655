"""Service configuration from environment variables (.env.local / .env supported)"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from .ranking import DEFAULT_ALPHABETS, DEFAULT_LIMIT, Alphabet, resolve_alphabets

PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_MAX_DOCUMENT_SIZE = 10 * 1024 * 1024  # 10MB


@dataclass(frozen=True)
class Settings:
    port: int = 8080
    log_level: str = "INFO"
    log_file: str = "logs/term-rank.log"
    max_document_size: int = DEFAULT_MAX_DOCUMENT_SIZE
    result_limit: int = DEFAULT_LIMIT
    alphabets: Tuple[Alphabet, ...] = DEFAULT_ALPHABETS
    content_sniffing: bool = True

    @property
    def console_level(self) -> int:
        """Console logging level, falls back to INFO for unknown names"""
        return getattr(logging, self.log_level, logging.INFO)


def load_env_files(project_root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local (highest priority) or .env into os.environ.

    Returns:
        Path of the loaded file, or None when neither exists
    """
    env_local = project_root / ".env.local"
    env_file = project_root / ".env"

    for candidate in (env_local, env_file):
        if candidate.exists():
            load_dotenv(candidate, override=True)
            return candidate
    return None


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def load_settings() -> Settings:
    """
    Build Settings from the current environment.

    Raises:
        ValueError: Malformed numbers or unknown alphabet names
    """
    alphabets_raw = os.getenv("TOKENIZER_ALPHABETS")
    if alphabets_raw and alphabets_raw.strip():
        alphabets = resolve_alphabets(alphabets_raw.split(","))
    else:
        alphabets = DEFAULT_ALPHABETS

    return Settings(
        port=_positive_int("PORT", 8080),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        log_file=os.getenv("LOG_FILE", "logs/term-rank.log"),
        max_document_size=_positive_int("MAX_DOCUMENT_SIZE", DEFAULT_MAX_DOCUMENT_SIZE),
        result_limit=_positive_int("RESULT_LIMIT", DEFAULT_LIMIT),
        alphabets=alphabets,
        content_sniffing=_flag("CONTENT_SNIFFING", True),
    )
