"""Runtime configuration loaded from environment variables (.env.local / .env)"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent


def load_env_files(project_root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local first (highest priority), then .env as fallback.

    Returns:
        Path of the loaded file, or None if neither exists
        (system environment variables only)
    """
    env_local = project_root / ".env.local"
    env_file = project_root / ".env"

    if env_local.exists():
        load_dotenv(env_local, override=True)
        return env_local
    if env_file.exists():
        load_dotenv(env_file, override=True)
        return env_file
    return None


def _parse(env: Mapping[str, str], name: str, default: str, cast):
    raw = env.get(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from None


def _parse_extensions(raw: str) -> Tuple[str, ...]:
    extensions = []
    for ext in raw.split(","):
        ext = ext.strip().lower()
        if not ext:
            continue
        extensions.append(ext if ext.startswith(".") else f".{ext}")
    if not extensions:
        raise ValueError("empty extension list")
    return tuple(extensions)


@dataclass(frozen=True)
class Settings:
    search_root: str = "."
    extensions: Tuple[str, ...] = (".pdf",)
    min_results: int = 5
    score_threshold: float = 0.5
    phrase_bonus: float = 100.0
    min_phrase_length: int = 5
    display_limit: int = 5
    snippet_width: int = 70
    search_provider: str = "scholar"
    search_timeout: float = 15.0
    extract_workers: int = 4
    log_level: str = "INFO"
    log_file: str = "logs/pdf-organizer.log"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            env: Mapping to read from (default: os.environ after loading .env files)

        Raises:
            ValueError: If a variable cannot be parsed
        """
        if env is None:
            load_env_files()
            env = os.environ

        provider = env.get("SEARCH_PROVIDER", "scholar").strip().lower()
        if provider not in ("scholar", "none"):
            raise ValueError(f"Invalid value for SEARCH_PROVIDER: {provider!r} (valid: scholar, none)")

        return cls(
            search_root=env.get("SEARCH_ROOT", "."),
            extensions=_parse(env, "DOCUMENT_EXTENSIONS", ".pdf", _parse_extensions),
            min_results=_parse(env, "MIN_RESULTS", "5", int),
            score_threshold=_parse(env, "SCORE_THRESHOLD", "0.5", float),
            phrase_bonus=_parse(env, "PHRASE_BONUS", "100.0", float),
            min_phrase_length=_parse(env, "MIN_PHRASE_LENGTH", "5", int),
            display_limit=_parse(env, "DISPLAY_LIMIT", "5", int),
            snippet_width=_parse(env, "SNIPPET_WIDTH", "70", int),
            search_provider=provider,
            search_timeout=_parse(env, "SEARCH_TIMEOUT", "15", float),
            extract_workers=_parse(env, "EXTRACT_WORKERS", "4", int),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            log_file=env.get("LOG_FILE", "logs/pdf-organizer.log"),
        )

    def with_overrides(self, **changes) -> "Settings":
        """Copy with some fields replaced (None values are ignored)"""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
