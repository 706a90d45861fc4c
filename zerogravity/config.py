"""
Runtime configuration for the Zero Gravity Lesson.

Every setting has a default, so the app runs with no configuration at all.
Overrides may be placed in a .env file at the project root (or exported in
the environment):

    ZEROG_ASSET_DIR=assets
    ZEROG_PROGRESS_FILE=progress.txt
    ZEROG_LESSON_NAME=Zero Gravity
    ZEROG_SUMMARY_ENDPOINT=https://en.wikipedia.org/api/rest_v1/page/summary/
    ZEROG_USER_AGENT=ZeroGravityLessonApp/1.0
    ZEROG_REQUEST_TIMEOUT=10
    ZEROG_DEBUG=1

We use python-dotenv + os.getenv, same as for any other secret-free setting.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .logger import logger

DEFAULT_SUMMARY_ENDPOINT = "https://en.wikipedia.org/api/rest_v1/page/summary/"
DEFAULT_USER_AGENT = "ZeroGravityLessonApp/1.0"


@dataclass(frozen=True)
class AppConfig:
    """Settings shared by the app, the summary client and the progress log."""
    asset_dir: Path = Path(".")
    progress_file: str = "progress.txt"
    lesson_name: str = "Zero Gravity"
    summary_endpoint: str = DEFAULT_SUMMARY_ENDPOINT
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: float = 10.0
    debug: bool = True

    def asset(self, name: str) -> Path:
        """Resolve a well-known asset file name against the asset directory."""
        return self.asset_dir / name


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    return value or default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not a number, using {default}")
        return default
    if value <= 0:
        logger.warning(f"{name} must be positive, using {default}")
        return default
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw not in ("0", "false", "no", "off")


def load_config(env_file: Optional[str] = None) -> AppConfig:
    """
    Build the AppConfig from the environment.

    Loads `env_file` (or the nearest .env above this package) first;
    variables already present in the environment win over the file.
    """
    if load_dotenv(env_file):
        logger.env_success(".env file loaded")
    else:
        logger.env("No .env file found, using defaults")

    config = AppConfig(
        asset_dir=Path(_env_str("ZEROG_ASSET_DIR", ".")),
        progress_file=_env_str("ZEROG_PROGRESS_FILE", "progress.txt"),
        lesson_name=_env_str("ZEROG_LESSON_NAME", "Zero Gravity"),
        summary_endpoint=_env_str("ZEROG_SUMMARY_ENDPOINT", DEFAULT_SUMMARY_ENDPOINT),
        user_agent=_env_str("ZEROG_USER_AGENT", DEFAULT_USER_AGENT),
        request_timeout=_env_float("ZEROG_REQUEST_TIMEOUT", 10.0),
        debug=_env_bool("ZEROG_DEBUG", True),
    )

    logger.env(f"Asset directory: {config.asset_dir.resolve()}")
    logger.env(f"Progress file: {config.progress_file}")
    logger.env(f"Summary endpoint: {config.summary_endpoint} (timeout={config.request_timeout}s)")
    return config
