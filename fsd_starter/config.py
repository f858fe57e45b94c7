"""
Starter Configuration
=====================

Settings read from the environment. The CLI loads `.env` files with
python-dotenv before calling load_config().

Environment:
    FSD_STARTER_NPM        npm executable (default: npm, npm.cmd on Windows)
    FSD_STARTER_LOG_LEVEL  logging level name (default: WARNING)
"""

from dataclasses import dataclass
from typing import Optional, Mapping
import logging
import os
import sys


def default_npm_command() -> str:
    """npm is a batch shim on Windows, so it has to be named explicitly."""
    return 'npm.cmd' if sys.platform == 'win32' else 'npm'


@dataclass(frozen=True)
class StarterConfig:
    """Runtime settings for a bootstrap run."""
    npm_command: str = 'npm'
    log_level: int = logging.WARNING


def _parse_log_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if isinstance(level, int):
        return level
    raise ValueError(f"Unknown log level: {raw!r}")


def load_config(environ: Optional[Mapping[str, str]] = None) -> StarterConfig:
    """
    Build a StarterConfig from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        StarterConfig with defaults for anything unset

    Raises:
        ValueError: If FSD_STARTER_LOG_LEVEL is not a known level name
    """
    if environ is None:
        environ = os.environ

    npm = (environ.get('FSD_STARTER_NPM') or '').strip() or default_npm_command()

    raw_level = (environ.get('FSD_STARTER_LOG_LEVEL') or '').strip()
    log_level = _parse_log_level(raw_level) if raw_level else logging.WARNING

    return StarterConfig(npm_command=npm, log_level=log_level)
