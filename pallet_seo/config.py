"""
Pipeline configuration.

Credentials and settings come from the environment, optionally populated from
a .env file. Values are read at use time so tests and CLIs can override them.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from pallet_seo.errors import FatalConfigError

# =============================================================================
# CONFIGURATION
# =============================================================================

PACKAGE_DIR = Path(__file__).parent
PROJECT_ROOT = PACKAGE_DIR.parent

# Checked in order, first match wins
ENV_FILENAMES = [".env.prod", ".env.local", ".env"]

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_MAX_TOKENS = 4096
DEFAULT_REQUEST_TIMEOUT = 120.0

DEFAULT_OUTPUT_DIR = "output"
SNAPSHOT_PREFIX = "generated-"

# Generation policy
MAX_ATTEMPTS = 3
RETRY_BACKOFF_SECONDS = 2.0
INTER_PAGE_DELAY_SECONDS = 1.0
MAX_AVOID_PHRASES = 30
MAX_PROMPT_KEYWORDS = 60
PHRASE_WINDOW = 4


# =============================================================================
# ENVIRONMENT LOADING
# =============================================================================


def load_env() -> Optional[Path]:
    """Load the first .env file found. Returns its path, or None."""
    search_dirs = [Path.cwd(), PROJECT_ROOT]
    for directory in search_dirs:
        for filename in ENV_FILENAMES:
            env_path = directory / filename
            if env_path.exists():
                load_dotenv(env_path)
                return env_path
    return None


def require_env(name: str) -> str:
    """Return a required environment variable or raise FatalConfigError."""
    value = os.getenv(name, "").strip()
    if not value:
        raise FatalConfigError(f"{name} environment variable is required")
    return value


def get_model() -> str:
    return os.getenv("SEO_GENERATOR_MODEL", DEFAULT_MODEL)


def get_max_tokens() -> int:
    return int(os.getenv("SEO_MAX_TOKENS", DEFAULT_MAX_TOKENS))


def get_request_timeout() -> float:
    return float(os.getenv("SEO_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT))


def get_output_dir() -> Path:
    return Path(os.getenv("SEO_OUTPUT_DIR", DEFAULT_OUTPUT_DIR))


def get_database_url() -> str:
    """DATABASE_URL or None when unset."""
    value = os.getenv("DATABASE_URL", "").strip()
    return value or None
