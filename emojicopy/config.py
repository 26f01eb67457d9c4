"""Central configuration for the emoji catalog service."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw in (None, ""):
        return default
    return int(raw)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw in (None, ""):
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# ── Paths ──────────────────────────────────────────────────────────────────
PACKAGE_DIR = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_DIR / "data"
EMOJI_DATA_FILE = DATA_DIR / "emojis.json"

# Optional JSON snapshot of the SEO pages; memory only when unset.
PAGES_FILE = Path(os.environ["PAGES_FILE"]) if os.getenv("PAGES_FILE") else None

# ── Logging ────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Startup ────────────────────────────────────────────────────────────────
SEED_ON_STARTUP = _env_bool("SEED_ON_STARTUP", True)
SEED_BATCH_SIZE = _env_int("SEED_BATCH_SIZE", 50)

# ── Catalog ────────────────────────────────────────────────────────────────
TRENDING_LIMIT = _env_int("TRENDING_LIMIT", 50)

# ── Page generation ────────────────────────────────────────────────────────
RELATED_EMOJI_LIMIT = _env_int("RELATED_EMOJI_LIMIT", 20)
BATCH_SIZE = _env_int("BATCH_SIZE", 5)
MAX_BATCH_ROUNDS = _env_int("MAX_BATCH_ROUNDS", 100)
