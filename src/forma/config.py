"""Runtime configuration loaded from the environment."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Default data directory (repository root /data)
DATA_DIR = Path(__file__).parent.parent.parent / "data"

# Gemini's OpenAI-compatible endpoint
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_PLAN_MODEL = "gemini-2.5-flash"
DEFAULT_INGEST_MODEL = "gemini-2.5-flash-lite"

# Text sent to the extraction model is cut to this many characters
INGEST_MAX_CHARS = 50000
# Documents with less text than this are rejected before extraction
INGEST_MIN_CHARS = 50

_POOL_LABELS = ["Key 1 (Primary)", "Key 2 (Backup)", "Key 3 (Backup)"]


@dataclass(frozen=True)
class ApiCredential:
    """One entry of the credential pool."""

    key: str | None
    model: str
    name: str


@dataclass(frozen=True)
class Settings:
    """Process configuration for forma."""

    api_keys: tuple[str | None, ...] = ()
    fallback_api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    plan_model: str = DEFAULT_PLAN_MODEL
    ingest_model: str = DEFAULT_INGEST_MODEL
    data_dir: Path = field(default=DATA_DIR)
    admin_pin: str | None = None
    log_level: str = "INFO"

    def credential_pool(self) -> list[ApiCredential]:
        """Ordered credential pool with unset keys filtered out."""
        pool = [
            ApiCredential(key=key, model=self.plan_model, name=label)
            for key, label in zip(self.api_keys, _POOL_LABELS)
        ]
        return [config for config in pool if config.key]

    def ingest_api_key(self) -> str | None:
        """Key used for admin extraction calls (primary key first)."""
        primary = self.api_keys[0] if self.api_keys else None
        return primary or self.fallback_api_key


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Build Settings from environment variables (and an optional .env file)."""
    load_dotenv(env_file)

    data_dir = os.getenv("FORMA_DATA_DIR")
    return Settings(
        api_keys=tuple(
            os.getenv(f"GEMINI_API_KEY_{i}") or None for i in range(1, len(_POOL_LABELS) + 1)
        ),
        fallback_api_key=os.getenv("GEMINI_API_KEY") or None,
        base_url=os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL),
        plan_model=os.getenv("FORMA_PLAN_MODEL", DEFAULT_PLAN_MODEL),
        ingest_model=os.getenv("FORMA_INGEST_MODEL", DEFAULT_INGEST_MODEL),
        data_dir=Path(data_dir) if data_dir else DATA_DIR,
        admin_pin=os.getenv("FORMA_ADMIN_PIN") or None,
        log_level=os.getenv("FORMA_LOG_LEVEL", "INFO"),
    )
