from __future__ import annotations

import os
from dataclasses import dataclass


def _env_optional_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    return int(value)


@dataclass(frozen=True)
class Settings:
    """Runtime defaults loaded from environment variables.

    Command-line flags take precedence over every value here.
    """

    map_path: str = os.getenv("INVASION_MAP_PATH", "map.txt")
    num_aliens: int = int(os.getenv("INVASION_NUM_ALIENS", "10"))
    num_steps: int = int(os.getenv("INVASION_NUM_STEPS", "10000"))
    random_seed: int | None = _env_optional_int(os.getenv("INVASION_RANDOM_SEED"))
    log_level: str = os.getenv("INVASION_LOG_LEVEL", "WARNING").upper()


settings = Settings()
