"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))


class Settings(BaseModel):
    """Feeder settings loaded from environment variables or .env files."""

    energy_limit: int = Field(
        default=500,
        ge=0,
        description="Energy budget available per feeding period.",
    )
    initial_stock: int = Field(
        default=15,
        ge=0,
        description="Starting quantity of each ingredient in a fresh stock ledger.",
    )
    meal_plan_capacity: int = Field(
        default=4,
        ge=1,
        description="Number of meal-plan slots held by the repository.",
    )
    log_level: str = Field(default="INFO", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )

    model_config = ConfigDict(frozen=True)


def _parse_env_file(path: Path) -> dict[str, str]:
    payload: dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, raw_value = line.split("=", 1)
                payload[key.strip()] = raw_value.strip()
    except FileNotFoundError:
        return {}
    return payload


def _load_env_file_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        values.update(_parse_env_file(candidate))
    return values


def _load_from_env() -> dict[str, object]:
    """Load optional overrides from env vars (with .env fallbacks)."""

    file_values = _load_env_file_values()

    def _env(key: str) -> Optional[str]:
        return os.environ.get(key) or file_values.get(key)

    payload: dict[str, object] = {}
    for key, field, minimum in (
        ("AUTOFEEDER_ENERGY_LIMIT", "energy_limit", 0),
        ("AUTOFEEDER_INITIAL_STOCK", "initial_stock", 0),
        ("AUTOFEEDER_MEAL_PLAN_CAPACITY", "meal_plan_capacity", 1),
    ):
        if (raw := _env(key)):
            try:
                value = int(raw)
            except ValueError:
                continue
            if value >= minimum:
                payload[field] = value
    if (log_level := _env("AUTOFEEDER_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("AUTOFEEDER_LOG_FORMAT")):
        payload["log_format"] = log_format
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
