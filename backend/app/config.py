# -*- coding: utf-8 -*-
"""Runtime configuration read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from typing import List, Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_CLASSIFIER_BASE_URL = "https://sonar-rock-vs-mine-api.onrender.com"
FEATURE_COUNT = 60

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Application settings."""

    classifier_backend: Literal["remote", "heuristic"] = "remote"
    classifier_base_url: str = DEFAULT_CLASSIFIER_BASE_URL
    classifier_timeout_seconds: Optional[float] = Field(default=None, gt=0)
    strict_validation: bool = True
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def _env_optional_float(name: str) -> Optional[float]:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_settings() -> Settings:
    """Build :class:`Settings` from environment variables."""
    load_dotenv()

    backend = os.getenv("CLASSIFIER_BACKEND", "remote").strip().lower()
    if backend not in {"remote", "heuristic"}:
        raise ValueError(
            f"CLASSIFIER_BACKEND must be 'remote' or 'heuristic', got {backend!r}"
        )

    port_raw = os.getenv("PORT", "8000").strip()
    try:
        port = int(port_raw)
    except ValueError as exc:
        raise ValueError(f"PORT must be an integer, got {port_raw!r}") from exc

    return Settings(
        classifier_backend=backend,
        classifier_base_url=os.getenv("CLASSIFIER_BASE_URL", DEFAULT_CLASSIFIER_BASE_URL).strip()
        or DEFAULT_CLASSIFIER_BASE_URL,
        classifier_timeout_seconds=_env_optional_float("CLASSIFIER_TIMEOUT_SECONDS"),
        strict_validation=_env_flag("STRICT_VALIDATION", True),
        cors_origins=_env_list("CORS_ORIGINS", ["http://localhost:5173"]),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
    )
