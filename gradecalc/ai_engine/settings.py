from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MODEL = "google/gemini-2.5-flash-lite"
DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"


def env_bool(name: str, default: bool = False) -> bool:
    raw = str(os.environ.get(name, "1" if default else "0")).strip().lower()
    return raw in {"1", "true", "yes", "on"}


def env_int(name: str, default: int) -> int:
    try:
        return int(str(os.environ.get(name, str(default))).strip())
    except Exception:
        return int(default)


def env_float(name: str, default: float) -> float:
    try:
        return float(str(os.environ.get(name, str(default))).strip())
    except Exception:
        return float(default)


def env_str(name: str, default: str = "") -> str:
    return str(os.environ.get(name, default))


@dataclass(frozen=True)
class AdvisorySettings:
    enabled: bool = True
    timeout_s: float = 15.0
    require_agreement: bool = False

    api_key: str = ""
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    temperature: float = 0.0
    max_retries: int = 0


def get_advisory_settings() -> AdvisorySettings:
    return AdvisorySettings(
        enabled=env_bool("ADVISORY_ENABLED", default=True),
        timeout_s=max(env_float("ADVISORY_TIMEOUT_S", 15.0), 0.1),
        require_agreement=env_bool("ADVISORY_REQUIRE_AGREEMENT", default=False),
        api_key=env_str("OPENROUTER_API_KEY").strip(),
        model=env_str("OPENROUTER_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL,
        base_url=env_str("OPENROUTER_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL,
        temperature=env_float("OPENROUTER_TEMPERATURE", 0.0),
        max_retries=max(env_int("OPENROUTER_MAX_RETRIES", 0), 0),
    )
