from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_PERIOD_COUNT = 12
DEFAULT_CURRENCY = "MAD"
DEFAULT_OUTPUT_DIR = "reports"
DEFAULT_CHART_DPI = 100


@dataclass
class Settings:
    period_count: int
    currency: str
    output_dir: Path
    chart_dpi: int


def _read_env_file() -> dict[str, str]:
    """Load minimal .env to support SV_* keys if not in the environment.

    We intentionally do not overwrite existing os.environ values.
    """
    env_path = Path.cwd() / ".env"
    env: dict[str, str] = {}
    if not env_path.exists():
        return env
    try:
        lines = env_path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Ignoring unreadable .env file", extra={"error": str(e)})
        return {}
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        k, v = line.split("=", 1)
        env[k.strip()] = v.strip().strip('"').strip("'")
    return env


def _get_env(
    name: str,
    fallback_names: list[str] | None = None,
    env_file: dict[str, str] | None = None,
) -> str | None:
    # Priority: process env -> .env -> fallback names
    val = os.getenv(name)
    if val:
        return val
    if env_file and name in env_file:
        return env_file[name]
    if fallback_names:
        for fb in fallback_names:
            v = os.getenv(fb)
            if v:
                return v
            if env_file and fb in env_file:
                return env_file[fb]
    return None


def _positive_int(name: str, raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(
            f"Invalid integer for {name}, using default",
            extra={"value": raw, "default": default},
        )
        return default
    if value <= 0:
        logger.warning(
            f"{name} must be positive, using default",
            extra={"value": value, "default": default},
        )
        return default
    return value


def get_settings() -> Settings:
    env_file = _read_env_file()
    # Support SV_* prefixed variables with non-prefixed fallbacks
    period_count = _get_env("SV_PERIOD_COUNT", ["PERIOD_COUNT"], env_file)
    currency = _get_env("SV_CURRENCY", ["CURRENCY"], env_file)
    output_dir = _get_env("SV_OUTPUT_DIR", None, env_file)
    dpi = _get_env("SV_CHART_DPI", None, env_file)
    return Settings(
        period_count=_positive_int("SV_PERIOD_COUNT", period_count, DEFAULT_PERIOD_COUNT),
        currency=currency or DEFAULT_CURRENCY,
        output_dir=Path(output_dir or DEFAULT_OUTPUT_DIR),
        chart_dpi=_positive_int("SV_CHART_DPI", dpi, DEFAULT_CHART_DPI),
    )
