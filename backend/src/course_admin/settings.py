from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping

_TRUTHY = {"1", "true", "yes", "on"}


def read_env_file(path: Path) -> dict[str, str]:
    """Parse KEY=VALUE lines from a .env file; a missing file yields nothing."""
    if not path.exists():
        return {}

    values: dict[str, str] = {}
    for raw_line in path.read_text(encoding='utf-8').splitlines():
        line = raw_line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, value = line.split('=', 1)
        values[key.strip()] = value.strip().strip('"').strip("'")
    return values


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_version: str
    debug: bool
    log_level: str
    # term used for new courses when the request leaves it blank
    default_term: str


def load_settings(env_file: Path | None = Path('.env'), environ: Mapping[str, str] | None = None) -> Settings:
    # exported variables win over the .env file
    env = {**(read_env_file(env_file) if env_file else {}), **(os.environ if environ is None else environ)}
    return Settings(
        app_name=env.get("APP_NAME", "course-admin"),
        app_version=env.get("APP_VERSION", "0.1.0"),
        debug=env.get("APP_DEBUG", "false").lower() in _TRUTHY,
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
        default_term=env.get("DEFAULT_TERM", "").strip(),
    )
