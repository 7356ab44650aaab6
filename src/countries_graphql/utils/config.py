from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv


DEFAULT_ENDPOINT_URL = "https://countries.trevorblades.com/"


@dataclass(frozen=True)
class APIConfig:
    endpoint_url: str = DEFAULT_ENDPOINT_URL
    # None -> HTTP library default
    timeout_seconds: float | None = None


def _project_root() -> Path:
    # Resolve from this file: .../src/countries_graphql/utils/config.py -> project root is 4 parents up.
    return Path(__file__).resolve().parents[3]


def load_api_config(path: str | Path | None = None) -> APIConfig:
    """
    Load API config from YAML.

    Precedence:
    - explicit `path`
    - env `COUNTRIES_API_CONFIG` (.env is honoured)
    - project default `config/api.yaml`

    A missing project default yields the built-in defaults; an explicitly
    requested file that does not exist is an error.
    """
    load_dotenv()
    explicit = path or os.getenv("COUNTRIES_API_CONFIG")
    cfg_path = Path(explicit) if explicit else _project_root() / "config" / "api.yaml"
    if not explicit and not cfg_path.exists():
        return APIConfig()

    cfg = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    api = cfg.get("api") or {}

    endpoint_url = api.get("endpoint_url")
    timeout_seconds = api.get("timeout_seconds")

    if not endpoint_url:
        raise ValueError(f"Missing api.endpoint_url in {cfg_path}")
    if timeout_seconds is not None and float(timeout_seconds) <= 0:
        raise ValueError(f"api.timeout_seconds must be > 0 in {cfg_path}")

    return APIConfig(
        endpoint_url=str(endpoint_url),
        timeout_seconds=float(timeout_seconds) if timeout_seconds is not None else None,
    )
