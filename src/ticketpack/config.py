"""Configuration loading from an optional JSON file plus environment overrides."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ticketpack.contracts.config import TicketPackConfig
from ticketpack.contracts.exceptions import ConfigError

# (config key, environment variables in precedence order)
ENV_OVERRIDES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("model", ("TICKETPACK_MODEL", "GROQ_MODEL")),
    ("base_url", ("TICKETPACK_BASE_URL",)),
    ("api_key", ("GROQ_API_KEY", "OPENAI_API_KEY")),
)


def _read_config_file(config_path: Path) -> dict[str, Any]:
    try:
        payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"config root must be an object: {config_path}")

    replay_path = payload.get("replay_path")
    if isinstance(replay_path, str) and not Path(replay_path).is_absolute():
        payload["replay_path"] = str((config_path.parent / replay_path).resolve())
    return payload


def load_config(path: str | Path | None = None, *, env: Mapping[str, str] | None = None) -> TicketPackConfig:
    """Load and validate config.

    Values come from the JSON file at *path* (if given), then non-empty
    environment variables override the model, base URL and API key.
    """
    raw_payload: dict[str, Any] = {}
    if path is not None:
        raw_payload = _read_config_file(Path(path).expanduser().resolve())

    environ = os.environ if env is None else env
    for key, names in ENV_OVERRIDES:
        for name in names:
            value = (environ.get(name) or "").strip()
            if value:
                raw_payload[key] = value
                break

    try:
        return TicketPackConfig.model_validate(raw_payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
