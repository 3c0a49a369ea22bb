"""Configuration loader for the responder."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ResponderConfig:
    responses_path: Path
    defaults_path: Path
    source_encoding: str
    random_seed: Optional[int]
    decision_log: bool
    log_level: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResponderConfig":
        seed = data.get("random_seed")
        return cls(
            responses_path=Path(data.get("responses_path", "config/responses.txt")),
            defaults_path=Path(data.get("defaults_path", "config/default.txt")),
            source_encoding=data.get("source_encoding", "ascii"),
            random_seed=int(seed) if seed is not None else None,
            decision_log=bool(data.get("decision_log", False)),
            log_level=str(data.get("log_level", "INFO")).upper(),
        )


ENV_MAP = {
    "responses_path": "RESPONDER_RESPONSES_PATH",
    "defaults_path": "RESPONDER_DEFAULTS_PATH",
    "source_encoding": "RESPONDER_SOURCE_ENCODING",
    "random_seed": "RESPONDER_RANDOM_SEED",
    "decision_log": "RESPONDER_DECISION_LOG",
    "log_level": "RESPONDER_LOG_LEVEL",
}


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        value: Any = os.environ[env_name]
        if key == "random_seed":
            value = int(value) if value else None
        elif key == "decision_log":
            value = value.strip().lower() in _TRUE_VALUES
        merged[key] = value

    return merged


def load_config(config_path: str | Path = "config/responder.defaults.yml") -> ResponderConfig:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = load_yaml(path)
    data = merge_env_overrides(data)
    return ResponderConfig.from_dict(data)
