from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validate

from perf_analytics.core.engine.contract import EngineContractError
from perf_analytics.core.types import CLUSTER_KINDS, RECORD_KINDS

DEFAULT_ENGINE_CONFIG: dict[str, Any] = {
    "seed": 1337,
    "max_iterations": 30,
    "top_n": 10,
    "k": 4,
    "cluster_kinds": list(CLUSTER_KINDS),
    # Pre-analysis record filter.
    "enabled_kinds": list(RECORD_KINDS),
    "query": "",
}

ENGINE_CONFIG_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "seed": {"type": "integer", "minimum": 0, "maximum": 0xFFFFFFFF},
        "max_iterations": {"type": "integer", "minimum": 1},
        "top_n": {"type": "integer", "minimum": 0},
        "k": {"type": "integer", "minimum": 1},
        "cluster_kinds": {
            "type": "array",
            "items": {"type": "string", "enum": list(RECORD_KINDS)},
        },
        "enabled_kinds": {
            "type": "array",
            "items": {"type": "string", "enum": list(RECORD_KINDS)},
        },
        "query": {"type": "string"},
    },
    "additionalProperties": False,
}


def merge_config(config: dict[str, Any] | None) -> dict[str, Any]:
    if config is None:
        return deepcopy(DEFAULT_ENGINE_CONFIG)
    merged = deepcopy(DEFAULT_ENGINE_CONFIG)
    _deep_merge(merged, config)
    return merged


def _deep_merge(target: dict[str, Any], incoming: dict[str, Any]) -> None:
    for key, value in incoming.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        else:
            target[key] = value


def validate_config(config: dict[str, Any]) -> None:
    try:
        validate(instance=config, schema=ENGINE_CONFIG_SCHEMA)
    except ValidationError as exc:
        raise EngineContractError(f"Invalid engine config: {exc.message}") from exc


def load_config(path: Path) -> dict[str, Any]:
    payload = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise EngineContractError("Engine config file must contain a mapping")
    merged = merge_config(payload)
    validate_config(merged)
    return merged
