"""Decision log schema enforcement."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator

DECISION_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": [
        "received_at",
        "word_count",
        "source",
        "keyword_hit",
        "pool_size",
        "default_index",
    ],
    "properties": {
        "received_at": {"type": "string", "format": "date-time"},
        "word_count": {"type": "integer", "minimum": 0},
        "source": {"type": "string", "enum": ["keyword", "default"]},
        "keyword_hit": {"type": ["string", "null"]},
        "pool_size": {"type": "integer", "minimum": 1},
        "default_index": {"type": ["integer", "null"], "minimum": 0},
    },
    "allOf": [
        {
            "if": {"properties": {"source": {"const": "keyword"}}},
            "then": {
                "properties": {
                    "keyword_hit": {"type": "string"},
                    "default_index": {"type": "null"},
                }
            },
            "else": {
                "properties": {
                    "keyword_hit": {"type": "null"},
                    "default_index": {"type": "integer"},
                }
            },
        }
    ],
}

_validator = Draft7Validator(DECISION_SCHEMA)


def validate_decision(payload: Dict[str, Any]) -> None:
    errors = sorted(_validator.iter_errors(payload), key=lambda e: list(e.path))
    if errors:
        messages = ", ".join(error.message for error in errors)
        raise ValueError(f"decision log validation failed: {messages}")


@dataclass
class DecisionLogRecord:
    word_count: int
    source: str
    pool_size: int
    keyword_hit: Optional[str] = None
    default_index: Optional[int] = None
    received_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "received_at": self.received_at,
            "word_count": self.word_count,
            "source": self.source,
            "keyword_hit": self.keyword_hit,
            "pool_size": self.pool_size,
            "default_index": self.default_index,
        }
        validate_decision(payload)
        return payload
