"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "cptest report",
    "type": "object",
    "required": ["schema_version", "solution", "summary", "cases"],
    "properties": {
        "schema_version": {"type": "string"},
        "solution": {"type": ["string", "null"]},
        "summary": {
            "type": "object",
            "required": ["total", "accepted"],
            "properties": {
                "total": {"type": "integer"},
                "accepted": {"type": "integer"},
            },
        },
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "verdict", "exit_code", "timed_out", "elapsed_ms", "whitespace_advisory"],
                "properties": {
                    "id": {"type": "integer", "minimum": 1},
                    "verdict": {"enum": ["AC", "WA", "TLE", "RTE"]},
                    "exit_code": {"type": ["integer", "null"]},
                    "timed_out": {"type": "boolean"},
                    "elapsed_ms": {"type": "integer"},
                    "whitespace_advisory": {"type": "boolean"},
                    "stderr": {"type": "string"},
                    "message": {"type": "string"},
                    "mismatched_rows": {"type": "array", "items": {"type": "integer"}},
                },
            },
        },
    },
}
