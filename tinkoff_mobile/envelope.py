"""
Response envelope and query-parameter encoding.

Every endpoint answers with the same JSON wrapper::

    {"resultCode": "OK", "payload": {...}}
    {"resultCode": "ERROR", "code": "session.not.found", "message": "..."}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .config import RESULT_OK


@dataclass(frozen=True)
class Envelope:
    """Decoded response body."""
    result_code: str | None = None
    code: str | None = None
    message: str | None = None
    payload: Any = None

    @classmethod
    def from_dict(cls, data: dict) -> Envelope:
        return cls(
            result_code=data.get("resultCode"),
            code=data.get("code"),
            message=data.get("message"),
            payload=data.get("payload"),
        )

    @classmethod
    def from_text(cls, text: str) -> Envelope:
        """
        Parse a raw response body.

        Raises json.JSONDecodeError for a body that is not JSON, and
        ValueError when the JSON document is not an object.
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        return cls.from_dict(data)

    @property
    def ok(self) -> bool:
        return self.result_code == RESULT_OK


def _encode_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_params(params: dict[str, Any]) -> list[tuple[str, str]]:
    """
    Flatten *params* into ordered (name, value) pairs for a query string.

    An unset value is kept as an empty parameter (``name=``) rather than
    dropped, so the server still sees the field and rejects it on its side.
    Ruby's ``URI.encode_www_form`` would send a bare ``name`` instead.
    """
    return [(name, _encode_value(value)) for name, value in params.items()]
