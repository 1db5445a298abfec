"""JSON request and response bodies."""

from __future__ import annotations

import json
from typing import Any


def encode(data: Any) -> bytes:
    """Serialize a payload to a UTF-8 JSON request body."""
    return json.dumps(data, ensure_ascii=False).encode("utf-8")


def decode(body: bytes | str | None) -> Any:
    """Deserialize a JSON response body.

    An empty body yields ``None``. Malformed JSON raises
    ``json.JSONDecodeError``.
    """
    if not body:
        return None
    return json.loads(body)
