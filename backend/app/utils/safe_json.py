import json
from typing import Any


def safe_json(body: Any) -> Any:
    """
    Parse a JSON body without ever raising.

    Accepts text, bytes, None, or a response object exposing `.text`.
    Empty or malformed bodies decode to an empty dict.
    """
    if body is not None and not isinstance(body, (str, bytes, bytearray)):
        body = getattr(body, "text", None)

    if not isinstance(body, (str, bytes, bytearray)):
        return {}

    if isinstance(body, (bytes, bytearray)):
        body = bytes(body).decode("utf-8", errors="replace")

    if not body.strip():
        return {}

    try:
        return json.loads(body)
    except (ValueError, RecursionError):
        # RecursionError: pathologically nested input
        return {}
