"""Printing data as indented JSON."""

from __future__ import annotations

import json
from typing import Any, TextIO


def _encode(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(obj, (bytes, bytearray)):
        return obj.decode("utf-8", errors="replace")
    raise TypeError(f"object of type {type(obj).__name__} is not JSON serializable")


def print_json(data: Any, stream: TextIO) -> None:
    """Write ``data`` to ``stream`` as JSON indented by two spaces, then a newline."""
    stream.write(json.dumps(data, indent=2, ensure_ascii=False, default=_encode))
    stream.write("\n")