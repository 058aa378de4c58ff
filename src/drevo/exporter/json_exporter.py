"""
json_exporter.py
JSON rendering for the store's view objects (briefs, trees, stats, ...).

- Converts dataclasses to dictionaries (NOT strings), recursively
- Enum members become their plain values
- Output is deterministic: keys keep dataclass field order
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any


def to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Enums → their value (``Sex.MALE`` → 1)
    - Primitives pass through
    - dataclasses → dict (recursively)
    - dict → dict with string keys (recursively)
    - list / tuple / set → list (recursively)
    - Anything else → str(obj)
    """
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_json_compatible(getattr(obj, f.name)) for f in fields(obj)}

    if isinstance(obj, dict):
        return {str(k): to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [to_json_compatible(v) for v in obj]

    return str(obj)


def dumps(obj: Any, indent: int = 2) -> str:
    return json.dumps(to_json_compatible(obj), ensure_ascii=False, indent=indent)

