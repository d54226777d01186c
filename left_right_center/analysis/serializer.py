"""
serializer.py
Renders simulation summaries (and any dataclass or plain object) as JSON for printing.
"""

import json
from typing import Any


def dumps(obj: Any, indent: int = 2) -> str:
    """
    Serialize a Python object to a JSON string. Objects exposing as_dict() use it; other objects fall back to __dict__.
    Args:
        obj: Object to serialize.
        indent (int): JSON indentation.
    Returns:
        str: JSON string.
    """
    return json.dumps(obj, indent=indent, default=_default)


def _default(o):
    if hasattr(o, "as_dict"):
        return o.as_dict()
    return getattr(o, '__dict__', str(o))
