"""Small utility functions."""

import json
from dataclasses import asdict, is_dataclass
from typing import Any, Optional


def parse_charset(content_type: Optional[str], default: str = "utf-8") -> str:
    """Extract the charset parameter from a Content-Type header value."""
    if not content_type:
        return default
    for param in content_type.split(";")[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset" and value.strip():
            return value.strip().strip('"\'')
    return default


def safe_json(obj: Any) -> str:
    """Serialize a result object to JSON, including dataclass properties."""
    if is_dataclass(obj) and not isinstance(obj, type):
        data = asdict(obj)
        for name in dir(type(obj)):
            if isinstance(getattr(type(obj), name, None), property):
                data[name] = getattr(obj, name)
    else:
        data = obj

    try:
        return json.dumps(data, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        return f"<serialization error: {e}>"
