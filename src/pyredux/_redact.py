"""Helpers for safe debug logging.

Actions and state trees are arbitrary user data and may carry secrets.  This
module renders them into a bounded, plain structure with sensitive fields
masked before they are emitted in DEBUG logs.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping, Sequence, Set
from typing import Any

from pydantic import BaseModel

DEFAULT_REDACT_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "secret",
        "token",
        "accesstoken",
        "refreshtoken",
        "apikey",
        "authorization",
        "cookie",
    }
)


def _normalize_key(key: Any) -> str:
    return str(key).lower().replace("_", "").replace("-", "")


def describe_for_log(
    value: Any,
    *,
    max_string: int = 512,
    redact_keys: frozenset[str] = DEFAULT_REDACT_KEYS,
    _depth: int = 0,
) -> Any:
    """Return a bounded, redacted copy of *value* suitable for debug logs.

    Mapping keys are matched against *redact_keys* case-insensitively with
    ``_`` and ``-`` ignored, so ``access_token`` and ``Access-Token`` both
    match ``accesstoken``.  Enum members render as their value and sets as
    sorted lists, so log lines are stable across runs.
    """
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, enum.Enum):
        return describe_for_log(value.value, max_string=max_string, redact_keys=redact_keys, _depth=_depth + 1)

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, BaseModel):
        return describe_for_log(value.model_dump(), max_string=max_string, redact_keys=redact_keys, _depth=_depth + 1)

    if isinstance(value, Mapping):
        normalized = {_normalize_key(k) for k in redact_keys}
        rendered: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if _normalize_key(key) in normalized:
                rendered[key] = "<redacted>"
            else:
                rendered[key] = describe_for_log(v, max_string=max_string, redact_keys=redact_keys, _depth=_depth + 1)
        return rendered

    if isinstance(value, Set):
        items = [describe_for_log(v, max_string=max_string, redact_keys=redact_keys, _depth=_depth + 1) for v in value]
        return sorted(items, key=repr)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [describe_for_log(v, max_string=max_string, redact_keys=redact_keys, _depth=_depth + 1) for v in value]

    # Fallback: represent unknown objects without dumping internals.
    return repr(value)
