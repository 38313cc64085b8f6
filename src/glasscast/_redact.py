"""Masking of secrets in debug logs.

The only secrets glasscast sends or receives are the account password in
auth request bodies and the ``access_token`` in the login response.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_SECRET_KEYS: frozenset[str] = frozenset({"password", "access_token"})
_MASK = "<redacted>"


def redact_for_log(value: Any, *, max_string: int = 256) -> Any:
    """Copy an auth payload with secret fields masked.

    Non-mapping values are passed through, with long strings shortened.
    """
    if isinstance(value, Mapping):
        return {
            str(key): _MASK if str(key).lower() in _SECRET_KEYS else redact_for_log(item, max_string=max_string)
            for key, item in value.items()
        }
    if isinstance(value, str) and len(value) > max_string:
        return f"{value[:max_string]}...<{len(value) - max_string} more>"
    return value
