from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping

REDACTED = "<redacted>"

_SENSITIVE_HEADERS = frozenset({"authorization", "proxy-authorization", "cookie", "set-cookie"})
_SENSITIVE_SUFFIXES = ("-token", "-key", "-secret")


def get_logger(logger: logging.Logger | None = None) -> logging.Logger:
    return logger if logger is not None else logging.getLogger("gql_client")


def is_sensitive_header(name: str, extra: Iterable[str] = ()) -> bool:
    """Credential-bearing header names, e.g. ``X-Api-Key`` or ``X-Auth-Token``."""
    lowered = name.lower()
    if lowered in _SENSITIVE_HEADERS or lowered.endswith(_SENSITIVE_SUFFIXES):
        return True
    return lowered in {item.lower() for item in extra}


def sanitize_headers(
    headers: Mapping[str, str], extra_sensitive: Iterable[str] = ()
) -> Dict[str, str]:
    extra = tuple(extra_sensitive)
    return {
        key: REDACTED if is_sensitive_header(key, extra) else value
        for key, value in headers.items()
    }
