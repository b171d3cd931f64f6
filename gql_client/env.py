from __future__ import annotations

import json
import logging
import os
from typing import Dict, Optional

from .client import GraphQLClient

DEFAULT_TIMEOUT_SECONDS = 30.0


def endpoint_from_env() -> Optional[str]:
    raw = os.getenv("GQL_CLIENT_ENDPOINT", "").strip()
    return raw or None


def timeout_from_env(default: float = DEFAULT_TIMEOUT_SECONDS) -> float:
    raw = os.getenv("GQL_CLIENT_TIMEOUT_SECONDS", "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"GQL_CLIENT_TIMEOUT_SECONDS must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError("GQL_CLIENT_TIMEOUT_SECONDS must be > 0")
    return value


def headers_from_env() -> Dict[str, str]:
    raw = os.getenv("GQL_CLIENT_HEADERS_JSON")
    if not raw:
        return {}
    try:
        headers = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    if isinstance(headers, dict) and all(
        isinstance(k, str) and isinstance(v, str) for k, v in headers.items()
    ):
        return headers
    return {}


def client_from_env(logger: Optional[logging.Logger] = None) -> GraphQLClient:
    endpoint = endpoint_from_env()
    if not endpoint:
        raise ValueError("Missing GQL_CLIENT_ENDPOINT.")
    return GraphQLClient(
        endpoint,
        headers=headers_from_env(),
        timeout_seconds=timeout_from_env(),
        logger=logger,
    )
