from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, Mapping, Optional

import httpx

from .errors import GraphQLError, SerializationError
from .logging import get_logger, sanitize_headers
from .models import GraphQLResult

_BODY_SNIPPET_LIMIT = 500


class GraphQLClient:
    def __init__(
        self,
        endpoint: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = 30.0,
        http_client: Optional[httpx.Client] = None,
        logger: Optional[logging.Logger] = None,
        sensitive_headers: Iterable[str] = (),
    ):
        endpoint_clean = (endpoint or "").strip()
        if not endpoint_clean:
            raise ValueError("endpoint is required")
        self.endpoint = endpoint_clean
        self.headers: Dict[str, str] = dict(headers or {})
        self.timeout_seconds = timeout_seconds
        self.logger = get_logger(logger)
        self.sensitive_headers = tuple(sensitive_headers)
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout_seconds)

    def __enter__(self) -> "GraphQLClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def execute(
        self,
        query: str,
        variables: Optional[Mapping[str, Any]] = None,
        operation_name: Optional[str] = None,
    ) -> GraphQLResult:
        if not isinstance(query, str) or not query.strip():
            raise ValueError("query is required")

        payload: Dict[str, Any] = {"query": query}
        if variables is not None:
            payload["variables"] = dict(variables)
        if operation_name:
            payload["operationName"] = operation_name

        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            **self.headers,
        }
        self.logger.debug(
            "POST %s operation=%s headers=%s",
            self.endpoint,
            operation_name,
            sanitize_headers(headers, self.sensitive_headers),
        )

        try:
            response = self._client.post(self.endpoint, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            self.logger.warning("GraphQL request to %s failed: %s", self.endpoint, exc)
            raise GraphQLError.from_transport_failure(exc) from exc

        body = response.text
        self.logger.debug(
            "Response status=%s body=%s", response.status_code, body[:_BODY_SNIPPET_LIMIT]
        )

        if not response.is_success:
            raise self._status_error(response.status_code, body)

        try:
            result = GraphQLResult.from_dict(json.loads(body))
        except (ValueError, SerializationError) as exc:
            self.logger.warning("Unparseable GraphQL response from %s: %s", self.endpoint, exc)
            raise GraphQLError.from_text(
                f"Failed to parse response: {exc}. The response body is: {body}"
            ) from exc

        if result.errors is not None:
            self.logger.warning(
                "GraphQL response carried %d error(s): %s",
                len(result.errors),
                "; ".join(err.message for err in result.errors),
            )
            raise GraphQLError.from_entries(result.errors)
        return result

    def query(
        self,
        query: str,
        variables: Optional[Mapping[str, Any]] = None,
        operation_name: Optional[str] = None,
    ) -> Optional[Any]:
        return self.execute(query, variables=variables, operation_name=operation_name).data

    def query_unwrap(
        self,
        query: str,
        variables: Optional[Mapping[str, Any]] = None,
        operation_name: Optional[str] = None,
    ) -> Any:
        data = self.query(query, variables=variables, operation_name=operation_name)
        if data is None:
            raise GraphQLError.from_text("No data from response")
        return data

    def _status_error(self, status_code: int, body: str) -> GraphQLError:
        """Prefer the GraphQL ``errors`` array of a non-2xx body over the bare status."""
        self.logger.warning("GraphQL request to %s returned HTTP %s", self.endpoint, status_code)
        try:
            result = GraphQLResult.from_dict(json.loads(body))
        except (ValueError, SerializationError):
            result = None
        if result is not None and result.errors is not None:
            return GraphQLError.from_entries(result.errors)
        return GraphQLError.from_text(f"Request failed with status {status_code}")
