from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .errors import SerializationError


def _expect_dict(obj: Any, path: str) -> Dict[str, Any]:
    if not isinstance(obj, dict):
        raise SerializationError(f"Expected object at {path}")
    return obj


def _expect_list(obj: Any, path: str) -> List[Any]:
    if not isinstance(obj, list):
        raise SerializationError(f"Expected list at {path}")
    return obj


def _expect_str(obj: Any, path: str) -> str:
    if not isinstance(obj, str):
        raise SerializationError(f"Expected string at {path}")
    return obj


def _expect_uint(obj: Any, path: str) -> int:
    if isinstance(obj, bool) or not isinstance(obj, int) or obj < 0:
        raise SerializationError(f"Expected non-negative integer at {path}")
    return obj


@dataclass(frozen=True)
class ErrorLocation:
    line: int
    column: int

    @staticmethod
    def from_dict(obj: Any, path: str) -> "ErrorLocation":
        raw = _expect_dict(obj, path)
        return ErrorLocation(
            line=_expect_uint(raw.get("line"), f"{path}.line"),
            column=_expect_uint(raw.get("column"), f"{path}.column"),
        )


@dataclass(frozen=True)
class FieldName:
    name: str


@dataclass(frozen=True)
class ListIndex:
    index: int


PathSegment = Union[FieldName, ListIndex]


def decode_path_segment(value: Any, path: str) -> PathSegment:
    """Decode one response path step by its JSON type; strings are never coerced."""
    if isinstance(value, str):
        return FieldName(value)
    return ListIndex(_expect_uint(value, path))


@dataclass(frozen=True)
class GraphQLErrorMessage:
    """One object of a GraphQL response ``errors`` array.

    Ref: https://spec.graphql.org/June2018/#sec-Errors
    """

    message: str
    locations: Optional[Tuple[ErrorLocation, ...]] = None
    extensions: Optional[Dict[str, Any]] = field(default=None, hash=False)
    path: Optional[Tuple[PathSegment, ...]] = None

    def __post_init__(self) -> None:
        # Entries own their nested data: no caller list or dict stays aliased.
        if self.locations is not None:
            object.__setattr__(self, "locations", tuple(self.locations))
        if self.extensions is not None:
            object.__setattr__(self, "extensions", copy.deepcopy(dict(self.extensions)))
        if self.path is not None:
            object.__setattr__(self, "path", tuple(self.path))

    @property
    def code(self) -> Optional[str]:
        """The ``extensions.code`` value when it is a string."""
        if self.extensions is None:
            return None
        value = self.extensions.get("code")
        if isinstance(value, str):
            return value
        return None

    @staticmethod
    def from_dict(obj: Any, path: str) -> "GraphQLErrorMessage":
        raw = _expect_dict(obj, path)
        message = _expect_str(raw.get("message"), f"{path}.message")

        locations: Optional[Tuple[ErrorLocation, ...]] = None
        if raw.get("locations") is not None:
            items = _expect_list(raw.get("locations"), f"{path}.locations")
            locations = tuple(
                ErrorLocation.from_dict(item, f"{path}.locations[{idx}]")
                for idx, item in enumerate(items)
            )

        extensions: Optional[Dict[str, Any]] = None
        if raw.get("extensions") is not None:
            extensions = _expect_dict(raw.get("extensions"), f"{path}.extensions")

        segments: Optional[Tuple[PathSegment, ...]] = None
        if raw.get("path") is not None:
            items = _expect_list(raw.get("path"), f"{path}.path")
            segments = tuple(
                decode_path_segment(item, f"{path}.path[{idx}]")
                for idx, item in enumerate(items)
            )

        return GraphQLErrorMessage(
            message=message,
            locations=locations,
            extensions=extensions,
            path=segments,
        )


def parse_error_messages(raw_errors: Any, path: str = "errors") -> List[GraphQLErrorMessage]:
    items = _expect_list(raw_errors, path)
    return [
        GraphQLErrorMessage.from_dict(item, f"{path}[{idx}]")
        for idx, item in enumerate(items)
    ]


@dataclass
class GraphQLResult:
    data: Optional[Any]
    errors: Optional[List[GraphQLErrorMessage]]
    extensions: Optional[Dict[str, Any]]

    @staticmethod
    def from_dict(obj: Any) -> "GraphQLResult":
        raw = _expect_dict(obj, "response")
        errors: Optional[List[GraphQLErrorMessage]] = None
        if raw.get("errors") is not None:
            errors = parse_error_messages(raw.get("errors"))
        extensions: Optional[Dict[str, Any]] = None
        if raw.get("extensions") is not None:
            extensions = _expect_dict(raw.get("extensions"), "extensions")
        return GraphQLResult(data=raw.get("data"), errors=errors, extensions=extensions)
