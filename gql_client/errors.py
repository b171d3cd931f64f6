from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

if TYPE_CHECKING:
    from .models import GraphQLErrorMessage

DEFAULT_MESSAGE = "Look at json field for more details"


class SerializationError(Exception):
    pass


class GraphQLError(Exception):
    """A failed GraphQL request.

    Transport failures carry only a message; errors reported in a GraphQL
    response body also carry the decoded ``errors`` entries.
    """

    def __init__(
        self,
        message: str,
        structured_errors: Optional[Iterable[GraphQLErrorMessage]] = None,
    ):
        super().__init__(message)
        self._message = message
        self._structured_errors: Optional[Tuple[GraphQLErrorMessage, ...]] = (
            None if structured_errors is None else copy.deepcopy(tuple(structured_errors))
        )

    @classmethod
    def from_text(cls, message: str) -> "GraphQLError":
        return cls(message)

    @classmethod
    def from_message_and_entries(
        cls, message: str, entries: Iterable[GraphQLErrorMessage]
    ) -> "GraphQLError":
        return cls(message, entries)

    @classmethod
    def from_entries(cls, entries: Iterable[GraphQLErrorMessage]) -> "GraphQLError":
        return cls(DEFAULT_MESSAGE, entries)

    @classmethod
    def from_transport_failure(cls, error: BaseException) -> "GraphQLError":
        return cls(str(error))

    @property
    def message(self) -> str:
        return self._message

    @property
    def structured_errors(self) -> Optional[List[GraphQLErrorMessage]]:
        if self._structured_errors is None:
            return None
        return copy.deepcopy(list(self._structured_errors))

    @property
    def is_transport_error(self) -> bool:
        return self._structured_errors is None

    def contains_error_message(self, message: str) -> bool:
        """Check if ``message`` equals one of the response error messages."""
        if self._structured_errors is None:
            return False
        return any(err.message == message for err in self._structured_errors)

    def contains_error_code(self, code: str) -> bool:
        """Check if ``code`` equals one of the response ``extensions.code`` values."""
        if self._structured_errors is None:
            return False
        return any(err.code == code for err in self._structured_errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphQLError):
            return NotImplemented
        return (
            self._message == other._message
            and self._structured_errors == other._structured_errors
        )

    def __hash__(self) -> int:
        return hash((self._message, self._structured_errors))

    def __str__(self) -> str:
        return _format(self)

    def __repr__(self) -> str:
        return _format(self)


def _format(err: GraphQLError) -> str:
    lines = ["", f"GQLClient Error: {err._message}"]
    if err._structured_errors is not None:
        for entry in err._structured_errors:
            lines.append(f"Message: {entry.message}")
    return "\n".join(lines) + "\n"
