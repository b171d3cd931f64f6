from .client import GraphQLClient
from .env import client_from_env
from .errors import DEFAULT_MESSAGE, GraphQLError, SerializationError
from .models import (
    ErrorLocation,
    FieldName,
    GraphQLErrorMessage,
    GraphQLResult,
    ListIndex,
    PathSegment,
    decode_path_segment,
    parse_error_messages,
)

__all__ = [
    "GraphQLClient",
    "client_from_env",
    "GraphQLError",
    "SerializationError",
    "DEFAULT_MESSAGE",
    "GraphQLResult",
    "GraphQLErrorMessage",
    "ErrorLocation",
    "FieldName",
    "ListIndex",
    "PathSegment",
    "decode_path_segment",
    "parse_error_messages",
]
