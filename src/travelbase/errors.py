from __future__ import annotations

from typing import Any, List, Optional


class TravelbaseError(RuntimeError):
    """Base class for every error raised by the client."""


class ConfigurationError(TravelbaseError):
    """Endpoint or api key could not be resolved."""


class TransportError(TravelbaseError):
    """The HTTP call failed or came back without a body."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DeserializationError(TravelbaseError):
    """The response body does not match the expected result shape."""

    def __init__(self, message: str, graphql_errors: Optional[List[Any]] = None) -> None:
        super().__init__(message)
        self.graphql_errors = graphql_errors or []
