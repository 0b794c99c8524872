from __future__ import annotations

import logging
from dataclasses import dataclass, field

import requests

from travelbase.errors import TransportError
from travelbase.graphql.document import Operation

logger = logging.getLogger(__name__)


@dataclass
class GraphQLTransport:
    url: str
    api_key: str
    timeout_s: int = 30
    session: requests.Session = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {self.api_key}",
            "content-type": "application/json",
        })

    def execute(self, operation: Operation) -> str:
        """POST the operation and return the raw response body."""
        logger.debug("POST %s %s %s", self.url, operation.kind, operation.name)
        try:
            r = self.session.post(self.url, json=operation.payload(), timeout=self.timeout_s)
            r.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TransportError(f"{operation.name} failed with HTTP {status}: {e}", status_code=status) from e
        except requests.RequestException as e:
            raise TransportError(f"{operation.name} failed: {e}") from e

        body = r.text
        if not body or not body.strip():
            raise TransportError(f"{operation.name}: no response body found", status_code=r.status_code)

        logger.debug("%s returned %d bytes", operation.name, len(body))
        return body

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "GraphQLTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
