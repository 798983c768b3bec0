"""Request descriptors and response decoding shared by both dispatchers."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from gorse_client.errors import GorseDecodeError, GorseHTTPError

JSONValue = dict[str, Any] | list[Any] | str | int | float | bool | None


def segment(value: str) -> str:
    """Percent-escape a value for use as a single path segment.

    "." and ".." are escaped too, otherwise URL normalization would resolve
    them against the surrounding path.
    """
    escaped = quote(str(value), safe="")
    if escaped in (".", ".."):
        return escaped.replace(".", "%2E")
    return escaped


def build_query(params: Mapping[str, str | int] | None) -> str:
    """Encode ``params`` in iteration order, or return "" when there are none."""
    if not params:
        return ""
    return urlencode(list(params.items()))


@dataclass(frozen=True)
class ApiRequest:
    """
    One outbound call to the Gorse API.

    Attributes:
        method: HTTP verb (GET, POST, DELETE).
        path:   Path relative to the endpoint, identifiers already escaped.
        body:   JSON-ready payload, or None to send no payload.
        query:  Ordered query parameters; empty means no query string.
    """

    method: str
    path: str
    body: Any = None
    query: Mapping[str, str | int] = field(default_factory=dict)

    @property
    def target(self) -> str:
        """Path plus ``?query`` when any query parameters are present."""
        query = build_query(self.query)
        return f"{self.path}?{query}" if query else self.path


def decode_response(request: ApiRequest, response: httpx.Response) -> JSONValue:
    """Return the JSON payload of a successful response.

    Raises:
        GorseHTTPError:   status is not 2xx.
        GorseDecodeError: body is not valid JSON.
    """
    if not response.is_success:
        raise GorseHTTPError(
            request.method, request.target, response.status_code, response.text
        )
    try:
        return response.json()
    except ValueError as exc:
        raise GorseDecodeError(
            request.method, request.target, response.status_code, response.text
        ) from exc
