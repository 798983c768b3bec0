import json
from collections.abc import Callable

import httpx
import pytest

from gorse_client import AsyncGorse, Gorse

ENDPOINT = "http://gorse.test:8088"
API_KEY = "test-api-key"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={"RowAffected": 1})
        )
        super().__init__(self._handle)

    def respond_with(self, status_code: int = 200, **kwargs) -> None:
        self._responder = lambda request: httpx.Response(status_code, **kwargs)

    def raise_error(self, exc_type: type[httpx.RequestError], message: str) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc_type(message, request=request)

        self._responder = _raise

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(transport: RecordingTransport):
    with httpx.Client(transport=transport) as http:
        yield Gorse(ENDPOINT, API_KEY, http_client=http)


@pytest.fixture
async def async_client(transport: RecordingTransport):
    async with httpx.AsyncClient(transport=transport) as http:
        yield AsyncGorse(ENDPOINT, API_KEY, http_client=http)


# Keep tests independent of any GORSE_* variables on the host.
@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GORSE_ENDPOINT", "GORSE_API_KEY", "GORSE_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
