"""asyncio Gorse client, mirroring ``gorse_client.client.Gorse``."""

from collections.abc import Iterable

import httpx

from gorse_client import routes
from gorse_client.adapters.http.dispatcher import AsyncDispatcher
from gorse_client.adapters.http.request import ApiRequest, JSONValue
from gorse_client.config import DEFAULT_TIMEOUT, GorseSettings, get_settings
from gorse_client.domain.models import Item, RowAffected, User
from gorse_client.domain.options import ListOptions
from gorse_client.routes import FeedbackLike, ItemLike, UserLike


class AsyncGorse:
    """
    Non-blocking Gorse client backed by one reusable ``httpx.AsyncClient``.

    ``timeout`` only applies to the client created here; an injected
    ``http_client`` keeps its own timeout settings.
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        *,
        timeout: float | None = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._dispatcher = AsyncDispatcher(endpoint, api_key, timeout, http_client)

    @classmethod
    def from_settings(cls, settings: GorseSettings | None = None) -> "AsyncGorse":
        settings = settings or get_settings()
        return cls(settings.endpoint, settings.api_key, timeout=settings.timeout)

    @property
    def endpoint(self) -> str:
        return self._dispatcher.endpoint

    def __repr__(self) -> str:
        return f"AsyncGorse(endpoint={self.endpoint!r})"

    async def __aenter__(self) -> "AsyncGorse":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._dispatcher.aclose()

    async def _send(self, request: ApiRequest) -> JSONValue:
        return await self._dispatcher.send(request)

    # ── Users ──────────────────────────────────────

    async def insert_user(self, user: UserLike) -> RowAffected:
        return RowAffected.model_validate(await self._send(routes.insert_user(user)))

    async def get_user(self, user_id: str) -> User:
        return User.model_validate(await self._send(routes.get_user(user_id)))

    async def delete_user(self, user_id: str) -> RowAffected:
        return RowAffected.model_validate(await self._send(routes.delete_user(user_id)))

    # ── Items ──────────────────────────────────────

    async def insert_item(self, item: ItemLike) -> RowAffected:
        return RowAffected.model_validate(await self._send(routes.insert_item(item)))

    async def batch_insert_item(self, items: Iterable[ItemLike]) -> RowAffected:
        return RowAffected.model_validate(
            await self._send(routes.batch_insert_item(items))
        )

    async def get_item(self, item_id: str) -> Item:
        return Item.model_validate(await self._send(routes.get_item(item_id)))

    async def get_item_neighbors(self, item_id: str) -> JSONValue:
        return await self._send(routes.get_item_neighbors(item_id))

    async def get_item_neighbors_in_category(
        self, item_id: str, category: str
    ) -> JSONValue:
        return await self._send(routes.get_item_neighbors_in_category(item_id, category))

    async def delete_item(self, item_id: str) -> RowAffected:
        return RowAffected.model_validate(await self._send(routes.delete_item(item_id)))

    # ── Feedback ───────────────────────────────────

    async def insert_feedback(self, feedback: Iterable[FeedbackLike]) -> RowAffected:
        return RowAffected.model_validate(
            await self._send(routes.insert_feedback(feedback))
        )

    # ── Lists ──────────────────────────────────────

    async def get_latest_items(
        self,
        user_id: str,
        *,
        write_back_type: str | None = None,
        write_back_delay: str | None = None,
        n: int | None = None,
        offset: int | None = None,
    ) -> JSONValue:
        options = ListOptions(write_back_type, write_back_delay, n, offset)
        return await self._send(routes.get_latest_items(options))

    async def get_latest_category_items(
        self,
        user_id: str,
        category: str,
        *,
        write_back_type: str | None = None,
        write_back_delay: str | None = None,
        n: int | None = None,
        offset: int | None = None,
    ) -> JSONValue:
        options = ListOptions(write_back_type, write_back_delay, n, offset)
        return await self._send(routes.get_latest_category_items(category, options))

    async def get_popular_items(
        self,
        user_id: str,
        *,
        write_back_type: str | None = None,
        write_back_delay: str | None = None,
        n: int | None = None,
        offset: int | None = None,
    ) -> JSONValue:
        options = ListOptions(write_back_type, write_back_delay, n, offset)
        return await self._send(routes.get_popular_items(options))

    async def get_popular_items_in_category(
        self,
        user_id: str,
        category: str,
        *,
        write_back_type: str | None = None,
        write_back_delay: str | None = None,
        n: int | None = None,
        offset: int | None = None,
    ) -> JSONValue:
        options = ListOptions(write_back_type, write_back_delay, n, offset)
        return await self._send(routes.get_popular_items_in_category(category, options))

    async def get_recommend(
        self,
        user_id: str,
        *,
        write_back_type: str | None = None,
        write_back_delay: str | None = None,
        n: int | None = None,
        offset: int | None = None,
    ) -> JSONValue:
        options = ListOptions(write_back_type, write_back_delay, n, offset)
        return await self._send(routes.get_recommend(user_id, options))

    async def get_recommend_in_category(
        self,
        user_id: str,
        category: str,
        *,
        write_back_type: str | None = None,
        write_back_delay: str | None = None,
        n: int | None = None,
        offset: int | None = None,
    ) -> JSONValue:
        options = ListOptions(write_back_type, write_back_delay, n, offset)
        return await self._send(
            routes.get_recommend_in_category(user_id, category, options)
        )
