"""Synchronous Gorse client."""

from collections.abc import Iterable

import httpx

from gorse_client import routes
from gorse_client.adapters.http.dispatcher import Dispatcher
from gorse_client.adapters.http.request import ApiRequest, JSONValue
from gorse_client.config import DEFAULT_TIMEOUT, GorseSettings, get_settings
from gorse_client.domain.models import Item, RowAffected, User
from gorse_client.domain.options import ListOptions
from gorse_client.routes import FeedbackLike, ItemLike, UserLike


class Gorse:
    """
    Blocking client for a Gorse recommender server.

    One ``httpx.Client`` is created per instance and reused for every call;
    pass ``http_client`` to supply your own (it will not be closed here).
    ``timeout`` only applies to the client created here; an injected
    ``http_client`` keeps its own timeout settings.

    Example:
        with Gorse("http://127.0.0.1:8088", "api-key") as client:
            client.insert_feedback([
                {"FeedbackType": "star", "UserId": "bob", "ItemId": "vuejs:vue"},
            ])
            client.get_recommend("bob", n=10)
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        *,
        timeout: float | None = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._dispatcher = Dispatcher(endpoint, api_key, timeout, http_client)

    @classmethod
    def from_settings(cls, settings: GorseSettings | None = None) -> "Gorse":
        """Build a client from ``GORSE_*`` environment settings."""
        settings = settings or get_settings()
        return cls(settings.endpoint, settings.api_key, timeout=settings.timeout)

    @property
    def endpoint(self) -> str:
        return self._dispatcher.endpoint

    def __repr__(self) -> str:
        return f"Gorse(endpoint={self.endpoint!r})"

    def __enter__(self) -> "Gorse":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._dispatcher.close()

    def _send(self, request: ApiRequest) -> JSONValue:
        return self._dispatcher.send(request)

    # ── Users ──────────────────────────────────────

    def insert_user(self, user: UserLike) -> RowAffected:
        """Insert a user, or overwrite one with the same id."""
        return RowAffected.model_validate(self._send(routes.insert_user(user)))

    def get_user(self, user_id: str) -> User:
        return User.model_validate(self._send(routes.get_user(user_id)))

    def delete_user(self, user_id: str) -> RowAffected:
        return RowAffected.model_validate(self._send(routes.delete_user(user_id)))

    # ── Items ──────────────────────────────────────

    def insert_item(self, item: ItemLike) -> RowAffected:
        return RowAffected.model_validate(self._send(routes.insert_item(item)))

    def batch_insert_item(self, items: Iterable[ItemLike]) -> RowAffected:
        """Insert several items in a single request."""
        return RowAffected.model_validate(self._send(routes.batch_insert_item(items)))

    def get_item(self, item_id: str) -> Item:
        return Item.model_validate(self._send(routes.get_item(item_id)))

    def get_item_neighbors(self, item_id: str) -> JSONValue:
        """Items similar to ``item_id``, as returned by the server."""
        return self._send(routes.get_item_neighbors(item_id))

    def get_item_neighbors_in_category(self, item_id: str, category: str) -> JSONValue:
        return self._send(routes.get_item_neighbors_in_category(item_id, category))

    def delete_item(self, item_id: str) -> RowAffected:
        return RowAffected.model_validate(self._send(routes.delete_item(item_id)))

    # ── Feedback ───────────────────────────────────

    def insert_feedback(self, feedback: Iterable[FeedbackLike]) -> RowAffected:
        return RowAffected.model_validate(self._send(routes.insert_feedback(feedback)))

    # ── Lists ──────────────────────────────────────

    def get_latest_items(
        self,
        user_id: str,
        *,
        write_back_type: str | None = None,
        write_back_delay: str | None = None,
        n: int | None = None,
        offset: int | None = None,
    ) -> JSONValue:
        """
        Latest items across the catalog.

        ``user_id`` is not sent; the latest list is the same for every user.
        Options left as None are omitted from the query string.
        """
        options = ListOptions(write_back_type, write_back_delay, n, offset)
        return self._send(routes.get_latest_items(options))

    def get_latest_category_items(
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
        return self._send(routes.get_latest_category_items(category, options))

    def get_popular_items(
        self,
        user_id: str,
        *,
        write_back_type: str | None = None,
        write_back_delay: str | None = None,
        n: int | None = None,
        offset: int | None = None,
    ) -> JSONValue:
        """Most popular items; ``user_id`` is not sent."""
        options = ListOptions(write_back_type, write_back_delay, n, offset)
        return self._send(routes.get_popular_items(options))

    def get_popular_items_in_category(
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
        return self._send(routes.get_popular_items_in_category(category, options))

    def get_recommend(
        self,
        user_id: str,
        *,
        write_back_type: str | None = None,
        write_back_delay: str | None = None,
        n: int | None = None,
        offset: int | None = None,
    ) -> JSONValue:
        """
        Personalised recommendations for ``user_id``.

        With ``write_back_type`` set (e.g. "read"), the server records that
        feedback for every returned item, after ``write_back_delay`` if given.
        """
        options = ListOptions(write_back_type, write_back_delay, n, offset)
        return self._send(routes.get_recommend(user_id, options))

    def get_recommend_in_category(
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
        return self._send(routes.get_recommend_in_category(user_id, category, options))
