"""Gorse REST endpoints, one builder per operation.

Each builder returns the ``ApiRequest`` for its operation. The sync and async
clients share this table so the two can never disagree about the wire shape.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from gorse_client.adapters.http.request import ApiRequest, segment
from gorse_client.domain.models import Feedback, Item, User
from gorse_client.domain.options import ListOptions

UserLike = User | Mapping[str, Any]
ItemLike = Item | Mapping[str, Any]
FeedbackLike = Feedback | Mapping[str, Any]


# ── Users ────────────────────────────────────────────────────────


def insert_user(user: UserLike) -> ApiRequest:
    return ApiRequest("POST", "/api/user/", body=User.coerce(user).to_wire())


def get_user(user_id: str) -> ApiRequest:
    return ApiRequest("GET", f"/api/user/{segment(user_id)}")


def delete_user(user_id: str) -> ApiRequest:
    return ApiRequest("DELETE", f"/api/user/{segment(user_id)}")


# ── Items ────────────────────────────────────────────────────────


def insert_item(item: ItemLike) -> ApiRequest:
    return ApiRequest("POST", "/api/item/", body=Item.coerce(item).to_wire())


def batch_insert_item(items: Iterable[ItemLike]) -> ApiRequest:
    body = [Item.coerce(item).to_wire() for item in items]
    return ApiRequest("POST", "/api/items", body=body)


def get_item(item_id: str) -> ApiRequest:
    return ApiRequest("GET", f"/api/item/{segment(item_id)}")


def get_item_neighbors(item_id: str) -> ApiRequest:
    return ApiRequest("GET", f"/api/item/{segment(item_id)}/neighbors")


def get_item_neighbors_in_category(item_id: str, category: str) -> ApiRequest:
    return ApiRequest(
        "GET", f"/api/item/{segment(item_id)}/neighbors/{segment(category)}"
    )


def delete_item(item_id: str) -> ApiRequest:
    return ApiRequest("DELETE", f"/api/item/{segment(item_id)}")


# ── Feedback ─────────────────────────────────────────────────────


def insert_feedback(feedback: Iterable[FeedbackLike]) -> ApiRequest:
    body = [Feedback.coerce(entry).to_wire() for entry in feedback]
    return ApiRequest("POST", "/api/feedback/", body=body)


# ── Lists ────────────────────────────────────────────────────────
# The latest and popular endpoints are not personalised; user_id is
# accepted by the clients for symmetry with recommend but never sent.


def get_latest_items(options: ListOptions) -> ApiRequest:
    return ApiRequest("GET", "/api/latest/", query=options.to_query())


def get_latest_category_items(category: str, options: ListOptions) -> ApiRequest:
    return ApiRequest("GET", f"/api/latest/{segment(category)}", query=options.to_query())


def get_popular_items(options: ListOptions) -> ApiRequest:
    return ApiRequest("GET", "/api/popular", query=options.to_query())


def get_popular_items_in_category(category: str, options: ListOptions) -> ApiRequest:
    return ApiRequest("GET", f"/api/popular/{segment(category)}", query=options.to_query())


def get_recommend(user_id: str, options: ListOptions) -> ApiRequest:
    return ApiRequest("GET", f"/api/recommend/{segment(user_id)}", query=options.to_query())


def get_recommend_in_category(
    user_id: str, category: str, options: ListOptions
) -> ApiRequest:
    return ApiRequest(
        "GET",
        f"/api/recommend/{segment(user_id)}/{segment(category)}",
        query=options.to_query(),
    )
