"""Pydantic models for the records exchanged with a Gorse server.

Field names are snake_case in Python and PascalCase on the wire. Both forms
are accepted on input, and fields the server adds that are not declared here
are kept so records round-trip unchanged.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

ModelT = TypeVar("ModelT", bound="GorseModel")


class GorseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @classmethod
    def coerce(cls: type[ModelT], value: "ModelT | Mapping[str, Any]") -> ModelT:
        """Return ``value`` as an instance, validating plain mappings."""
        if isinstance(value, cls):
            return value
        return cls.model_validate(value)

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict keyed by the server's field names.

        Fields never supplied are left out; explicit ``None`` values are kept.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class User(GorseModel):
    user_id: str = Field(alias="UserId")
    labels: Any = Field(default=None, alias="Labels")
    subscribe: list[str] | None = Field(default=None, alias="Subscribe")
    comment: str | None = Field(default=None, alias="Comment")


class Item(GorseModel):
    item_id: str = Field(alias="ItemId")
    is_hidden: bool | None = Field(default=None, alias="IsHidden")
    categories: list[str] | None = Field(default=None, alias="Categories")
    timestamp: str | None = Field(default=None, alias="Timestamp")
    labels: Any = Field(default=None, alias="Labels")
    comment: str | None = Field(default=None, alias="Comment")


class Feedback(GorseModel):
    """A single user/item interaction, e.g. ``star`` or ``read``."""

    feedback_type: str = Field(alias="FeedbackType")
    user_id: str = Field(alias="UserId")
    item_id: str = Field(alias="ItemId")
    timestamp: str | None = Field(default=None, alias="Timestamp")
    comment: str | None = Field(default=None, alias="Comment")


class RowAffected(GorseModel):
    """Number of rows touched by an insert or delete."""

    row_affected: int = Field(alias="RowAffected")
