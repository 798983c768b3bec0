"""Python client for the Gorse recommender system REST API."""

import logging

from gorse_client.async_client import AsyncGorse
from gorse_client.client import Gorse
from gorse_client.config import GorseSettings, get_settings
from gorse_client.domain.models import Feedback, Item, RowAffected, User
from gorse_client.domain.options import ListOptions
from gorse_client.errors import (
    GorseConnectionError,
    GorseDecodeError,
    GorseError,
    GorseHTTPError,
    GorseTimeoutError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AsyncGorse",
    "Feedback",
    "Gorse",
    "GorseConnectionError",
    "GorseDecodeError",
    "GorseError",
    "GorseHTTPError",
    "GorseSettings",
    "GorseTimeoutError",
    "Item",
    "ListOptions",
    "RowAffected",
    "User",
    "get_settings",
]
