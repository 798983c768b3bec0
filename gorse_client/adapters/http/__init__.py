from gorse_client.adapters.http.dispatcher import AsyncDispatcher, Dispatcher
from gorse_client.adapters.http.request import ApiRequest

__all__ = ["ApiRequest", "AsyncDispatcher", "Dispatcher"]
