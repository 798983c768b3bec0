"""Optional query parameters shared by the list endpoints."""

from dataclasses import dataclass

# Wire order of the query string.
QUERY_KEYS: tuple[tuple[str, str], ...] = (
    ("write_back_type", "write-back-type"),
    ("write_back_delay", "write-back-delay"),
    ("n", "n"),
    ("offset", "offset"),
)


@dataclass(frozen=True)
class ListOptions:
    """
    Paging and write-back controls for latest/popular/recommend lists.

    Attributes:
        write_back_type:  Feedback type recorded for returned items, e.g. "read".
        write_back_delay: Delay before the write-back takes effect, e.g. "10m".
        n:                Number of items to return.
        offset:           Number of items to skip.

    A field left as ``None`` is omitted from the request entirely.
    """

    write_back_type: str | None = None
    write_back_delay: str | None = None
    n: int | None = None
    offset: int | None = None

    def to_query(self) -> dict[str, str | int]:
        """Return the supplied parameters keyed by wire name, in wire order."""
        query: dict[str, str | int] = {}
        for attr, key in QUERY_KEYS:
            value = getattr(self, attr)
            if value is not None:
                query[key] = value
        return query
