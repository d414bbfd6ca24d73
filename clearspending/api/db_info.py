from typing import TYPE_CHECKING, Any, Mapping

from clearspending.data.endpoints import DB_INFO_STATISTICS

if TYPE_CHECKING:
    from clearspending.api.client import ClearspendingClient


class DbInfoAPI:
    """Database statistics endpoint."""

    def __init__(self, client: "ClearspendingClient"):
        self.client = client

    def statistics(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        """Record counts, update dates, etc. (GET /db_info/statistics/). `info` is required, e.g. "all"."""
        return self.client.call(DB_INFO_STATISTICS, query, filters)
