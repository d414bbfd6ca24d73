from typing import TYPE_CHECKING, Any, Mapping

from clearspending.data.endpoints import SUPPLIERS_GET, SUPPLIERS_SEARCH, SUPPLIERS_SELECT

if TYPE_CHECKING:
    from clearspending.api.client import ClearspendingClient


class SuppliersAPI:
    """Suppliers endpoints."""

    def __init__(self, client: "ClearspendingClient"):
        self.client = client

    def get(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        """Fetch a supplier by `inn` and/or `kpp`, or by `id` (GET /suppliers/get/)."""
        return self.client.call(SUPPLIERS_GET, query, filters)

    def search(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        """
        Full-text supplier search (GET /suppliers/search/) by inn, kpp, namesearch,
        address, regioncode, orgform, orgclass or inblacklist (bool, sent as true/false).
        """
        return self.client.call(SUPPLIERS_SEARCH, query, filters)

    def select(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        """Supplier selection (GET /suppliers/select/)."""
        return self.client.call(SUPPLIERS_SELECT, query, filters)
