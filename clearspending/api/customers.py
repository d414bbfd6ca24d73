"""
Customers API module: the purchasing side of procurement contracts.
"""
from typing import TYPE_CHECKING, Any, Mapping

from clearspending.data.endpoints import CUSTOMERS_GET, CUSTOMERS_SEARCH, CUSTOMERS_SELECT

if TYPE_CHECKING:
    from clearspending.api.client import ClearspendingClient


class CustomersAPI:
    """Customers endpoints."""

    def __init__(self, client: "ClearspendingClient"):
        self.client = client

    def get(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        """Fetch a customer by `spzregnum` (consolidated registry number) or `id` (GET /customers/get/)."""
        return self.client.call(CUSTOMERS_GET, query, filters)

    def search(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        """
        Full-text customer search (GET /customers/search/).

        Filters (at least one): namesearch, address, namesearchlist (list), spzregnum,
        okpo, okved, name, inn, kpp, ogrn, okogu, okato, subordination (numeric level code),
        orgtype (numeric type code), kladregion, fz (federal law number),
        regioncode (numeric region code), orgclass (OrgClass: npo or university).
        Navigation: total, page (1), perpage (50).
        Sorting: sort by contractsCount or contractsSum, direction 1 or -1.
        """
        return self.client.call(CUSTOMERS_SEARCH, query, filters)

    def select(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        """Customer selection (GET /customers/select/); same filters as search minus the full-text ones and `fz`."""
        return self.client.call(CUSTOMERS_SELECT, query, filters)
