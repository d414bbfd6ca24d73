"""
Contracts API module: procurement contracts linking a customer and a supplier.
"""
from typing import TYPE_CHECKING, Any, Mapping

from clearspending.data.endpoints import CONTRACTS_GET, CONTRACTS_SEARCH, CONTRACTS_SELECT

if TYPE_CHECKING:
    from clearspending.api.client import ClearspendingClient


class ContractsAPI:
    """Contracts endpoints."""

    def __init__(self, client: "ClearspendingClient"):
        self.client = client

    def get(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        """Fetch a contract by `regnum` (registration number) or `id` (GET /contracts/get/)."""
        return self.client.call(CONTRACTS_GET, query, filters)

    def search(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        """
        Full-text contract search (GET /contracts/search/).

        Filters (at least one):
          productsearch, productsearchlist  full text over contract items
          regnum                            registration number
          customerinn, customerkpp          customer INN / KPP
          supplierinn, supplierkpp          supplier INN / KPP
          okdp_okpd                         OKDP or OKPD code
          budgetlevel, customerregion       budget level, numeric region code
          currentstage                      ContractStage: E, EC, ET, IN
          daterange, pricerange             dd.mm.yyyy-dd.mm.yyyy, minFloat-maxFloat
          placing, fz                       placement type, federal law number
        Navigation: total, page (1), perpage (50).
        Sorting: sort by price or signDate, direction 1 or -1.
        """
        return self.client.call(CONTRACTS_SEARCH, query, filters)

    def select(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        """
        Contract selection (GET /contracts/select/).
        Takes separate `okdp` and `okpd` codes plus `industrial` (section letter)
        instead of `okdp_okpd`, and no full-text filters.
        """
        return self.client.call(CONTRACTS_SELECT, query, filters)
