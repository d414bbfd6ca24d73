"""
Grants API module: lookup, full-text search and selection of grant records.
"""
from typing import TYPE_CHECKING, Any, Mapping

from clearspending.data.endpoints import GRANTS_GET, GRANTS_SEARCH, GRANTS_SELECT

if TYPE_CHECKING:
    from clearspending.api.client import ClearspendingClient


class GrantsAPI:
    """Grants endpoints."""

    def __init__(self, client: "ClearspendingClient"):
        self.client = client

    def get(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        """
        Fetch a grant by `id` (GET /grants/get/).
        Grants have no natural unique key; `id` is the service's artificial identifier.
        """
        return self.client.call(GRANTS_GET, query, filters)

    def search(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        """
        Full-text grant search (GET /grants/search/).

        Filters (at least one):
          productsearch             full text over all items
          name_organization_search  full text by organization name
          address_search            full text by organization address
          operator                  grant operator
          daterange                 signing date, dd.mm.yyyy-dd.mm.yyyy
          ogrn                      OGRN code (sent as `OGRN`)
          price                     price range, minFloat-maxFloat
          grant_status              GrantStatus: all or winner
        Navigation: total, page (1), perpage (50, service maximum).
        """
        return self.client.call(GRANTS_SEARCH, query, filters)

    def select(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        """
        Grant selection (GET /grants/select/) by year, status, grant key
        (GrantKey: grants115 / grants348), price or daterange.
        """
        return self.client.call(GRANTS_SELECT, query, filters)
