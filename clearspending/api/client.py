"""
API Client module providing centralized access to Clearspending API endpoints.
Orchestrates sub-API modules for grants, customers, contracts, suppliers and db_info.
"""
from typing import Any, Mapping

import requests

from clearspending.api.contracts import ContractsAPI
from clearspending.api.customers import CustomersAPI
from clearspending.api.db_info import DbInfoAPI
from clearspending.api.grants import GrantsAPI
from clearspending.api.handle_requests import RequestHandler
from clearspending.api.suppliers import SuppliersAPI
from clearspending.config import ClientConfig
from clearspending.data.endpoints import Endpoint, build_params, check_required


class ClearspendingClient:
    """Root client that centralizes sub-APIs and holds the shared HTTP session."""

    def __init__(self, config: ClientConfig | None = None, session: requests.Session | None = None):
        self.config = config or ClientConfig()
        self.http = RequestHandler(self.config, session=session)
        self.grants = GrantsAPI(self)
        self.customers = CustomersAPI(self)
        self.contracts = ContractsAPI(self)
        self.suppliers = SuppliersAPI(self)
        self.db = DbInfoAPI(self)

    def __enter__(self) -> "ClearspendingClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.http.close()

    def call(self, endpoint: Endpoint, query: Mapping[str, Any] | None = None, filters: Mapping[str, Any] | None = None) -> Any:
        """Validate, encode and send one request, returning the endpoint's extracted field."""
        merged = {**(query or {}), **(filters or {})}
        check_required(endpoint, merged)
        params = build_params(endpoint, merged)
        return self.http.get_json(endpoint.path, params=params, field=endpoint.response_field)

    # Flat surface, one method per remote endpoint.

    def get_grant(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        return self.grants.get(query, **filters)

    def search_grants(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        return self.grants.search(query, **filters)

    def select_grants(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        return self.grants.select(query, **filters)

    def get_customer(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        return self.customers.get(query, **filters)

    def search_customers(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        return self.customers.search(query, **filters)

    def select_customers(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        return self.customers.select(query, **filters)

    def get_contracts(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        return self.contracts.get(query, **filters)

    def search_contracts(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        return self.contracts.search(query, **filters)

    def select_contracts(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        return self.contracts.select(query, **filters)

    def get_suppliers(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        return self.suppliers.get(query, **filters)

    def search_suppliers(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        return self.suppliers.search(query, **filters)

    def select_suppliers(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        return self.suppliers.select(query, **filters)

    def db_info(self, query: Mapping[str, Any] | None = None, **filters) -> Any:
        return self.db.statistics(query, **filters)
