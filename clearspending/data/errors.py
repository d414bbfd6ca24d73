"""
Error taxonomy for precondition failures and the exceptions raised by the client.
"""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ErrorDescriptor:
    code: str
    message: str

    def as_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


MISSING_ID = ErrorDescriptor("missing_id", "Missing `id` parameter")
MISSING_INFO = ErrorDescriptor("missing_info", "Missing `info` parameter")
MISSING_SPZREGNUM = ErrorDescriptor("missing_spzregnum", "Missing `spzregnum` or `id` parameter")
MISSING_SEARCH_GRANTS = ErrorDescriptor(
    "missing_search_grants",
    "Missing `productsearch`, `name_organization_search`, `address_search`, `operator`, "
    "`daterange`, `ogrn`, `price`, `grant_status` parameters (specify at least one parameter)",
)
MISSING_SELECT_GRANTS = ErrorDescriptor(
    "missing_select_grants",
    "Missing `year`, `status`, `grant`, `price`, `daterange` parameters "
    "(specify at least one parameter)",
)
MISSING_SEARCH_CUSTOMERS = ErrorDescriptor(
    "missing_search_customers",
    "Missing `namesearch`, `address`, `namesearchlist`, `spzregnum`, `okpo`, `okved`, `name`, "
    "`inn`, `kpp`, `ogrn`, `okogu`, `okato`, `subordination`, `orgtype`, `kladregion`, `fz`, "
    "`regioncode`, `orgclass` parameters (specify at least one parameter)",
)
MISSING_SELECT_CUSTOMERS = ErrorDescriptor(
    "missing_select_customers",
    "Missing `spzregnum`, `okpo`, `okved`, `name`, `inn`, `kpp`, `ogrn`, `okogu`, `okato`, "
    "`subordination`, `orgtype`, `kladregion`, `regioncode`, `orgclass` parameters "
    "(specify at least one parameter)",
)
MISSING_REGNUM = ErrorDescriptor("missing_regnum", "Missing `regnum` or `id` parameter")
MISSING_SEARCH_CONTRACTS = ErrorDescriptor(
    "missing_search_contracts",
    "Missing `productsearch`, `productsearchlist`, `regnum`, `customerinn`, `customerkpp`, "
    "`supplierinn`, `supplierkpp`, `okdp_okpd`, `budgetlevel`, `customerregion`, `currentstage`, "
    "`daterange`, `pricerange`, `placing`, `fz` parameters (specify at least one parameter)",
)
MISSING_SELECT_CONTRACTS = ErrorDescriptor(
    "missing_select_contracts",
    "Missing `regnum`, `customerinn`, `customerkpp`, `supplierinn`, `supplierkpp`, `okdp`, "
    "`okpd`, `budgetlevel`, `customerregion`, `industrial`, `currentstage`, `daterange`, "
    "`pricerange`, `placing`, `fz` parameters (specify at least one parameter)",
)
MISSING_GET_SUPPLIER = ErrorDescriptor("missing_supplier", "Missing `inn`, `kpp` or `id` parameter")
MISSING_SEARCH_SUPPLIERS = ErrorDescriptor(
    "missing_search_suppliers",
    "Missing `inn`, `kpp`, `namesearch`, `address`, `regioncode`, `orgform`, `orgclass`, "
    "`inblacklist` parameters (specify at least one parameter)",
)
MISSING_SELECT_SUPPLIERS = ErrorDescriptor(
    "missing_select_suppliers",
    "Missing `inn`, `kpp`, `regioncode`, `orgform`, `orgclass`, `inblacklist` parameters "
    "(specify at least one parameter)",
)

ALL_ERRORS: tuple[ErrorDescriptor, ...] = (
    MISSING_ID,
    MISSING_INFO,
    MISSING_SPZREGNUM,
    MISSING_SEARCH_GRANTS,
    MISSING_SELECT_GRANTS,
    MISSING_SEARCH_CUSTOMERS,
    MISSING_SELECT_CUSTOMERS,
    MISSING_REGNUM,
    MISSING_SEARCH_CONTRACTS,
    MISSING_SELECT_CONTRACTS,
    MISSING_GET_SUPPLIER,
    MISSING_SEARCH_SUPPLIERS,
    MISSING_SELECT_SUPPLIERS,
)


class ClearspendingError(Exception):
    """Base error; `error` holds the normalized error value."""

    def __init__(self, error: Any):
        super().__init__(error)
        self.error = error


class MissingParameterError(ClearspendingError):
    """Raised before any request when an endpoint's required filters are absent."""

    def __init__(self, descriptor: ErrorDescriptor):
        super().__init__(descriptor)
        self.code = descriptor.code
        self.message = descriptor.message

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class RequestFailedError(ClearspendingError):
    """Raised when the HTTP call fails; `error` is the nested `err`, the raw body, or a string."""

    def __init__(self, error: Any, status_code: int | None = None):
        super().__init__(error)
        self.status_code = status_code
