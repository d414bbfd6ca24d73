"""
Declarative endpoint table plus the generic precondition check and query builder
shared by every sub-API.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from clearspending.data import errors
from clearspending.data.enums import RequirementMode
from clearspending.data.errors import ErrorDescriptor, MissingParameterError

DEFAULT_TOTAL = ""
DEFAULT_PAGE = 1
DEFAULT_PERPAGE = 50  # service-side maximum, not enforced here


@dataclass(frozen=True)
class Endpoint:
    name: str
    path: str
    response_field: str
    params: tuple[str, ...]
    required: tuple[str, ...]
    mode: RequirementMode
    error: ErrorDescriptor
    paginated: bool = False
    sortable: bool = False
    # caller key -> query-string key, where the service spells it differently
    renames: Mapping[str, str] = field(default_factory=dict)

    def query_keys(self) -> list[str]:
        keys = [self.renames.get(p, p) for p in self.params]
        if self.paginated:
            keys += ["total", "page", "perpage"]
        if self.sortable:
            keys.append("sort")
        return keys


def _listing(name, path, fld, params, error, *, sortable=True, renames=None) -> Endpoint:
    return Endpoint(
        name=name,
        path=path,
        response_field=fld,
        params=params,
        required=params,
        mode=RequirementMode.ANY_OF,
        error=error,
        paginated=True,
        sortable=sortable,
        renames=renames or {},
    )


GRANTS_SEARCH_FIELDS = (
    "productsearch", "name_organization_search", "address_search", "operator",
    "daterange", "ogrn", "price", "grant_status",
)
GRANTS_SELECT_FIELDS = ("year", "status", "grant", "price", "daterange")
CUSTOMERS_SELECT_FIELDS = (
    "spzregnum", "okpo", "okved", "name", "inn", "kpp", "ogrn", "okogu", "okato",
    "subordination", "orgtype", "kladregion", "regioncode", "orgclass",
)
CUSTOMERS_SEARCH_FIELDS = (
    "namesearch", "address", "namesearchlist", "spzregnum", "okpo", "okved", "name",
    "inn", "kpp", "ogrn", "okogu", "okato", "subordination", "orgtype", "kladregion",
    "fz", "regioncode", "orgclass",
)
CONTRACTS_SEARCH_FIELDS = (
    "productsearch", "productsearchlist", "regnum", "customerinn", "customerkpp",
    "supplierinn", "supplierkpp", "okdp_okpd", "budgetlevel", "customerregion",
    "currentstage", "daterange", "pricerange", "placing", "fz",
)
CONTRACTS_SELECT_FIELDS = (
    "regnum", "customerinn", "customerkpp", "supplierinn", "supplierkpp", "okdp", "okpd",
    "budgetlevel", "customerregion", "industrial", "currentstage", "daterange",
    "pricerange", "placing", "fz",
)
SUPPLIERS_SEARCH_FIELDS = (
    "inn", "kpp", "namesearch", "address", "regioncode", "orgform", "orgclass", "inblacklist",
)
SUPPLIERS_SELECT_FIELDS = ("inn", "kpp", "regioncode", "orgform", "orgclass", "inblacklist")


GRANTS_GET = Endpoint(
    name="grants.get",
    path="grants/get/",
    response_field="grants",
    params=("id",),
    required=("id",),
    mode=RequirementMode.ALL,
    error=errors.MISSING_ID,
)
GRANTS_SEARCH = _listing(
    "grants.search", "grants/search/", "grants", GRANTS_SEARCH_FIELDS, errors.MISSING_SEARCH_GRANTS,
    sortable=False, renames={"ogrn": "OGRN"},
)
GRANTS_SELECT = _listing(
    "grants.select", "grants/select/", "grants", GRANTS_SELECT_FIELDS, errors.MISSING_SELECT_GRANTS,
    sortable=False,
)
CUSTOMERS_GET = Endpoint(
    name="customers.get",
    path="customers/get/",
    response_field="customers",
    params=("spzregnum", "id"),
    required=("spzregnum",),
    mode=RequirementMode.ANY_OF_OR_ID,
    error=errors.MISSING_SPZREGNUM,
)
CUSTOMERS_SEARCH = _listing(
    "customers.search", "customers/search/", "customers", CUSTOMERS_SEARCH_FIELDS,
    errors.MISSING_SEARCH_CUSTOMERS,
)
CUSTOMERS_SELECT = _listing(
    "customers.select", "customers/select/", "customers", CUSTOMERS_SELECT_FIELDS,
    errors.MISSING_SELECT_CUSTOMERS,
)
CONTRACTS_GET = Endpoint(
    name="contracts.get",
    path="contracts/get/",
    response_field="contracts",
    params=("regnum", "id"),
    required=("regnum",),
    mode=RequirementMode.ANY_OF_OR_ID,
    error=errors.MISSING_REGNUM,
)
CONTRACTS_SEARCH = _listing(
    "contracts.search", "contracts/search/", "contracts", CONTRACTS_SEARCH_FIELDS,
    errors.MISSING_SEARCH_CONTRACTS,
)
CONTRACTS_SELECT = _listing(
    "contracts.select", "contracts/select/", "contracts", CONTRACTS_SELECT_FIELDS,
    errors.MISSING_SELECT_CONTRACTS,
)
SUPPLIERS_GET = Endpoint(
    name="suppliers.get",
    path="suppliers/get/",
    response_field="suppliers",
    params=("inn", "kpp", "id"),
    required=("inn", "kpp"),
    mode=RequirementMode.ANY_OF_OR_ID,
    error=errors.MISSING_GET_SUPPLIER,
)
SUPPLIERS_SEARCH = _listing(
    "suppliers.search", "suppliers/search/", "suppliers", SUPPLIERS_SEARCH_FIELDS,
    errors.MISSING_SEARCH_SUPPLIERS,
)
SUPPLIERS_SELECT = _listing(
    "suppliers.select", "suppliers/select/", "suppliers", SUPPLIERS_SELECT_FIELDS,
    errors.MISSING_SELECT_SUPPLIERS,
)
DB_INFO_STATISTICS = Endpoint(
    name="db_info.statistics",
    path="db_info/statistics/",
    response_field="db_info",
    params=("info",),
    required=("info",),
    mode=RequirementMode.ALL,
    error=errors.MISSING_INFO,
)

ENDPOINTS: dict[str, Endpoint] = {
    e.name: e
    for e in (
        GRANTS_GET, GRANTS_SEARCH, GRANTS_SELECT,
        CUSTOMERS_GET, CUSTOMERS_SEARCH, CUSTOMERS_SELECT,
        CONTRACTS_GET, CONTRACTS_SEARCH, CONTRACTS_SELECT,
        SUPPLIERS_GET, SUPPLIERS_SEARCH, SUPPLIERS_SELECT,
        DB_INFO_STATISTICS,
    )
}


def _is_present(value: Any) -> bool:
    # Falsy values (None, "", 0, False, empty list) do not satisfy a requirement.
    return bool(value)


def check_required(endpoint: Endpoint, query: Mapping[str, Any]) -> None:
    """Raise MissingParameterError if `query` does not satisfy the endpoint's requirement."""
    present = [_is_present(query.get(key)) for key in endpoint.required]
    if endpoint.mode is RequirementMode.ALL:
        ok = all(present)
    elif endpoint.mode is RequirementMode.ANY_OF:
        ok = any(present)
    else:
        ok = any(present) or _is_present(query.get("id"))
    if not ok:
        logging.debug(f"{endpoint.name}: precondition failed ({endpoint.error.code})")
        raise MissingParameterError(endpoint.error)


def encode_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [encode_value(v) for v in value]
    return value


def build_params(endpoint: Endpoint, query: Mapping[str, Any]) -> dict[str, Any]:
    """
    Build the ordered query-string mapping for one call.
    Absent and empty filters are dropped; pagination defaults are always sent.
    """
    params: dict[str, Any] = {}
    for key in endpoint.params:
        value = query.get(key)
        if value is None or value == "":
            continue
        params[endpoint.renames.get(key, key)] = encode_value(value)
    if endpoint.paginated:
        params["total"] = encode_value(query.get("total") or DEFAULT_TOTAL)
        params["page"] = query.get("page") or DEFAULT_PAGE
        params["perpage"] = query.get("perpage") or DEFAULT_PERPAGE
    if endpoint.sortable and query.get("sort"):
        params["sort"] = encode_value(query["sort"])

    known = set(endpoint.params)
    if endpoint.paginated:
        known |= {"total", "page", "perpage"}
    if endpoint.sortable:
        known.add("sort")
    ignored = sorted(k for k in query if k not in known)
    if ignored:
        logging.debug(f"{endpoint.name}: ignoring unknown parameters {ignored}")
    return params
