from clearspending.api.client import ClearspendingClient
from clearspending.config import ClientConfig
from clearspending.data.enums import ContractStage, GrantKey, GrantStatus, OrgClass
from clearspending.data.errors import (
    ClearspendingError,
    ErrorDescriptor,
    MissingParameterError,
    RequestFailedError,
)

__all__ = [
    "ClearspendingClient",
    "ClientConfig",
    "ClearspendingError",
    "ContractStage",
    "ErrorDescriptor",
    "GrantKey",
    "GrantStatus",
    "MissingParameterError",
    "OrgClass",
    "RequestFailedError",
]
