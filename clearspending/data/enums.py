from enum import Enum


class GrantStatus(str, Enum):
    ALL = "all"
    WINNER = "winner"


class GrantKey(str, Enum):
    GRANTS_115 = "grants115"
    GRANTS_348 = "grants348"


class ContractStage(str, Enum):
    EXECUTION = "E"
    EXECUTION_COMPLETED = "EC"
    EXECUTION_TERMINATED = "ET"
    INVALIDATED = "IN"


class OrgClass(str, Enum):
    NPO = "npo"
    UNIVERSITY = "university"


class RequirementMode(Enum):
    ALL = "ALL"
    ANY_OF = "ANY_OF"
    ANY_OF_OR_ID = "ANY_OF_OR_ID"
