from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_BASE_URL = "http://openapi.clearspending.ru/restapi/v3"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientConfig:
    """Transport settings fixed for the lifetime of a client."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    headers: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({"Accept": "application/json"})
    )

    def url_for(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
