"""
HTTP request handler for the Clearspending API.
Single GET per call with a fixed timeout; failures are normalized into RequestFailedError.
"""
import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from clearspending.config import ClientConfig
from clearspending.data.errors import RequestFailedError


def _failure_body(resp: requests.Response | None) -> Any:
    if resp is None:
        return None
    try:
        return resp.json()
    except ValueError:
        return None


def normalize_error(exc: requests.RequestException) -> Any:
    """
    Collapse a transport failure into one value:
      - the nested `err` field of a JSON error body
      - else the JSON error body itself
      - else the exception's string form
    """
    payload = _failure_body(exc.response)
    if isinstance(payload, dict) and payload.get("err"):
        return payload["err"]
    if payload is not None:
        return payload
    return str(exc)


class RequestHandler:
    def __init__(self, config: ClientConfig, session: requests.Session | None = None):
        self.config = config
        if session is None:
            session = requests.Session()
            # One attempt per call; read errors re-raise as-is so timeouts stay timeouts.
            self.adapter = HTTPAdapter(max_retries=Retry(total=0, read=False))
            session.mount("https://", self.adapter)
            session.mount("http://", self.adapter)
        self.session = session
        self.session.headers.update(config.headers)

    def get(self, url: str, **kwargs) -> requests.Response:
        return self.session.get(url, timeout=self.config.timeout, **kwargs)

    def get_json(self, path: str, params: dict | None = None, field: str | None = None) -> Any:
        """
        JSON GET helper.
        path: path relative to the base URL (no leading slash)
        returns `payload[field]` when present, otherwise the whole payload
        """
        url = self.config.url_for(path)
        logging.debug(f"GET {url} params={params}")
        try:
            resp = self.get(url, params=params)
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as exc:
            status = exc.response.status_code if exc.response is not None else None
            error = normalize_error(exc)
            logging.warning(f"GET {path} failed (status={status}): {error}")
            raise RequestFailedError(error, status_code=status) from exc

        if field and isinstance(payload, dict) and field in payload:
            logging.debug(f"GET {path}: extracted '{field}'")
            return payload[field]
        return payload

    def close(self) -> None:
        self.session.close()
