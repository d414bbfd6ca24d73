import json
from pathlib import Path
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from clearspending import ClearspendingClient, ClientConfig

FIXTURES = Path(__file__).parent / "fixtures"
BASE_URL = "http://clearspending.test/restapi/v3"


def make_response(status_code: int = 200, body=None, raw: bytes | None = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = "OK" if status_code < 400 else "Error"
    resp.url = BASE_URL
    if raw is not None:
        resp._content = raw
    else:
        resp._content = json.dumps(body if body is not None else {}).encode("utf-8")
    resp.headers["Content-Type"] = "application/json"
    return resp


class RecordingSession(requests.Session):
    """Session that never touches the network; replays queued responses and records calls."""

    def __init__(self):
        super().__init__()
        self.calls: list[dict] = []
        self.queue: list = []

    def enqueue(self, item) -> None:
        self.queue.append(item)

    def get(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        item = self.queue.pop(0) if self.queue else make_response(200, {})
        if isinstance(item, Exception):
            raise item
        return item

    def prepared_url(self, index: int = -1) -> str:
        call = self.calls[index]
        return requests.Request("GET", call["url"], params=call.get("params")).prepare().url

    def query(self, index: int = -1) -> dict[str, list[str]]:
        return parse_qs(urlsplit(self.prepared_url(index)).query, keep_blank_values=True)


@pytest.fixture
def session() -> RecordingSession:
    return RecordingSession()


@pytest.fixture
def client(session) -> ClearspendingClient:
    return ClearspendingClient(ClientConfig(base_url=BASE_URL), session=session)


@pytest.fixture
def load_fixture():
    def _load(name: str):
        return json.loads((FIXTURES / name).read_text(encoding="utf-8"))

    return _load
