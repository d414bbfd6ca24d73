import json

import pytest

from clearspending.data.errors import RequestFailedError
from scripts import db_info_smoke


class FakeClient:
    result = None
    error = None
    seen_config = None

    def __init__(self, config):
        FakeClient.seen_config = config

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return None

    def db_info(self, **query):
        if FakeClient.error is not None:
            raise FakeClient.error
        return FakeClient.result


@pytest.fixture(autouse=True)
def fake_client(monkeypatch):
    FakeClient.result = {"total": 1, "data": []}
    FakeClient.error = None
    monkeypatch.setattr(db_info_smoke, "ClearspendingClient", FakeClient)
    monkeypatch.delenv("CLEARSPENDING_BASE_URL", raising=False)
    return FakeClient


def test_prints_result(capsys):
    assert db_info_smoke.main([]) == 0
    assert json.loads(capsys.readouterr().out) == {"total": 1, "data": []}


def test_base_url_from_environment(monkeypatch):
    monkeypatch.setenv("CLEARSPENDING_BASE_URL", "http://mirror.test/restapi/v3")
    db_info_smoke.main([])
    assert FakeClient.seen_config.base_url == "http://mirror.test/restapi/v3"


def test_unexpected_total():
    FakeClient.result = {"total": 0}
    assert db_info_smoke.main([]) == 2


def test_request_failure():
    FakeClient.error = RequestFailedError("timeout")
    assert db_info_smoke.main(["--info", "all"]) == 1
