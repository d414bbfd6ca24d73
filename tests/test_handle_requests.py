"""
Tests for the shared request executor: clearspending/api/handle_requests.py
"""
import pytest
import requests

from clearspending.api.handle_requests import RequestHandler, normalize_error
from clearspending.config import ClientConfig
from clearspending.data.errors import RequestFailedError
from tests.conftest import BASE_URL, make_response


@pytest.fixture
def handler(session) -> RequestHandler:
    return RequestHandler(ClientConfig(base_url=BASE_URL), session=session)


class TestGetJson:
    def test_builds_url_and_sends_timeout(self, handler, session):
        handler.get_json("grants/get/", params={"id": "X"})
        call = session.calls[0]
        assert call["url"] == f"{BASE_URL}/grants/get/"
        assert call["params"] == {"id": "X"}
        assert call["timeout"] == 30.0

    def test_accept_header_installed(self, handler, session):
        assert session.headers["Accept"] == "application/json"

    def test_extracts_field(self, handler, session):
        session.enqueue(make_response(200, {"grants": {"data": [1, 2]}, "total": 5}))
        assert handler.get_json("grants/get/", field="grants") == {"data": [1, 2]}

    def test_missing_field_returns_whole_body(self, handler, session):
        session.enqueue(make_response(200, {"other": 1}))
        assert handler.get_json("grants/get/", field="grants") == {"other": 1}

    def test_no_field_returns_whole_body(self, handler, session):
        session.enqueue(make_response(200, {"grants": []}))
        assert handler.get_json("grants/get/") == {"grants": []}

    def test_non_dict_body(self, handler, session):
        session.enqueue(make_response(200, [1, 2, 3]))
        assert handler.get_json("grants/get/", field="grants") == [1, 2, 3]


class TestErrorNormalization:
    def test_nested_err_wins(self, handler, session):
        session.enqueue(make_response(404, {"err": {"code": "x"}, "status": "fail"}))
        with pytest.raises(RequestFailedError) as exc:
            handler.get_json("grants/get/", field="grants")
        assert exc.value.error == {"code": "x"}
        assert exc.value.status_code == 404

    def test_body_without_err(self, handler, session):
        session.enqueue(make_response(500, {"foo": 1}))
        with pytest.raises(RequestFailedError) as exc:
            handler.get_json("grants/get/")
        assert exc.value.error == {"foo": 1}
        assert exc.value.status_code == 500

    def test_non_json_error_body_falls_back_to_string(self, handler, session):
        session.enqueue(make_response(502, raw=b"<html>Bad Gateway</html>"))
        with pytest.raises(RequestFailedError) as exc:
            handler.get_json("grants/get/")
        assert isinstance(exc.value.error, str)
        assert "502" in exc.value.error

    def test_timeout_is_stringified(self, handler, session):
        session.enqueue(requests.Timeout("read timed out"))
        with pytest.raises(RequestFailedError) as exc:
            handler.get_json("grants/get/")
        assert exc.value.error == "read timed out"
        assert exc.value.status_code is None
        assert isinstance(exc.value.__cause__, requests.Timeout)

    def test_connection_error(self, handler, session):
        session.enqueue(requests.ConnectionError("connection refused"))
        with pytest.raises(RequestFailedError) as exc:
            handler.get_json("grants/get/")
        assert exc.value.error == "connection refused"

    def test_malformed_success_body(self, handler, session):
        session.enqueue(make_response(200, raw=b"not json"))
        with pytest.raises(RequestFailedError) as exc:
            handler.get_json("grants/get/")
        assert isinstance(exc.value.error, str)

    def test_normalize_error_directly(self):
        err = requests.HTTPError("boom", response=make_response(400, {"err": "bad"}))
        assert normalize_error(err) == "bad"
        assert normalize_error(requests.RequestException("plain")) == "plain"

    def test_empty_err_falls_back_to_body(self):
        err = requests.HTTPError("boom", response=make_response(400, {"err": None, "x": 1}))
        assert normalize_error(err) == {"err": None, "x": 1}


def test_default_session_never_retries():
    handler = RequestHandler(ClientConfig(base_url=BASE_URL))
    adapter = handler.session.get_adapter(f"{BASE_URL}/grants/get/")
    assert adapter is handler.adapter
    assert adapter.max_retries.total == 0
    handler.close()
