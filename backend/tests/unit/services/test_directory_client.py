import json

import pytest
import requests
from unittest.mock import Mock, patch

from bakery_catalog.exceptions import UpstreamUnavailableError
from bakery_catalog.schemas import ClientDTO
from bakery_catalog.services.directory_client import DirectoryClient, get_directory_client

BASE_URL = "https://directory.test/users"


def _response(status_code=200, body=None, raw=None):
    """Build a real requests.Response carrying a JSON (or raw) body"""
    response = requests.Response()
    response.status_code = status_code
    response.url = BASE_URL
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode()
    else:
        response._content = b""
    return response


@pytest.fixture
def http_session():
    return Mock(spec=requests.Session)


@pytest.fixture
def directory_client(http_session):
    return DirectoryClient(base_url=BASE_URL + "/", timeout=2.5, session=http_session)


class TestListClients:
    def test_returns_records_in_directory_order(self, directory_client, http_session):
        http_session.request.return_value = _response(body=[
            {"id": 1, "name": "Leanne Graham", "username": "Bret", "email": "Sincere@april.biz",
             "phone": "1-770-736-8031 x56442", "address": {"city": "Gwenborough"}},
            {"id": 2, "name": "Ervin Howell", "email": "Shanna@melissa.tv", "bakeryId": 4},
        ])

        result = directory_client.list_clients()

        assert [c.id for c in result] == [1, 2]
        assert result[0].phone == "1-770-736-8031 x56442"
        assert result[1].bakery_id == 4
        http_session.request.assert_called_once_with("GET", BASE_URL, timeout=2.5)

    @pytest.mark.parametrize("response", [
        _response(body=None),
        _response(body=[]),
        _response(body={"unexpected": "object"}),
        _response(raw=b"<html>oops</html>"),
    ])
    def test_no_data_yields_empty_list(self, directory_client, http_session, response):
        http_session.request.return_value = response

        assert directory_client.list_clients() == []

    def test_malformed_record_is_skipped(self, directory_client, http_session, caplog):
        http_session.request.return_value = _response(body=[
            {"id": 1, "name": "Leanne Graham"},
            {"id": "abc", "name": "Broken"},
        ])

        with caplog.at_level("WARNING", logger="bakery_catalog.services.directory_client"):
            result = directory_client.list_clients()

        assert [c.id for c in result] == [1]
        assert "'abc'" in caplog.text

    def test_transport_error_raises_upstream_unavailable(self, directory_client, http_session):
        http_session.request.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(UpstreamUnavailableError, match="connection refused"):
            directory_client.list_clients()


class TestGetClient:
    def test_returns_single_record(self, directory_client, http_session):
        http_session.request.return_value = _response(body={"id": 3, "name": "Clementine Bauch"})

        result = directory_client.get_client(3)

        assert result == ClientDTO(id=3, name="Clementine Bauch")
        http_session.request.assert_called_once_with("GET", f"{BASE_URL}/3", timeout=2.5)

    def test_not_found_returns_none(self, directory_client, http_session):
        http_session.request.return_value = _response(status_code=404, body={})

        assert directory_client.get_client(11) is None

    def test_empty_body_returns_none(self, directory_client, http_session):
        http_session.request.return_value = _response(body={})

        assert directory_client.get_client(11) is None

    def test_malformed_record_returns_none(self, directory_client, http_session):
        http_session.request.return_value = _response(body={"id": "abc"})

        assert directory_client.get_client(77) is None

    def test_server_error_raises_upstream_unavailable(self, directory_client, http_session):
        http_session.request.return_value = _response(status_code=500)

        with pytest.raises(UpstreamUnavailableError, match="HTTP 500"):
            directory_client.get_client(1)

    def test_timeout_raises_upstream_unavailable(self, directory_client, http_session):
        http_session.request.side_effect = requests.Timeout("read timed out")

        with pytest.raises(UpstreamUnavailableError):
            directory_client.get_client(1)


class TestWrites:
    def test_update_sends_put_with_json_body(self, directory_client, http_session):
        http_session.request.return_value = _response(body={"id": 2})
        client = ClientDTO(id=2, name="Ervin Howell", email="e@h.tv", phone="010", bakery_id=1)

        directory_client.update_client(2, client)

        http_session.request.assert_called_once_with(
            "PUT",
            f"{BASE_URL}/2",
            timeout=2.5,
            json={"id": 2, "name": "Ervin Howell", "email": "e@h.tv", "phone": "010", "bakery_id": 1},
        )

    def test_update_not_found_is_an_error(self, directory_client, http_session):
        http_session.request.return_value = _response(status_code=404)

        with pytest.raises(UpstreamUnavailableError):
            directory_client.update_client(2, ClientDTO(id=2))

    def test_delete_sends_delete(self, directory_client, http_session):
        http_session.request.return_value = _response(body={})

        directory_client.delete_client(9)

        http_session.request.assert_called_once_with("DELETE", f"{BASE_URL}/9", timeout=2.5)

    def test_delete_transport_error_raises(self, directory_client, http_session):
        http_session.request.side_effect = requests.ConnectionError("reset")

        with pytest.raises(UpstreamUnavailableError):
            directory_client.delete_client(9)


def test_defaults_come_from_settings():
    with patch.dict("os.environ", {"DIRECTORY_BASE_URL": "http://localhost:9000/users/", "DIRECTORY_TIMEOUT_S": "3"}):
        client = DirectoryClient()

    assert client.base_url == "http://localhost:9000/users"
    assert client.timeout == 3.0
    assert isinstance(client.session, requests.Session)


def test_get_directory_client_is_cached():
    with patch("bakery_catalog.services.directory_client.directory_client", None):
        first = get_directory_client()
        second = get_directory_client()

    assert first is second
