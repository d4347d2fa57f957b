import json

import pytest

from smartsheetkit.access import ss
from smartsheetkit.client import Smartsheet
from smartsheetkit.core import ResourceAccess
from smartsheetkit.errors import InvalidArgumentError
from smartsheetkit.transport import RequestsTransport

from conftest import BASE_URL, FakeTransport


def test_defaults():
    assert(ss.base_url == "https://api.smartsheet.com/1.1")
    assert(ss.user_agent.startswith("smartsheetkit/"))
    assert(ss.timeout is None)
    assert(ss.token is None)
    assert(not ss)


def test_token_from_environment(monkeypatch):
    monkeypatch.setenv("SMARTSHEET_ACCESS_TOKEN", "from-env")
    assert(ss.token == "from-env")
    assert(ss)
    ss.token = "explicit"
    assert(ss.token == "explicit")


def test_no_token_is_invalid_argument():
    with pytest.raises(InvalidArgumentError):
        ss.get_access()


def test_get_access_builds_requests_transport():
    ss.token = "abc"
    ss.timeout = 30
    access = ss.get_access()
    assert(isinstance(access.transport, RequestsTransport))
    assert(access.transport.timeout == 30.0)
    assert(access.base_url == ss.base_url)
    assert(ss.get_access() is access)


def test_settings_change_drops_access():
    ss.token = "abc"
    first = ss.get_access()
    ss.base_url = "https://api.example.test/2.0/"
    second = ss.get_access()
    assert(second is not first)
    assert(second.base_url == "https://api.example.test/2.0")


def test_connect_with_transport():
    fake = FakeTransport(body=[])
    access = ss.connect(fake)
    assert(access.transport is fake)
    assert(ss.get_access() is access)


def test_invalid_settings():
    with pytest.raises(InvalidArgumentError):
        ss.base_url = ""
    with pytest.raises(InvalidArgumentError):
        ss.timeout = 0


def test_config_round_trip():
    ss.config = {'token': 't', 'base_url': BASE_URL, 'user_agent': 'ua', 'timeout': '12'}
    assert(ss.token == 't')
    assert(ss.config == {'base_url': BASE_URL, 'user_agent': 'ua', 'timeout': 12.0})


def test_load_config(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({'base_url': BASE_URL, 'timeout': 5}), encoding="utf-8")
    assert(ss.load_config(p)['timeout'] == 5)
    assert(ss.base_url == BASE_URL)
    assert(ss.timeout == 5.0)


def test_load_config_missing_and_invalid(tmp_path):
    assert(ss.load_config(tmp_path / "nope.json") == {})
    bad = tmp_path / "bad.json"
    bad.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(InvalidArgumentError):
        ss.load_config(bad)
    bad.write_text("{oops", encoding="utf-8")
    with pytest.raises(InvalidArgumentError):
        ss.load_config(bad)


def test_client_with_transport():
    fake = FakeTransport(body=[{"id": 1, "name": "t"}])
    client = Smartsheet(transport=fake, base_url=BASE_URL)
    assert(client.templates.list_templates()[0].id == 1)
    assert(fake.last['url'] == f"{BASE_URL}/templates")
    assert(client.folders.list_folders(3)[0].name == "t")
    assert(fake.last['url'] == f"{BASE_URL}/folder/3/folders")


def test_client_uses_singleton():
    fake = FakeTransport(body=[])
    ss.base_url = BASE_URL
    ss.connect(fake)
    client = Smartsheet()
    assert(client.home.list_folders() == [])
    assert(fake.last['url'] == f"{BASE_URL}/home/folders")
    assert(client.access is ss.get_access())


def test_client_with_access():
    access = ResourceAccess(FakeTransport(body=[]), BASE_URL)
    client = Smartsheet(access)
    assert(client.workspaces.list_folders(1) == [])
    assert(client.access is access)
