import json
import threading

import pytest

from smartsheetkit.access import ss
from smartsheetkit.core import ResourceAccess
from smartsheetkit.transport import HttpResponse, Transport

BASE_URL = "https://api.example.test/1.1"


class FakeTransport(Transport):
    """
    Answers every request with the same canned response and remembers
    what it was asked.
    """
    def __init__(self, status: int = 200, body=None, raw: bytes|None = None) -> None:
        self.status = status
        self.raw = raw if raw is not None else (b"" if body is None else json.dumps(body).encode("utf-8"))
        self.calls = []
        self._lock = threading.Lock()

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def last(self) -> dict:
        return self.calls[-1]

    def request(self, method, url, body=None, headers=None) -> HttpResponse:
        with self._lock:
            self.calls.append({'method': method, 'url': url, 'body': body, 'headers': headers})
        return HttpResponse(self.status, self.raw)


class RaisingTransport(Transport):
    def __init__(self, error: Exception) -> None:
        self.error = error

    def request(self, method, url, body=None, headers=None) -> HttpResponse:
        raise self.error


class EchoTransport(Transport):
    """
    Answers GET {base}/folder/{id} with a folder carrying that id, so each
    caller can check it got its own response back.
    """
    def request(self, method, url, body=None, headers=None) -> HttpResponse:
        folder_id = int(url.rsplit("/", 1)[-1])
        return HttpResponse(200, json.dumps({'id': folder_id, 'name': f"folder {folder_id}"}).encode("utf-8"))


@pytest.fixture
def fake():
    return FakeTransport()


def make_access(transport: Transport) -> ResourceAccess:
    return ResourceAccess(transport, BASE_URL, "smartsheetkit-tests")


@pytest.fixture(autouse=True)
def clean_singleton(monkeypatch):
    monkeypatch.delenv("SMARTSHEET_ACCESS_TOKEN", raising=False)
    ss.reset()
    yield
    ss.reset()
