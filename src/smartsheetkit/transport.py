"""
The HTTP side of the client.  The access core only needs something that takes
a method/url/body/headers and gives back a status and some bytes, so that is
all a Transport is.  The default one rides on google-auth's AuthorizedSession,
which is a requests.Session that stamps the bearer token on every request.
"""
from dataclasses import dataclass, field
import logging

import requests
import google.auth.exceptions
from google.auth.credentials import Credentials
from google.auth.transport.requests import AuthorizedSession

from .errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse():
    status: int
    body: bytes = field(default=b"")

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 299


class Transport():
    """
    Narrow HTTP contract.  Implementations raise TransportError when the call
    could not complete, any status from the server is a normal return.
    """
    def request(self, method: str, url: str,
                body: bytes|None = None,
                headers: dict[str, str]|None = None) -> HttpResponse:
        raise NotImplementedError

    def close(self) -> None:
        pass


class RequestsTransport(Transport):
    """
    Transport over an AuthorizedSession.
    Refreshing on 401 only makes sense if the credentials can actually refresh,
    a static token would just turn the 401 into a RefreshError.
    """
    def __init__(self, credentials: Credentials,
                 timeout: float|None = None,
                 session: requests.Session|None = None) -> None:
        if session is None:
            can_refresh = bool(getattr(credentials, "refresh_token", None))
            session = AuthorizedSession(credentials,
                                        refresh_status_codes=(401,) if can_refresh else ())
        self._session = session
        self._timeout = timeout

    @property
    def session(self) -> requests.Session:
        return self._session

    @property
    def timeout(self) -> float|None:
        return self._timeout

    def request(self, method: str, url: str,
                body: bytes|None = None,
                headers: dict[str, str]|None = None) -> HttpResponse:
        kwargs = {}
        if self._timeout is not None:
            kwargs['timeout'] = self._timeout
        try:
            r = self._session.request(method, url, data=body,
                                      headers=headers, **kwargs)
        except (requests.RequestException, google.auth.exceptions.GoogleAuthError) as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"{method} {url} failed: {e}") from e
        return HttpResponse(r.status_code, r.content or b"")

    def close(self) -> None:
        self._session.close()
