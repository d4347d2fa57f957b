"""
The generic resource access layer.  Every resource module ends up here:
build the URL, serialize the body, make the one transport call, look at the
status and turn the body into the element type or the right error.
"""
from dataclasses import dataclass, field, is_dataclass
from enum import Enum
from string import Formatter
from typing import Any, Generic, Type, TypeVar
import json
import logging

import requests
import google.auth.exceptions

from .errors import (InvalidArgumentError, SerializationError, TransportError,
                     error_for_response)
from .resources import SmartsheetResourceBase, resource_id
from .transport import HttpResponse, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=SmartsheetResourceBase)


class Shape(Enum):
    """What the response body should hold."""
    OBJECT = "object"
    LIST = "list"
    NONE = "none"


@dataclass(frozen=True)
class RequestEnvelope():
    method: str
    path: str
    body: Any = field(default=None)
    shape: Shape = field(default=Shape.OBJECT)


@dataclass(frozen=True)
class Endpoint(Generic[T]):
    """
    A path template and the element type it yields.
    Template fields are identifiers, e.g. 'folder/{folderId}/folders'.
    """
    template: str
    element_type: Type[T]

    @property
    def parameters(self) -> list[str]:
        return [name for _, name, _, _ in Formatter().parse(self.template) if name]

    def path(self, **ids) -> str:
        missing = [p for p in self.parameters if p not in ids]
        if missing:
            raise InvalidArgumentError(f"Missing path parameters for {self.template}: {missing}")
        return self.template.format(**{k: resource_id(v) for k, v in ids.items()})


def _serialize(body: Any) -> bytes:
    base = body.trim() if isinstance(body, SmartsheetResourceBase) else body
    if is_dataclass(base) or not isinstance(base, (dict, list)):
        raise SerializationError(f"Cannot serialize request body of type {type(body).__name__}")
    try:
        return json.dumps(base).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot serialize request body: {e}") from e


def _unwrap_result(j: Any) -> Any:
    """
    Create and update answer with {"message": "SUCCESS", "resultCode": 0, "result": {...}}
    rather than the bare object.
    """
    if isinstance(j, dict) and "result" in j and ("resultCode" in j or "message" in j):
        return j["result"]
    return j


class ResourceAccess():
    """
    Holds only the transport and base URL, both fixed at construction, so one
    instance can be shared between threads.  Every call builds and consumes
    its own request/response.
    """
    __DEFAULT_HEADERS = {"Accept": "application/json"}

    def __init__(self, transport: Transport, base_url: str,
                 user_agent: str|None = None) -> None:
        if transport is None:
            raise InvalidArgumentError("transport is required")
        if not base_url:
            raise InvalidArgumentError("base_url is required")
        self.__transport = transport
        self.__base_url = str(base_url).rstrip("/")
        headers = dict(self.__DEFAULT_HEADERS)
        if user_agent:
            headers["User-Agent"] = str(user_agent)
        self.__headers = headers

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{self.__base_url}"

    @property
    def transport(self) -> Transport:
        return self.__transport

    @property
    def base_url(self) -> str:
        return self.__base_url

    def url(self, path: str) -> str:
        return f"{self.__base_url}/{str(path).lstrip('/')}"

    def get_resource(self, path: str, cls: Type[T]) -> T:
        """GET a single object, e.g. GET /folder/{id}."""
        return self._execute(RequestEnvelope("GET", path), cls)

    def list_resources(self, path: str, cls: Type[T]) -> list[T]:
        """GET an array, an empty remote collection is just an empty list."""
        return self._execute(RequestEnvelope("GET", path, shape=Shape.LIST), cls)

    def create_resource(self, path: str, cls: Type[T], body: Any) -> T:
        """
        POST the body and return what the server made of it, which will
        carry the server assigned id and so on.
        """
        if body is None:
            raise InvalidArgumentError(f"create {path}: body is required")
        return self._execute(RequestEnvelope("POST", path, body), cls)

    def update_resource(self, path: str, cls: Type[T], body: Any) -> T:
        if body is None:
            raise InvalidArgumentError(f"update {path}: body is required")
        return self._execute(RequestEnvelope("PUT", path, body), cls)

    def delete_resource(self, path: str) -> None:
        self._execute(RequestEnvelope("DELETE", path, shape=Shape.NONE), None)

    def _execute(self, envelope: RequestEnvelope, cls: Type[T]|None) -> Any:
        headers = dict(self.__headers)
        data = None
        if envelope.body is not None:
            data = _serialize(envelope.body)
            headers["Content-Type"] = "application/json"
        url = self.url(envelope.path)
        response = self._send(envelope.method, url, data, headers)
        logger.debug("%s %s -> %d", envelope.method, url, response.status)
        if not response.ok:
            error = error_for_response(response.status, response.body)
            logger.debug("%s %s failed: %s", envelope.method, url, error)
            raise error
        if envelope.shape is Shape.NONE:
            return None
        return self._deserialize(envelope, response.body, cls)

    def _send(self, method: str, url: str, data: bytes|None,
              headers: dict[str, str]) -> HttpResponse:
        try:
            return self.__transport.request(method, url, data, headers)
        except TransportError:
            raise
        except (requests.RequestException, google.auth.exceptions.GoogleAuthError, OSError) as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

    def _deserialize(self, envelope: RequestEnvelope, body: bytes, cls: Type[T]) -> Any:
        try:
            j = json.loads(body)
        except (ValueError, RecursionError) as e:
            raise SerializationError(f"{envelope.method} {envelope.path}: response is not JSON") from e
        try:
            if envelope.shape is Shape.LIST:
                if not isinstance(j, list):
                    raise TypeError(f"expected a JSON array, got {type(j).__name__}")
                return [cls.from_base(item) for item in j]
            if envelope.method in ("POST", "PUT"):
                j = _unwrap_result(j)
            return cls.from_base(j)
        except (TypeError, ValueError, KeyError, RecursionError) as e:
            raise SerializationError(f"{envelope.method} {envelope.path}: {e}") from e
