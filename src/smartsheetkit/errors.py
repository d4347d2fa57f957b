"""
Error taxonomy for the client.

Everything raised by the access layer derives from SmartsheetError.  The REST
kinds are decided purely by HTTP status, the server's own errorCode and
message ride along for the caller to inspect.
"""
import json
import logging

logger = logging.getLogger(__name__)


class SmartsheetError(Exception):
    """Base client error."""


class InvalidArgumentError(SmartsheetError, ValueError):
    """Required input missing or unusable, raised before any network call."""


class SerializationError(SmartsheetError):
    """A body could not be converted to or from the expected shape."""


class TransportError(SmartsheetError):
    """The HTTP call itself could not complete."""


class RestError(SmartsheetError):
    """
    The server answered with an error status.
    Raised as-is for statuses that have no more specific kind.
    """
    def __init__(self, status: int, message: str = "",
                 error_code: int|None = None, ref_id: str|None = None) -> None:
        self.status = status
        self.message = message
        self.error_code = error_code
        self.ref_id = ref_id
        super().__init__(status, message, error_code, ref_id)

    def __str__(self) -> str:
        s = f"HTTP {self.status}"
        if self.error_code is not None:
            s += f" [{self.error_code}]"
        if self.message:
            s += f": {self.message}"
        if self.ref_id:
            s += f" (ref {self.ref_id})"
        return s


class InvalidRequestError(RestError):
    """400, the server considers the request malformed or semantically invalid."""


class UnauthorizedError(RestError):
    """401/403, the access token was rejected or lacks permission."""


class NotFoundError(RestError):
    """404, the referenced entity does not exist."""


class ServiceUnavailableError(RestError):
    """5xx, the service is down or failing."""


class RateLimitedError(ServiceUnavailableError):
    """429, throttled.  Still a ServiceUnavailableError for coarse handlers."""


_STATUS_ERRORS = {
    400: InvalidRequestError,
    401: UnauthorizedError,
    403: UnauthorizedError,
    404: NotFoundError,
    429: RateLimitedError,
}


def error_class(status: int) -> type[RestError]:
    """Which RestError subclass a (non-2xx) status maps to."""
    cls = _STATUS_ERRORS.get(status)
    if cls is None:
        cls = ServiceUnavailableError if 500 <= status <= 599 else RestError
    return cls


def error_for_response(status: int, body: bytes|None) -> RestError:
    """
    Build the error for a failed response.
    The body is expected to be {"errorCode": .., "message": .., "refId": ..}
    but a proxy or load balancer can hand back anything, in which case the raw
    text becomes the message and the status still decides the kind.
    """
    text = body.decode("utf-8", errors="replace") if body else ""
    error_code = None
    ref_id = None
    message = text
    try:
        j = json.loads(text) if text else None
    except ValueError:
        j = None
    if isinstance(j, dict):
        code = j.get("errorCode")
        if isinstance(code, int) and not isinstance(code, bool):
            error_code = code
        message = str(j.get("message", "") or "")
        ref = j.get("refId")
        ref_id = str(ref) if ref is not None else None
    else:
        logger.debug("unstructured error body for HTTP %d", status)
    return error_class(status)(status, message, error_code, ref_id)
