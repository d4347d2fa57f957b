from pathlib import Path
import json
import logging
import os
import threading

from google.oauth2.credentials import Credentials

from .core import ResourceAccess
from .errors import InvalidArgumentError
from .transport import RequestsTransport, Transport
from .version import VERSION

logger = logging.getLogger(__name__)


class __SmartsheetAccess():
    """
    Class encapsulating authenticated access to Smartsheet.
    An access token is generated from the Smartsheet UI (Account > Apps & Integrations
    > API Access) or handed out by an OAuth flow that is not handled here.
    If none is set explicitly it is looked up in the SMARTSHEET_ACCESS_TOKEN
    environment variable.

    It makes no sense to have multiple authenticated sessions per application so do this
    as a module singleton and the resource modules pick up the shared ResourceAccess from it
    unless they are handed one.
    """

    __TOKEN_ENV = "SMARTSHEET_ACCESS_TOKEN"
    __DEFAULT_BASE_URL = "https://api.smartsheet.com/1.1"
    __DEFAULT_USER_AGENT = f"smartsheetkit/{VERSION}"
    __DEFAULT_CONFIG = str((Path.home() / "smartsheet_config.json").absolute())

    def __init__(self) -> None:
        self.__lock = threading.Lock()
        self.reset()

    def __bool__(self) -> bool:
        """True if there is a token to authenticate with"""
        return bool(self.token)

    def __str__(self) -> str:
        if self.__access is not None:
            return f"Connected:{self.__base_url}"
        return f"Disconnected:{self.__base_url}"

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self)}"

    @property
    def token(self) -> str|None:
        """
        Access token, falling back on the environment.
        """
        if self.__token:
            return self.__token
        return os.environ.get(self.__TOKEN_ENV) or None

    @token.setter
    def token(self, value: str|None) -> None:
        v = value if value is None else str(value)
        if v != self.__token:
            self.__token = v
            self.clear()

    @property
    def base_url(self) -> str:
        return self.__base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        v = str(value).rstrip("/")
        if not v:
            raise InvalidArgumentError("base_url cannot be empty")
        if v != self.__base_url:
            self.__base_url = v
            self.clear()

    @property
    def user_agent(self) -> str:
        return self.__user_agent

    @user_agent.setter
    def user_agent(self, value: str) -> None:
        v = str(value)
        if v != self.__user_agent:
            self.__user_agent = v
            self.clear()

    @property
    def timeout(self) -> float|None:
        """Seconds the transport waits on the server, None keeps the session default (120s)."""
        return self.__timeout

    @timeout.setter
    def timeout(self, value: float|None) -> None:
        v = value if value is None else float(value)
        if v is not None and v <= 0:
            raise InvalidArgumentError(f"Invalid timeout: {value}")
        if v != self.__timeout:
            self.__timeout = v
            self.clear()

    @property
    def config(self) -> dict:
        """
        Get all configuration state as a dict.
        Convenience for getting it all at once for pushing into a json, toml, ini, etc, file.
        The token is left out, that belongs in the environment or a secrets store.
        """
        config = {
            'base_url': self.__base_url,
            'user_agent': self.__user_agent,
            'timeout': self.__timeout
        }
        return config

    @config.setter
    def config(self, config: dict) -> None:
        """
        Set configuration state from a dict.
        Convenience method for inserting state pulled from a config file or equivalent.
        """
        v = config.get('token', None)
        if v is not None:
            self.token = str(v)
        v = config.get('base_url', None)
        if v is not None:
            self.base_url = str(v)
        v = config.get('user_agent', None)
        if v is not None:
            self.user_agent = str(v)
        v = config.get('timeout', None)
        if v is not None:
            self.timeout = float(v)

    def load_config(self, path: Path|str|None = None) -> dict:
        """
        Read a JSON config file into the configuration.
        Missing file is not an error, the defaults just stay in place.
        """
        p = Path(path) if path is not None else Path(self.__DEFAULT_CONFIG)
        if not (p.exists() and p.is_file()):
            logger.debug("no config at %s", p)
            return {}
        with open(p.resolve(), 'r', encoding='utf-8') as f:
            try:
                j = json.load(f)
            except ValueError as e:
                raise InvalidArgumentError(f"Invalid config file {p}: {e}") from e
        if not isinstance(j, dict):
            raise InvalidArgumentError(f"Invalid config file {p}: expected a JSON object")
        self.config = j
        return j

    def reset(self) -> None:
        """
        Reset all connection state to defaults.
        """
        self.__token = None
        self.__base_url = self.__DEFAULT_BASE_URL
        self.__user_agent = self.__DEFAULT_USER_AGENT
        self.__timeout = None
        self.__transport = None
        self.__access = None

    def clear(self) -> None:
        """Drop the built transport and access, the next call rebuilds them."""
        transport = self.__transport
        self.__transport = None
        self.__access = None
        if transport is not None:
            transport.close()

    def credentials(self) -> Credentials:
        token = self.token
        if not token:
            raise InvalidArgumentError(f"No access token, set one or export {self.__TOKEN_ENV}")
        return Credentials(token)

    def connect(self, transport: Transport|None = None) -> ResourceAccess:
        """
        Build the shared access, either over the given transport or over
        a fresh requests transport carrying our token.
        """
        with self.__lock:
            return self.__connect(transport)

    def __connect(self, transport: Transport|None) -> ResourceAccess:
        if transport is None:
            transport = RequestsTransport(self.credentials(), self.__timeout)
        self.clear()
        self.__transport = transport
        self.__access = ResourceAccess(transport, self.__base_url, self.__user_agent)
        logger.debug("connected to %s", self.__base_url)
        return self.__access

    def get_access(self) -> ResourceAccess:
        """
        The shared ResourceAccess, connecting if required.
        """
        access = self.__access
        if access is None:
            with self.__lock:
                access = self.__access
                if access is None:
                    access = self.__connect(None)
        return access


ss = __SmartsheetAccess()
