"""
A small client for the Smartsheet REST API.
The goal is to keep the request/response plumbing in one place: resource
modules only know their paths and their model class, everything else
(serialization, the HTTP call, status checks, error mapping) is the
ResourceAccess in core.

Python dataclasses are used for the resource structs and most of the logic is
translating between those and the raw dicts.

Right now folders (including Home and workspace folders) and templates are
supported, widgets are representation only.
"""
from .access import ss
from .client import Smartsheet
from .core import Endpoint, RequestEnvelope, ResourceAccess, Shape
from .errors import (InvalidArgumentError, InvalidRequestError, NotFoundError, RateLimitedError,
                     RestError, SerializationError, ServiceUnavailableError, SmartsheetError,
                     TransportError, UnauthorizedError)
from .folders import Folder, FolderResources, HomeFolderResources, WorkspaceFolderResources
from .resources import Identified, SmartsheetResourceBase, resource_id
from .templates import AccessLevel, Template, TemplateResources
from .transport import HttpResponse, RequestsTransport, Transport
from .version import VERSION
from .widgets import *
