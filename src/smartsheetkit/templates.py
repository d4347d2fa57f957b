from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .core import Endpoint, ResourceAccess
from .resources import SmartsheetResourceBase
from .access import ss


class AccessLevel(str, Enum):
    VIEWER = "VIEWER"
    EDITOR = "EDITOR"
    EDITOR_SHARE = "EDITOR_SHARE"
    ADMIN = "ADMIN"
    OWNER = "OWNER"


@dataclass
class Template(SmartsheetResourceBase):
    """
    A sheet template.  Only the listing calls exist, templates are
    created from sheets and consumed when creating sheets.
    """
    id: int|None = field(default=None)
    name: str|None = field(default=None)
    description: str|None = field(default=None)
    accessLevel: AccessLevel|str|None = field(default=None)
    type: str|None = field(default=None)
    image: str|None = field(default=None)
    largeImage: str|None = field(default=None)
    locale: str|None = field(default=None)
    blank: bool|None = field(default=None)
    globalTemplate: str|None = field(default=None)
    categories: List[str]|None = field(default=None)
    tags: List[str]|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def __bool__(self) -> bool:
        return self.id is not None

    def __str__(self) -> str:
        if self:
            return f"{self.name}<{self.id}>"
        return "<empty>"

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self)}"

    def fixup(self) -> None:
        if self.accessLevel is not None and not isinstance(self.accessLevel, AccessLevel):
            self.accessLevel = AccessLevel(str(self.accessLevel))


class TemplateResources():
    """
    GET /templates
    GET /templates/public
    """
    _templates = Endpoint("templates", Template)
    _public_templates = Endpoint("templates/public", Template)

    def __init__(self, access: ResourceAccess|None = None) -> None:
        self._access = access

    @property
    def access(self) -> ResourceAccess:
        return self._access if self._access is not None else ss.get_access()

    def list_templates(self) -> List[Template]:
        """Templates owned by or shared with the user, empty if there are none."""
        return self.access.list_resources(self._templates.path(), Template)

    def list_public_templates(self) -> List[Template]:
        """Templates published for everybody."""
        return self.access.list_resources(self._public_templates.path(), Template)
