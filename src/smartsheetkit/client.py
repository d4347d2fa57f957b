from .access import ss
from .core import ResourceAccess
from .folders import FolderResources, HomeFolderResources, WorkspaceFolderResources
from .templates import TemplateResources
from .transport import Transport


class Smartsheet():
    """
    All the resource modules over one ResourceAccess.
    With no arguments it uses the shared access from the 'ss' singleton,
    otherwise pass an access or a transport (plus base_url) to build one.
    """
    def __init__(self, access: ResourceAccess|None = None,
                 transport: Transport|None = None,
                 base_url: str|None = None) -> None:
        if access is None and transport is not None:
            access = ResourceAccess(transport, base_url or ss.base_url, ss.user_agent)
        self._access = access
        self.folders = FolderResources(access)
        self.home = HomeFolderResources(access)
        self.workspaces = WorkspaceFolderResources(access)
        self.templates = TemplateResources(access)

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self.access)}"

    @property
    def access(self) -> ResourceAccess:
        return self._access if self._access is not None else ss.get_access()
