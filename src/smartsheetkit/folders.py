"""
Folders live in three places: under another folder, in the user's Home, or
in a workspace.  Reading, renaming and deleting go through the folder's own
id regardless of where it lives, listing and creating depend on the parent.
"""
from dataclasses import dataclass, field
from typing import List

from .core import Endpoint, ResourceAccess
from .resources import SmartsheetResourceBase
from .templates import Template
from .access import ss


@dataclass
class Folder(SmartsheetResourceBase):
    """
    Sheets and reports are left as raw dicts, there is no model for them here.
    Child folders and templates are converted.
    """
    id: int|None = field(default=None)
    name: str|None = field(default=None)
    permalink: str|None = field(default=None)
    favorite: bool|None = field(default=None)
    folders: List["Folder"]|None = field(default=None)
    sheets: List[dict]|None = field(default=None)
    reports: List[dict]|None = field(default=None)
    templates: List[Template|dict]|None = field(default=None)

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
        if self.folders is not None:
            self.folders = [f if isinstance(f, Folder) else Folder.from_base(f) for f in self.folders]
        if self.templates is not None:
            self.templates = [t if isinstance(t, Template) else Template.from_base(t) for t in self.templates]


class _FolderResourcesBase():
    def __init__(self, access: ResourceAccess|None = None) -> None:
        self._access = access

    @property
    def access(self) -> ResourceAccess:
        return self._access if self._access is not None else ss.get_access()


class FolderResources(_FolderResourcesBase):
    """
    GET /folder/{id}
    PUT /folder/{id}
    DELETE /folder/{id}
    GET /folder/{id}/folders
    POST /folder/{id}/folders
    """
    _folder = Endpoint("folder/{folderId}", Folder)
    _children = Endpoint("folder/{folderId}/folders", Folder)

    def get_folder(self, folder_id: int|Folder) -> Folder:
        """
        Get a folder, including its contents.  A missing folder raises
        NotFoundError rather than returning an empty Folder.
        """
        return self.access.get_resource(self._folder.path(folderId=folder_id), Folder)

    def update_folder(self, folder: Folder) -> Folder:
        """
        Rename a folder.  The id comes from the folder itself and the
        body only carries the fields that are set.
        """
        path = self._folder.path(folderId=folder)
        return self.access.update_resource(path, Folder, folder)

    def delete_folder(self, folder_id: int|Folder) -> None:
        self.access.delete_resource(self._folder.path(folderId=folder_id))

    def list_folders(self, parent_folder_id: int|Folder) -> List[Folder]:
        """Child folders, empty if there are none."""
        return self.access.list_resources(self._children.path(folderId=parent_folder_id), Folder)

    def create_folder(self, parent_folder_id: int|Folder, folder: Folder) -> Folder:
        """Returns the created folder as the server has it, id included."""
        return self.access.create_resource(self._children.path(folderId=parent_folder_id),
                                           Folder, folder)


class HomeFolderResources(_FolderResourcesBase):
    """
    GET /home/folders
    POST /home/folders
    """
    _folders = Endpoint("home/folders", Folder)

    def list_folders(self) -> List[Folder]:
        return self.access.list_resources(self._folders.path(), Folder)

    def create_folder(self, folder: Folder) -> Folder:
        return self.access.create_resource(self._folders.path(), Folder, folder)


class WorkspaceFolderResources(_FolderResourcesBase):
    """
    GET /workspace/{id}/folders
    POST /workspace/{id}/folders
    """
    _folders = Endpoint("workspace/{workspaceId}/folders", Folder)

    def list_folders(self, workspace_id: int) -> List[Folder]:
        return self.access.list_resources(self._folders.path(workspaceId=workspace_id), Folder)

    def create_folder(self, workspace_id: int, folder: Folder) -> Folder:
        return self.access.create_resource(self._folders.path(workspaceId=workspace_id),
                                           Folder, folder)
