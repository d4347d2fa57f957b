"""
Dashboard (Sight) widgets.  Widgets only travel nested inside a dashboard,
which has no resource module here, so this is representation only.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .resources import SmartsheetResourceBase

__all__ = ["WidgetType", "Widget", "WidgetContent", "CellLinkWidgetContent", "RichTextWidgetContent",
           "ShortcutWidgetContent", "ReportWidgetContent", "ImageWidgetContent"]


class WidgetType(str, Enum):
    CELLLINK = "CELLLINK"
    SHEETSUMMARY = "SHEETSUMMARY"
    RICHTEXT = "RICHTEXT"
    SHORTCUTICON = "SHORTCUTICON"
    SHORTCUTLIST = "SHORTCUTLIST"
    GRIDGANTT = "GRIDGANTT"
    IMAGE = "IMAGE"


@dataclass
class CellLinkWidgetContent(SmartsheetResourceBase):
    """Contents of CELLLINK and SHEETSUMMARY widgets."""
    sheetId: int|None = field(default=None)
    cellData: List[dict]|None = field(default=None)
    columns: List[dict]|None = field(default=None)
    hyperlink: dict|None = field(default=None)


@dataclass
class RichTextWidgetContent(SmartsheetResourceBase):
    htmlContent: str|None = field(default=None)


@dataclass
class ShortcutWidgetContent(SmartsheetResourceBase):
    """Contents of SHORTCUTICON and SHORTCUTLIST widgets."""
    shortcutData: List[dict]|None = field(default=None)


@dataclass
class ReportWidgetContent(SmartsheetResourceBase):
    """Contents of a GRIDGANTT widget."""
    reportId: int|None = field(default=None)
    htmlContent: str|None = field(default=None)
    hyperlink: dict|None = field(default=None)


@dataclass
class ImageWidgetContent(SmartsheetResourceBase):
    privateId: str|None = field(default=None)
    fileName: str|None = field(default=None)
    format: str|None = field(default=None)
    height: int|None = field(default=None)
    width: int|None = field(default=None)
    hyperlink: dict|None = field(default=None)


WidgetContent = (CellLinkWidgetContent | RichTextWidgetContent | ShortcutWidgetContent |
                 ReportWidgetContent | ImageWidgetContent)

_CONTENT_TYPES = {
    WidgetType.CELLLINK: CellLinkWidgetContent,
    WidgetType.SHEETSUMMARY: CellLinkWidgetContent,
    WidgetType.RICHTEXT: RichTextWidgetContent,
    WidgetType.SHORTCUTICON: ShortcutWidgetContent,
    WidgetType.SHORTCUTLIST: ShortcutWidgetContent,
    WidgetType.GRIDGANTT: ReportWidgetContent,
    WidgetType.IMAGE: ImageWidgetContent,
}


@dataclass
class Widget(SmartsheetResourceBase):
    """
    A widget placed on a dashboard.  xPosition/yPosition/width/height are in
    dashboard grid units.  The class of contents follows type, so contents is
    left as a plain dict until the type is known.
    """
    id: int|None = field(default=None)
    type: WidgetType|str|None = field(default=None)
    title: str|None = field(default=None)
    showTitle: bool|None = field(default=None)
    showTitleIcon: bool|None = field(default=None)
    titleFormat: str|None = field(default=None)
    xPosition: int|None = field(default=None)
    yPosition: int|None = field(default=None)
    height: int|None = field(default=None)
    width: int|None = field(default=None)
    version: int|None = field(default=None)
    contents: WidgetContent|dict|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def __bool__(self) -> bool:
        return self.id is not None and self.type is not None

    def __str__(self) -> str:
        if self:
            return f"{self.title}<{self.id}>:{self.type.value}"
        return "<empty>"

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self)}"

    def fixup(self) -> None:
        if self.type is not None and not isinstance(self.type, WidgetType):
            self.type = WidgetType(str(self.type))
        if isinstance(self.contents, dict) and self.type is not None:
            self.contents = _CONTENT_TYPES[self.type].from_base(self.contents)
