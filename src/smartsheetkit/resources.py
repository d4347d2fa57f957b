from dataclasses import asdict, fields
from enum import Enum
from typing import Any, Protocol, Self, runtime_checkable

from .errors import InvalidArgumentError


@runtime_checkable
class Identified(Protocol):
    """
    Anything carrying a server assigned identifier.
    Models compose an 'id' field rather than inheriting one.
    """
    id: int|None


def resource_id(value: int|Identified) -> int:
    """
    Pull the identifier out of an int or an identified model.
    Identifiers are opaque, the only local check is that there is one.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid resource id: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, Identified):
        if isinstance(value.id, int) and not isinstance(value.id, bool):
            return value.id
        raise InvalidArgumentError(f"{value.__class__.__name__} has no id")
    raise InvalidArgumentError(f"Invalid resource id: {value!r}")


def _unenum(value: Any) -> Any:
    """Swap enum members for their wire values, recursing into containers."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _unenum(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_unenum(v) for v in value]
    return value


class SmartsheetResourceBase():
    """
    Intended to be subclassed by a dataclass but isnt actually a dataclass.
    The dataclass field names are the JSON keys, so the mapping is declared
    statically by the field list and asdict() does most of the work.
    """
    @classmethod
    def from_base(cls, base: dict) -> Self:
        """
        Build from a JSON object.  Keys without a matching field are dropped
        as the server adds attributes over time.
        """
        if not isinstance(base, dict):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(base).__name__}")
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in base.items() if k in names})

    def to_base(self) -> dict:
        """
        Default just return the dict representation of the object with enums
        flattened to their values.  Something more complicated can override.
        Call fixup() first to ensure all fields are in correct format.
        """
        self.fixup()
        return _unenum(asdict(self))

    def trim(self) -> dict:
        """
        Return a "trimmed" dict of the resource.  That is, removing any top level attributes
        that are None.  Request bodies should only carry fields that are set, otherwise a PUT
        would blank out what we didnt set.  Empty strings and lists are real values and stay.
        """
        b = self.to_base()
        vals = dict(b.items())
        for k, v in vals.items():
            if v is None:
                del b[k]
        return b

    def fixup(self) -> None:
        """
        notify a subclass to do any field adjustments
        """
        pass
