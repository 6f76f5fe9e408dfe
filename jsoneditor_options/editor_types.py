"""Value types shared by the options model and the callback contracts.

All snapshot types are frozen: an engine hands them to host callbacks and
mutating them must never feed back into the editor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Literal, Mapping, Optional, Sequence, Tuple, Union

__all__ = [
    "EditorMode",
    "NodePath",
    "make_path",
    "Node",
    "NodeNameArgs",
    "ValidationError",
    "TextPosition",
    "SerializableNode",
    "QueryFilter",
    "QuerySort",
    "QueryProjection",
    "QueryOptions",
    "ContextMenuNode",
]


class EditorMode(str, Enum):
    """Editor presentation style"""

    TREE = "tree"
    VIEW = "view"
    FORM = "form"
    TEXT = "text"
    CODE = "code"
    PREVIEW = "preview"

    @classmethod
    def parse(cls, value: Union[str, "EditorMode"]) -> "EditorMode":
        """Return the member for ``value`` or raise ValueError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Unknown editor mode {value!r} (expected one of: {allowed})") from None

    def __str__(self) -> str:
        return self.value


PathSegment = Union[str, int]
NodePath = Tuple[PathSegment, ...]


def make_path(segments: Sequence[PathSegment]) -> NodePath:
    """Freeze a sequence of keys / indices into a NodePath.

    Raises:
        TypeError: a segment is neither a string nor an integer (bool is
            rejected even though it is an int subclass).
    """
    if isinstance(segments, (str, bytes)):
        raise TypeError("A node path must be a sequence of segments, not a string")
    path = tuple(segments)
    for segment in path:
        if isinstance(segment, bool) or not isinstance(segment, (str, int)):
            raise TypeError(f"Invalid path segment {segment!r}: expected str or int")
    return path


@dataclass(frozen=True)
class Node:
    """Point-in-time snapshot of a field/value/path triple"""

    field: str
    path: NodePath
    value: Any = None


@dataclass(frozen=True)
class NodeNameArgs:
    """Argument of the on_node_name hook"""

    path: NodePath
    size: int
    type: Literal["object", "array"]

    def default_label(self) -> str:
        if self.type == "array":
            return f"[{self.size}]"
        return f"{{{self.size}}}"


@dataclass(frozen=True)
class ValidationError:
    """A validation problem located at ``path`` in the edited document."""

    path: NodePath
    message: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ValidationError":
        return cls(path=make_path(data.get("path", ())), message=str(data["message"]))

    def to_dict(self) -> Dict[str, Any]:
        return {"path": list(self.path), "message": self.message}


@dataclass(frozen=True)
class TextPosition:
    """Cursor position in text based modes (1-based, like the text editors)"""

    row: int
    column: int


@dataclass(frozen=True)
class SerializableNode:
    value: Any
    path: NodePath


# Query options ---------------------------------------------------------------

QUERY_RELATIONS = ("==", "!=", "<", "<=", ">", ">=")
SORT_DIRECTIONS = ("asc", "desc")


@dataclass(frozen=True)
class QueryFilter:
    field: str  # "@" addresses the item itself
    relation: str
    value: str

    def __post_init__(self) -> None:
        if self.relation not in QUERY_RELATIONS:
            raise ValueError(f"Unknown filter relation {self.relation!r}")


@dataclass(frozen=True)
class QuerySort:
    field: str
    direction: str = "asc"

    def __post_init__(self) -> None:
        if self.direction not in SORT_DIRECTIONS:
            raise ValueError(f"Unknown sort direction {self.direction!r}")


@dataclass(frozen=True)
class QueryProjection:
    fields: Tuple[str, ...] = ()


@dataclass(frozen=True)
class QueryOptions:
    """
    Transform request built by the user in the transform wizard.

    The three parts compose independently; any subset may be present.
    """

    filter: Optional[QueryFilter] = None
    sort: Optional[QuerySort] = None
    projection: Optional[QueryProjection] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QueryOptions":
        raw_filter = data.get("filter")
        raw_sort = data.get("sort")
        raw_projection = data.get("projection")
        return cls(
            filter=QueryFilter(
                field=raw_filter["field"],
                relation=raw_filter["relation"],
                value=raw_filter["value"],
            ) if raw_filter else None,
            sort=QuerySort(
                field=raw_sort["field"],
                direction=raw_sort.get("direction", "asc"),
            ) if raw_sort else None,
            projection=QueryProjection(
                fields=tuple(raw_projection.get("fields", ())),
            ) if raw_projection else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.filter is not None:
            result["filter"] = {
                "field": self.filter.field,
                "relation": self.filter.relation,
                "value": self.filter.value,
            }
        if self.sort is not None:
            result["sort"] = {"field": self.sort.field, "direction": self.sort.direction}
        if self.projection is not None:
            result["projection"] = {"fields": list(self.projection.fields)}
        return result

    def is_empty(self) -> bool:
        return self.filter is None and self.sort is None and self.projection is None


@dataclass(frozen=True)
class ContextMenuNode:
    """Which node(s) a context menu was opened for"""

    type: Literal["single", "multiple", "append"]
    path: NodePath
    paths: Tuple[NodePath, ...] = field(default_factory=tuple)
