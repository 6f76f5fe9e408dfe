"""
Mode applicability lookups

Which options have an observable effect in which editor mode. The table is
advisory: nothing here rejects or strips an inapplicable option, an engine
consults it to decide whether to honour a value.
"""

from __future__ import annotations

from typing import Any, FrozenSet, List, Mapping, Optional, Set, Union

from .editor_types import EditorMode
from .fields import FieldRegistry

__all__ = [
    "is_applicable",
    "modes_for",
    "applicable_fields",
    "inert_fields",
]

ModeLike = Union[EditorMode, str]


def _to_mode(mode: ModeLike) -> Optional[EditorMode]:
    try:
        return EditorMode.parse(mode)
    except ValueError:
        return None


def modes_for(field: str) -> FrozenSet[EditorMode]:
    """Modes in which ``field`` (canonical name or alias) is honoured; empty when unknown."""
    info = FieldRegistry.get(field)
    if info is None:
        return frozenset()
    return info.modes


def is_applicable(field: str, mode: ModeLike) -> bool:
    """
    Whether ``field`` has an observable effect under ``mode``

    Unknown fields and unknown modes are never applicable.

    Examples:
        >>> is_applicable("ace", "code")
        True
        >>> is_applicable("ace", "tree")
        False
    """
    editor_mode = _to_mode(mode)
    if editor_mode is None:
        return False
    return editor_mode in modes_for(field)


def applicable_fields(mode: ModeLike) -> List[str]:
    """Sorted canonical names of every option honoured in ``mode``."""
    editor_mode = _to_mode(mode)
    if editor_mode is None:
        return []
    return sorted(
        name for name, info in FieldRegistry.get_all().items() if editor_mode in info.modes
    )


def inert_fields(options: Mapping[str, Any], mode: Optional[ModeLike] = None) -> Set[str]:
    """
    Options that are set but have no effect under the active mode

    Args:
        options: Resolved or partial options (canonical names or aliases).
        mode: Mode to check against; defaults to the ``mode`` option, then "tree".

    Returns:
        Canonical names of set (non-None) options that the mode ignores.
    """
    if mode is None:
        mode = options.get("mode") or "tree"

    inert: Set[str] = set()
    for key, value in options.items():
        if value is None or not isinstance(key, str):
            continue
        name = FieldRegistry.canonical_name(key)
        if name is not None and not is_applicable(name, mode):
            inert.add(name)
    return inert
