"""Context menu items and the on_create_menu hook."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Set, Tuple, Union

from .editor_types import ContextMenuNode

logger = logging.getLogger(__name__)

__all__ = [
    "SeparatorItem",
    "ButtonItem",
    "ContextMenuItem",
    "menu_from_dicts",
    "menu_to_dicts",
    "iter_menu",
    "apply_create_menu",
]


@dataclass(frozen=True)
class SeparatorItem:
    """Horizontal rule between groups of buttons"""

    type: str = field(default="separator", init=False)


@dataclass(eq=False)
class ButtonItem:
    """
    Clickable entry, optionally opening a submenu

    Items compare by identity so a menu tree can be walked with a visited set.
    """

    text: str
    class_name: str = ""
    title: Optional[str] = None
    submenu_title: Optional[str] = None
    submenu: Optional[List["ContextMenuItem"]] = None
    click: Optional[Callable[[], None]] = None


ContextMenuItem = Union[SeparatorItem, ButtonItem]


def menu_from_dicts(items: Sequence[Mapping[str, Any]]) -> List[ContextMenuItem]:
    """
    Convert menu items in the host shape into typed items

    Separators are ``{"type": "separator"}``; buttons carry ``text`` and
    optionally ``className``, ``title``, ``submenuTitle``, ``submenu`` and
    ``click``. A button that appears inside its own submenu chain is skipped
    (with a warning).

    Raises:
        ValueError: an entry is neither a separator nor a button
    """
    return _from_dicts(items, set())


def _from_dicts(items: Sequence[Mapping[str, Any]], branch: Set[int]) -> List[ContextMenuItem]:
    result: List[ContextMenuItem] = []
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise ValueError(f"Context menu item {index} is not a mapping: {item!r}")
        if item.get("type") == "separator":
            result.append(SeparatorItem())
            continue
        if "text" not in item:
            raise ValueError(f"Context menu item {index} has neither type 'separator' nor 'text'")
        if id(item) in branch:
            logger.warning("Skipping context menu item '%s': it contains itself", item["text"])
            continue
        submenu = item.get("submenu")
        if submenu is not None:
            branch.add(id(item))
            submenu = _from_dicts(submenu, branch)
            branch.discard(id(item))
        result.append(
            ButtonItem(
                text=item["text"],
                class_name=item.get("className", ""),
                title=item.get("title"),
                submenu_title=item.get("submenuTitle"),
                submenu=submenu,
                click=item.get("click"),
            )
        )
    return result


def menu_to_dicts(items: Sequence[ContextMenuItem]) -> List[Dict[str, Any]]:
    """Inverse of :func:`menu_from_dicts`; unset optional keys are omitted."""
    return _to_dicts(items, set())


def _to_dicts(items: Sequence[ContextMenuItem], branch: Set[int]) -> List[Dict[str, Any]]:
    result: List[Dict[str, Any]] = []
    for item in items:
        if isinstance(item, SeparatorItem):
            result.append({"type": "separator"})
        elif isinstance(item, ButtonItem):
            if id(item) in branch:
                logger.warning("Skipping context menu item '%s': it contains itself", item.text)
                continue
            data: Dict[str, Any] = {"text": item.text, "className": item.class_name}
            if item.title is not None:
                data["title"] = item.title
            if item.submenu_title is not None:
                data["submenuTitle"] = item.submenu_title
            if item.submenu is not None:
                branch.add(id(item))
                data["submenu"] = _to_dicts(item.submenu, branch)
                branch.discard(id(item))
            if item.click is not None:
                data["click"] = item.click
            result.append(data)
        else:
            raise TypeError(f"Unsupported context menu item: {item!r}")
    return result


def iter_menu(items: Sequence[ContextMenuItem]) -> Iterator[Tuple[int, ContextMenuItem]]:
    """
    Walk a menu depth-first, yielding ``(depth, item)``

    A button that appears inside its own submenu chain is skipped (with a
    warning) instead of recursing forever.
    """
    yield from _walk(items, 0, set())


def _walk(items: Sequence[ContextMenuItem], depth: int, branch: Set[int]) -> Iterator[Tuple[int, ContextMenuItem]]:
    for item in items:
        if isinstance(item, ButtonItem) and id(item) in branch:
            logger.warning("Skipping context menu item '%s': it contains itself", item.text)
            continue
        yield depth, item
        if isinstance(item, ButtonItem) and item.submenu:
            branch.add(id(item))
            yield from _walk(item.submenu, depth + 1, branch)
            branch.discard(id(item))


def apply_create_menu(
    on_create_menu: Optional[Callable[..., Optional[List[Any]]]],
    items: List[Any],
    node: ContextMenuNode,
) -> List[Any]:
    """
    Let ``on_create_menu`` customise a context menu

    The hook may edit ``items`` in place and return nothing, or return a
    replacement list.
    """
    if on_create_menu is None:
        return items
    replacement = on_create_menu(items, node)
    if replacement is None:
        return items
    return replacement
