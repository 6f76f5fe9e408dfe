"""Default editor options and the resolution of partial configurations."""

from __future__ import annotations

import logging
from collections.abc import Mapping as MappingABC
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..fields import FieldRegistry
from .validator import OptionIssue, OptionsValidator

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_OPTIONS",
    "Resolution",
    "get_default_options",
    "normalize_keys",
    "resolve",
    "resolve_checked",
    "export_options",
]

# NOTE:
# Only the fields listed here carry a default. Every other option is left
# unset so that the rendering engine applies its own fallback (or disables the
# feature entirely).
DEFAULT_OPTIONS: Dict[str, Any] = {
    "escape_unicode": False,
    "sort_object_keys": False,
    "history": True,
    "mode": "tree",
    "search": True,
    "indentation": 2,
    "main_menu_bar": True,
    "navigation_bar": True,
    "status_bar": True,
    "color_picker": True,
    "enable_sort": True,
    "enable_transform": True,
    "max_visible_childs": 100,
    "expand_all": False,
}


@dataclass
class Resolution:
    """Best-effort options plus every configuration-shape issue found."""

    options: Dict[str, Any]
    issues: List[OptionIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


def get_default_options() -> Dict[str, Any]:
    """Return a deep copy of the default options."""
    return deepcopy(DEFAULT_OPTIONS)


def normalize_keys(partial: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Rename host aliases (``sortObjectKeys``) to canonical names.

    When both spellings are present the canonical key wins. Unknown keys are
    kept as they are; values are never copied.
    """
    if partial is None:
        return {}

    normalized: Dict[str, Any] = {}
    for key, value in partial.items():
        name = FieldRegistry.canonical_name(key) if isinstance(key, str) else None
        if name is None:
            normalized[key] = value
        elif name == key or name not in partial:
            normalized[name] = value
        else:
            logger.debug("Ignoring alias '%s' shadowed by canonical key '%s'", key, name)
    return normalized


def resolve(partial: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Fill in defaults for every default-bearing option that is absent or None.

    Supplied values are kept as-is (same object, no deep merge), so an object
    valued option such as ``schema`` is always replaced wholesale.

    Args:
        partial: Options supplied by the host (can be None).

    Returns:
        A new dictionary with canonical keys.
    """
    resolved = normalize_keys(partial)
    for name, default in DEFAULT_OPTIONS.items():
        if resolved.get(name) is None:
            resolved[name] = default
    return resolved


def resolve_checked(partial: Optional[Mapping[str, Any]]) -> Resolution:
    """Resolve ``partial`` and report shape issues instead of raising."""
    issues: List[OptionIssue] = []
    if partial is not None and not isinstance(partial, MappingABC):
        issues.append(OptionIssue(path="<root>", message="Expected a mapping for the editor options"))
        partial = None
    elif partial is not None:
        # shadowed aliases disappear during normalisation
        issues.extend(OptionsValidator.shadowed_aliases(partial))

    options = resolve(partial)
    issues.extend(OptionsValidator.validate(options))

    for issue in issues:
        logger.debug("Editor option issue: %s", issue)
    return Resolution(options=options, issues=issues)


def export_options(options: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Convert options to host alias keys for a JavaScript engine.

    Unset (None) values are dropped; unknown keys are passed through.
    """
    exported: Dict[str, Any] = {}
    for key, value in options.items():
        if value is None:
            continue
        info = FieldRegistry.get(key) if isinstance(key, str) else None
        exported[info.alias if info is not None else key] = value
    return exported
