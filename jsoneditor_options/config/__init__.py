"""Editor option defaults, resolution and shape validation."""

from .defaults import (
    DEFAULT_OPTIONS,
    Resolution,
    export_options,
    get_default_options,
    normalize_keys,
    resolve,
    resolve_checked,
)
from .schema import EditorOptions
from .validator import OptionIssue, OptionsValidator

__all__ = [
    "DEFAULT_OPTIONS",
    "Resolution",
    "export_options",
    "get_default_options",
    "normalize_keys",
    "resolve",
    "resolve_checked",
    "EditorOptions",
    "OptionIssue",
    "OptionsValidator",
]
