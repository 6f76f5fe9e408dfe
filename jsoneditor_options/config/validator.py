"""Shape validation for editor options.

Problems are returned as :class:`OptionIssue` values rather than raised, so a
host can log them and keep using the best-effort configuration.
"""

from __future__ import annotations

from collections.abc import (
    Callable as CallableABC,
    Mapping as MappingABC,
    MutableMapping as MutableMappingABC,
    Sequence as SequenceABC,
)
from dataclasses import dataclass
from types import UnionType
from typing import Any, Dict, List, Literal, Mapping, Union, get_args, get_origin, get_type_hints

from ..exceptions import OptionsValidationError
from ..fields import FieldRegistry
from ..languages import normalize_language
from .schema import EditorOptions

__all__ = ["OptionIssue", "OptionsValidator"]

_NON_NEGATIVE_FIELDS = ("indentation", "max_visible_childs")


@dataclass(frozen=True)
class OptionIssue:
    """Represents a single configuration-shape problem."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class OptionsValidator:
    """Validate editor options against the registry and the schema annotations."""

    _ROOT_SCHEMA = EditorOptions

    @classmethod
    def validate(cls, options: Mapping[str, Any]) -> List[OptionIssue]:
        """Validate an options mapping and return every issue found.

        Host aliases (``sortObjectKeys``) are accepted next to canonical names.
        """
        if not isinstance(options, MappingABC):
            return [
                OptionIssue(
                    path="<root>",
                    message="Expected a mapping for the editor options",
                )
            ]

        issues = cls.shadowed_aliases(options)
        shadowed = {issue.path for issue in issues}
        annotations = cls._collect_annotations(cls._ROOT_SCHEMA)

        for key in sorted(options.keys(), key=str):
            name = FieldRegistry.canonical_name(key) if isinstance(key, str) else None
            if name is None:
                issues.append(OptionIssue(path=str(key), message="Unknown option"))
                continue
            # None means unset, the same as an absent key
            if key in shadowed or options[key] is None:
                continue
            issues.extend(cls._validate_annotation(options[key], annotations[name], path=key))

        issues.extend(cls._check_cross_field(options))
        return issues

    @classmethod
    def shadowed_aliases(cls, options: Mapping[str, Any]) -> List[OptionIssue]:
        """Report host aliases given next to their canonical key."""
        issues: List[OptionIssue] = []
        for key in sorted(options.keys(), key=str):
            name = FieldRegistry.canonical_name(key) if isinstance(key, str) else None
            if name is not None and name != key and name in options:
                issues.append(
                    OptionIssue(
                        path=key,
                        message=f"Duplicate spelling of '{name}'; the canonical key takes precedence",
                    )
                )
        return issues

    @classmethod
    def validate_or_raise(cls, options: Mapping[str, Any]) -> None:
        """Validate the options and raise OptionsValidationError on failure."""
        issues = cls.validate(options)
        if issues:
            raise OptionsValidationError(issues)

    # Internal helpers -----------------------------------------------------

    @classmethod
    def _check_cross_field(cls, options: Mapping[str, Any]) -> List[OptionIssue]:
        issues: List[OptionIssue] = []
        mode = cls._lookup(options, "mode")
        modes = cls._lookup(options, "modes")

        if (
            mode is not None
            and isinstance(modes, SequenceABC)
            and not isinstance(modes, (str, bytes))
            and len(modes) > 0
            and mode not in modes
        ):
            allowed = ", ".join(str(item) for item in modes)
            issues.append(
                OptionIssue(
                    path="mode",
                    message=f"Mode {str(mode)!r} is not one of the configured modes ({allowed})",
                )
            )

        for name in _NON_NEGATIVE_FIELDS:
            value = cls._lookup(options, name)
            if isinstance(value, int) and not isinstance(value, bool) and value < 0:
                issues.append(OptionIssue(path=name, message=f"Expected a non-negative integer, got {value}"))

        language = cls._lookup(options, "language")
        if isinstance(language, str):
            try:
                normalize_language(language)
            except ValueError as exc:
                issues.append(OptionIssue(path="language", message=str(exc)))

        return issues

    @staticmethod
    def _lookup(options: Mapping[str, Any], name: str) -> Any:
        if name in options:
            return options[name]
        info = FieldRegistry.get(name)
        if info is not None:
            return options.get(info.alias)
        return None

    @classmethod
    def _validate_annotation(cls, value: Any, annotation: Any, path: str) -> List[OptionIssue]:
        if annotation is Any:
            return []

        if not cls._matches_type(value, annotation):
            expected = cls._describe_annotation(annotation)
            actual = type(value).__name__
            return [
                OptionIssue(
                    path=path or "<root>",
                    message=f"Expected {expected}, got {actual}",
                )
            ]

        return cls._descend(value, annotation, path)

    @classmethod
    def _descend(cls, value: Any, annotation: Any, path: str) -> List[OptionIssue]:
        origin = get_origin(annotation)

        if cls._is_union(annotation):
            for option in get_args(annotation):
                if cls._matches_type(value, option):
                    return cls._descend(value, option, path)
            return []

        if origin is Literal:
            return []

        if origin in cls._SEQUENCE_ORIGINS:
            type_args = get_args(annotation)
            if not type_args:
                return []
            element_annotation = type_args[0]
            issues: List[OptionIssue] = []
            for index, item in enumerate(value):
                element_path = f"{path}[{index}]"
                issues.extend(cls._validate_annotation(item, element_annotation, element_path))
            return issues

        if origin in cls._MAPPING_ORIGINS:
            key_annotation, value_annotation = cls._mapping_args(annotation)
            issues = []

            if key_annotation is not Any:
                for key in value.keys():
                    if not cls._matches_type(key, key_annotation):
                        expected = cls._describe_annotation(key_annotation)
                        issues.append(
                            OptionIssue(
                                path=path or "<root>",
                                message=f"Invalid key '{key}' (expected {expected})",
                            )
                        )

            if value_annotation is not Any:
                for key, item in value.items():
                    item_path = cls._join(path, str(key))
                    issues.extend(cls._validate_annotation(item, value_annotation, item_path))

            return issues

        return []

    @classmethod
    def _matches_type(cls, value: Any, annotation: Any) -> bool:
        if annotation is Any:
            return True

        if annotation is type(None):
            return value is None

        if cls._is_union(annotation):
            return any(cls._matches_type(value, option) for option in get_args(annotation))

        origin = get_origin(annotation)

        if origin is Literal:
            return value in get_args(annotation)

        if origin is CallableABC:
            return callable(value)

        if origin in cls._SEQUENCE_ORIGINS:
            return isinstance(value, SequenceABC) and not isinstance(value, (str, bytes, bytearray))

        if origin in cls._MAPPING_ORIGINS:
            return isinstance(value, MappingABC)

        if isinstance(annotation, type):
            if annotation is float:
                return isinstance(value, (int, float)) and not isinstance(value, bool)
            if annotation is int:
                return isinstance(value, int) and not isinstance(value, bool)
            return isinstance(value, annotation)

        return True

    @staticmethod
    def _collect_annotations(schema: type) -> Dict[str, Any]:
        return get_type_hints(schema)

    @staticmethod
    def _join(path: str, key: str) -> str:
        return key if not path else f"{path}.{key}"

    @classmethod
    def _is_union(cls, annotation: Any) -> bool:
        origin = get_origin(annotation)
        if origin is None:
            return False
        return origin is Union or origin is UnionType

    @classmethod
    def _mapping_args(cls, annotation: Any) -> tuple[Any, Any]:
        args = get_args(annotation)
        if len(args) == 2:
            return args[0], args[1]
        return Any, Any

    @classmethod
    def _describe_annotation(cls, annotation: Any) -> str:
        if annotation is Any:
            return "any type"
        if annotation is type(None):
            return "None"
        if cls._is_union(annotation):
            options = " | ".join(cls._describe_annotation(opt) for opt in get_args(annotation))
            return f"({options})"
        origin = get_origin(annotation)
        if origin is Literal:
            values = ", ".join(repr(arg) for arg in get_args(annotation))
            return f"literal ({values})"
        if origin is CallableABC:
            return "callable"
        if origin in cls._SEQUENCE_ORIGINS:
            args = get_args(annotation)
            if args:
                return f"sequence of {cls._describe_annotation(args[0])}"
            return "sequence"
        if origin in cls._MAPPING_ORIGINS:
            key_ann, value_ann = cls._mapping_args(annotation)
            return f"mapping[{cls._describe_annotation(key_ann)} -> {cls._describe_annotation(value_ann)}]"
        if isinstance(annotation, type):
            return annotation.__name__
        return str(annotation)

    _SEQUENCE_ORIGINS = {
        list,
        tuple,
        SequenceABC,
    }

    _MAPPING_ORIGINS = {
        dict,
        MappingABC,
        MutableMappingABC,
    }
