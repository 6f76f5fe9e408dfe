"""
UI language selection

Language tags are normalised with the langcodes library (BCP-47), so
``pt-br``, ``PT-BR`` and ``pt-BR`` all select the same translation.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import langcodes

logger = logging.getLogger(__name__)

__all__ = [
    "BUILTIN_LANGUAGES",
    "DEFAULT_LANGUAGE",
    "normalize_language",
    "base_language",
    "available_languages",
    "resolve_language",
    "translation_table",
]

# Translations shipped with the editor itself
BUILTIN_LANGUAGES = ("en", "pt-BR", "zh-CN", "tr", "ja", "fr-FR")

DEFAULT_LANGUAGE = "en"


def normalize_language(tag: str) -> str:
    """
    Normalise a BCP-47 language tag

    Args:
        tag: Language tag ("en", "pt-br", "ZH-cn", ...)

    Returns:
        The standardised tag ("en", "pt-BR", "zh-CN", ...)

    Raises:
        ValueError: the tag is empty or not a well-formed language tag

    Examples:
        >>> normalize_language("pt-br")
        'pt-BR'
        >>> normalize_language("JA")
        'ja'
    """
    if not isinstance(tag, str) or not tag.strip():
        raise ValueError(f"Invalid language tag {tag!r}")
    try:
        normalized = langcodes.standardize_tag(tag.strip())
    except ValueError as exc:
        raise ValueError(f"Invalid language tag {tag!r}: {exc}") from exc
    if not langcodes.tag_is_valid(normalized):
        raise ValueError(f"Unknown language tag {tag!r}")
    return normalized


def base_language(tag: str) -> str:
    """Return the language subtag of ``tag`` ("pt-BR" -> "pt")."""
    return langcodes.Language.get(normalize_language(tag)).language


def _custom_tables(options: Mapping[str, Any]) -> Dict[str, Mapping[str, str]]:
    raw = options.get("languages") or {}
    tables: Dict[str, Mapping[str, str]] = {}
    for tag, table in raw.items():
        try:
            tables[normalize_language(tag)] = table
        except ValueError as exc:
            logger.warning("Ignoring translations for invalid language tag: %s", exc)
    return tables


def available_languages(options: Mapping[str, Any]) -> List[str]:
    """Built-in languages plus those provided through the ``languages`` option."""
    tags = list(BUILTIN_LANGUAGES)
    for tag in _custom_tables(options):
        if tag not in tags:
            tags.append(tag)
    return tags


def resolve_language(options: Mapping[str, Any], fallback: str = DEFAULT_LANGUAGE) -> str:
    """
    Pick the UI language for a configuration

    Exact matches win, then a translation sharing the base language
    ("pt-PT" -> "pt-BR"), then ``fallback``.
    """
    requested: Optional[str] = options.get("language")
    if requested is None:
        return fallback

    try:
        tag = normalize_language(requested)
    except ValueError as exc:
        logger.warning("%s; falling back to '%s'", exc, fallback)
        return fallback

    available = available_languages(options)
    if tag in available:
        return tag

    base = langcodes.Language.get(tag).language
    for candidate in available:
        if langcodes.Language.get(candidate).language == base:
            logger.debug("Language '%s' not available, using '%s'", tag, candidate)
            return candidate

    logger.warning("Unknown language '%s'; falling back to '%s'", tag, fallback)
    return fallback


def translation_table(options: Mapping[str, Any], language: str) -> Dict[str, str]:
    """Return a copy of the host supplied translations for ``language``."""
    tables = _custom_tables(options)
    return dict(tables.get(normalize_language(language), {}))
