"""
Custom query hooks

``create_query`` and ``execute_query`` replace the engine's built-in query
language together. A half-configured pair is only reported when a query is
actually run.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .editor_types import QueryOptions
from .exceptions import QueryConfigurationError

logger = logging.getLogger(__name__)

__all__ = ["has_custom_query", "build_query", "execute_query"]


def has_custom_query(options: Mapping[str, Any]) -> bool:
    """True when at least one of the query hooks is set."""
    return options.get("create_query") is not None or options.get("execute_query") is not None


def _check_pair(options: Mapping[str, Any]) -> bool:
    create = options.get("create_query")
    execute = options.get("execute_query")
    if create is None and execute is None:
        return False
    if create is None:
        raise QueryConfigurationError("create_query")
    if execute is None:
        raise QueryConfigurationError("execute_query")
    return True


def build_query(
    options: Mapping[str, Any],
    json: Any,
    query_options: Union[QueryOptions, Mapping[str, Any]],
) -> Optional[str]:
    """
    Build a query string with the host's ``create_query``

    Returns:
        The query, or None when the built-in query language should be used

    Raises:
        QueryConfigurationError: only one of the two hooks is configured
    """
    if not _check_pair(options):
        return None
    if not isinstance(query_options, QueryOptions):
        query_options = QueryOptions.from_dict(query_options)
    query = options["create_query"](json, query_options)
    logger.debug("Custom query built: %s", query)
    return query


def execute_query(options: Mapping[str, Any], json: Any, query: str) -> Optional[Any]:
    """
    Run ``query`` with the host's ``execute_query``

    Returns:
        The transformed document, or None when the built-in query language
        should be used

    Raises:
        QueryConfigurationError: only one of the two hooks is configured
    """
    if not _check_pair(options):
        return None
    return options["execute_query"](json, query)
