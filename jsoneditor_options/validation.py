"""
Custom validation round trip

Runs the host's ``on_validate`` hook (synchronous or awaitable) and reports
the aggregate errors to ``on_validation_error`` when they change.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, List, Mapping, Optional, Sequence

from .editor_types import ValidationError

logger = logging.getLogger(__name__)

__all__ = ["ValidationRunner", "run_validation"]


class ValidationRunner:
    """
    Validation state of one editor instance

    Every call to :meth:`run` supersedes the ones started before it: if an
    earlier run resolves after a later one started, its result is dropped.

    Args:
        options: Resolved editor options (hooks are looked up on every run,
            so a host may swap them between runs)

    Usage:
        runner = ValidationRunner(options)
        errors = await runner.run(document)
    """

    def __init__(self, options: Mapping[str, Any]):
        self.options = options
        self._generation = 0
        self._last_reported: Optional[List[Any]] = None
        self._last_keys: Optional[List[Any]] = None

    @property
    def last_errors(self) -> Optional[List[Any]]:
        """Errors most recently passed to on_validation_error"""
        return self._last_reported

    async def run(self, document: Any, extra_errors: Sequence[Any] = ()) -> Optional[List[Any]]:
        """
        Validate ``document``

        Args:
            document: The parsed document
            extra_errors: Parse / schema errors found by the engine itself;
                they come before the custom errors

        Returns:
            The aggregate error list, or None when a later run superseded this one
        """
        self._generation += 1
        generation = self._generation

        custom = await self._custom_errors(document)
        if generation != self._generation:
            logger.debug("Dropping validation result %d superseded by %d", generation, self._generation)
            return None

        if extra_errors:
            errors = list(extra_errors) + list(custom)
        else:
            errors = custom

        self._report(errors)
        return errors

    async def _custom_errors(self, document: Any) -> List[Any]:
        on_validate = self.options.get("on_validate")
        if on_validate is None:
            return []

        result = on_validate(document)
        if inspect.isawaitable(result):
            result = await result
        if result is None:
            return []
        if isinstance(result, list):
            return result
        return list(result)

    def _report(self, errors: List[Any]) -> None:
        # hosts may refill one list in place, so compare against a snapshot
        keys = [_error_key(error) for error in errors]
        previous = self._last_keys
        # nothing to report before the first error ever appeared
        if previous is None and not keys:
            return
        if previous == keys:
            return

        self._last_keys = keys
        self._last_reported = errors
        on_validation_error = self.options.get("on_validation_error")
        if on_validation_error is not None:
            on_validation_error(errors)


def _error_key(error: Any) -> Any:
    if isinstance(error, ValidationError):
        return (tuple(error.path), error.message)
    if isinstance(error, Mapping):
        return (tuple(error.get("path") or ()), error.get("message"))
    return error


def run_validation(options: Mapping[str, Any], document: Any) -> List[Any]:
    """Validate once from synchronous code."""
    return asyncio.run(ValidationRunner(options).run(document)) or []
