"""Filter protocol and the filter manager registry.

Filters are opaque content transformations. The factory never runs them;
it only resolves names to filter objects and attaches them to assets in
order. Assets apply their filters when dumped.

Example:
    >>> fm = FilterManager()
    >>> fm.set("upper", CallableFilter(str.upper))
    >>> fm.get("upper").apply("a { }")
    'A { }'
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from floe_assets.errors import FilterNotFoundError

NAME_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


def validate_name(name: str, kind: str) -> str:
    """Validate a registry name.

    Args:
        name: Name to register.
        kind: Registry kind used in the error message ("asset", "filter").

    Returns:
        The name, unchanged.

    Raises:
        ValueError: If the name is not a valid identifier.
    """
    if not NAME_PATTERN.match(name):
        msg = f"Invalid {kind} name: '{name}'. Names must match {NAME_PATTERN.pattern}"
        raise ValueError(msg)
    return name


@runtime_checkable
class Filter(Protocol):
    """A content transformation attached to an asset."""

    def apply(self, content: str) -> str:
        """Transform asset content.

        Args:
            content: Content produced by the asset or the previous filter.

        Returns:
            Transformed content.
        """
        ...


@runtime_checkable
class FilterLookup(Protocol):
    """Resolves filter names to filter objects."""

    def get(self, name: str) -> Filter:
        """Return the filter registered under ``name``.

        Raises:
            FilterNotFoundError: If the name is not registered.
        """
        ...


class CallableFilter:
    """Adapt a ``str -> str`` callable to the Filter protocol.

    Example:
        >>> strip = CallableFilter(str.strip, name="strip")
        >>> strip.apply("  body {}  ")
        'body {}'
    """

    def __init__(self, func: Callable[[str], str], *, name: str | None = None) -> None:
        self._func = func
        self.name = name or getattr(func, "__name__", type(func).__name__)

    def apply(self, content: str) -> str:
        return self._func(content)

    def __repr__(self) -> str:
        return f"CallableFilter({self.name!r})"


class FilterManager:
    """Registry of named filters.

    Registering a name twice replaces the earlier filter.
    """

    def __init__(self) -> None:
        self._filters: dict[str, Filter] = {}

    def set(self, name: str, filter_: Filter) -> None:
        """Register a filter.

        Args:
            name: Identifier-style filter name.
            filter_: Filter object.

        Raises:
            ValueError: If the name is invalid.
        """
        self._filters[validate_name(name, "filter")] = filter_

    def get(self, name: str) -> Filter:
        """Return the filter registered under ``name``.

        Raises:
            FilterNotFoundError: If the name is not registered.
        """
        try:
            return self._filters[name]
        except KeyError:
            raise FilterNotFoundError(name) from None

    def has(self, name: str) -> bool:
        return name in self._filters

    def names(self) -> list[str]:
        """Registered filter names, in registration order."""
        return list(self._filters)

    def clear(self) -> None:
        self._filters.clear()
