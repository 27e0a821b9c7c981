"""Attach named filters to an asset, honouring debug suppression.

A filter name prefixed with ``?`` is omitted while debug mode is on:

    >>> attach_filters(asset, ["cssrewrite", "?yui_css"], debug=True, registry=fm)
    ['cssrewrite']
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from floe_assets.errors import FilterManagerMissingError, InvalidInputError
from floe_assets.observability import get_logger

if TYPE_CHECKING:
    from floe_assets.assets import BaseAsset
    from floe_assets.filters import Filter, FilterLookup

DEBUG_SENTINEL = "?"


def parse_filter_name(name: str) -> tuple[str, bool]:
    """Split a filter name into its bare name and debug-only flag.

    Args:
        name: Filter name, optionally prefixed with ``?``.

    Returns:
        Tuple of (bare name, omitted-in-debug flag).

    Raises:
        InvalidInputError: If no name remains.
    """
    optional = name.startswith(DEBUG_SENTINEL)
    bare = name[1:] if optional else name
    if not bare:
        raise InvalidInputError("Filter name must not be empty", value=name)
    return bare, optional


def get_filter(name: str, registry: FilterLookup | None) -> Filter:
    """Resolve a bare filter name.

    Raises:
        FilterManagerMissingError: If no registry is configured.
        FilterNotFoundError: If the registry does not know the name.
    """
    if registry is None:
        raise FilterManagerMissingError(name)
    return registry.get(name)


def attach_filters(
    asset: BaseAsset,
    names: Sequence[str],
    *,
    debug: bool,
    registry: FilterLookup | None,
) -> list[str]:
    """Resolve filter names and ensure them on ``asset`` in order.

    Names are all validated before any filter is resolved. Attaching a
    filter object that is already present is a no-op.

    Args:
        asset: Asset receiving the filters.
        names: Filter names, optionally prefixed with ``?``.
        debug: Whether debug mode is active for this asset.
        registry: Filter lookup, if configured.

    Returns:
        Bare names of the filters that were applied, in order.
    """
    logger = get_logger()
    parsed = [parse_filter_name(name) for name in names]

    applied: list[str] = []
    for bare, optional in parsed:
        if optional and debug:
            logger.debug("filter_skipped", filter=bare, reason="debug")
            continue
        asset.ensure_filter(get_filter(bare, registry))
        applied.append(bare)
    return applied
