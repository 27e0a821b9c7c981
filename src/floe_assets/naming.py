"""Deterministic asset names for output path interpolation."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Sequence

NAME_LENGTH = 7


def generate_asset_name(
    inputs: Sequence[str],
    filters: Sequence[str],
    *,
    length: int = NAME_LENGTH,
) -> str:
    """Generate a short, deterministic name for an asset.

    The name is a truncated SHA-1 of the JSON serialization of the inputs
    followed by the filters, so it depends only on the arguments and their
    order. Both sequences are concatenated into one flat list first, so
    moving a trailing input into the filters (or the reverse) yields the
    same name. It is a cache-busting identifier, not a security token.

    Args:
        inputs: Input descriptors, in order.
        filters: Filter names, in order.
        length: Number of hex characters to keep.

    Returns:
        Lowercase hex string of ``length`` characters.

    Example:
        >>> generate_asset_name(["a.css", "b.css"], ["?minify"]) == generate_asset_name(
        ...     ["a.css", "b.css"], ["?minify"]
        ... )
        True
    """
    payload = json.dumps([*inputs, *filters], separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha1(payload.encode("utf-8"), usedforsecurity=False).hexdigest()[:length]
