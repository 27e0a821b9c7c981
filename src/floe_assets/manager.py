"""Asset manager: a registry of named assets for ``@name`` references."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from floe_assets.errors import AssetNotFoundError
from floe_assets.filters import validate_name

if TYPE_CHECKING:
    from floe_assets.assets import BaseAsset


@runtime_checkable
class ReferenceLookup(Protocol):
    """Resolves reference names to assets."""

    def get(self, name: str) -> BaseAsset:
        """Return the asset registered under ``name``.

        Raises:
            AssetNotFoundError: If the name is not registered.
        """
        ...


class AssetManager:
    """Registry of named assets.

    Example:
        >>> am = AssetManager()
        >>> am.set("jquery", HttpAsset("//code.jquery.com/jquery.js"))
        >>> am.has("jquery")
        True
    """

    def __init__(self) -> None:
        self._assets: dict[str, BaseAsset] = {}

    def set(self, name: str, asset: BaseAsset) -> None:
        """Register an asset, replacing any earlier registration.

        Raises:
            ValueError: If the name is invalid.
        """
        self._assets[validate_name(name, "asset")] = asset

    def get(self, name: str) -> BaseAsset:
        """Return the asset registered under ``name``.

        Raises:
            AssetNotFoundError: If the name is not registered.
        """
        try:
            return self._assets[name]
        except KeyError:
            raise AssetNotFoundError(name) from None

    def has(self, name: str) -> bool:
        return name in self._assets

    def names(self) -> list[str]:
        return list(self._assets)

    def clear(self) -> None:
        self._assets.clear()
