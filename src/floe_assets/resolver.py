"""Resolve input descriptors into assets.

Dispatch order (first match wins):

1. ``@name``          -> AssetReference looked up in the asset manager
2. URL / ``//host``   -> HttpAsset
3. absolute path      -> owning root found among the candidate roots
   relative path      -> prefixed with the factory root
4. path contains ``*`` -> GlobAsset
5. otherwise          -> FileAsset

No I/O happens here; the returned assets load lazily.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from floe_assets.assets import AssetReference, FileAsset, GlobAsset, HttpAsset
from floe_assets.errors import AssetManagerMissingError, InvalidInputError
from floe_assets.observability import get_logger
from floe_assets.paths import (
    SEPARATORS,
    InputKind,
    classify,
    find_root_dir,
    relative_to_root,
)

if TYPE_CHECKING:
    import httpx

    from floe_assets.assets import BaseAsset
    from floe_assets.manager import ReferenceLookup


class AssetResolver:
    """Turn one input string into one asset.

    Args:
        root: Root directory relative paths are resolved against.
        asset_manager: Lookup for ``@name`` references, if configured.
        http_client: Optional httpx client handed to remote assets.

    Example:
        >>> resolver = AssetResolver("/site")
        >>> resolver.resolve("css/app.css")
        FileAsset('/site/css/app.css')
    """

    def __init__(
        self,
        root: str,
        *,
        asset_manager: ReferenceLookup | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.root = root
        self.asset_manager = asset_manager
        self.http_client = http_client

    def resolve(self, value: str, roots: str | Iterable[str] | None = None) -> BaseAsset:
        """Resolve an input descriptor.

        Args:
            value: Input descriptor.
            roots: Candidate roots owning absolute paths. Absolute paths
                outside every candidate keep no relative path.

        Returns:
            The asset for the input.

        Raises:
            InvalidInputError: If the input is empty or a bare ``@``.
            AssetManagerMissingError: For a reference without an asset manager.
            LookupFailedError: For a reference the asset manager does not know.
        """
        if not value:
            raise InvalidInputError("Input must not be empty", value=value)

        classified = classify(value)
        get_logger().debug("input_resolved", input=value, kind=classified.kind.value)

        if classified.kind is InputKind.REFERENCE:
            if not classified.value:
                raise InvalidInputError("Reference input has no name", value=value)
            return self.create_asset_reference(classified.value)

        if classified.kind is InputKind.REMOTE:
            return self.create_http_asset(value)

        root: str | None
        path: str | None
        if classified.kind is InputKind.ABSOLUTE_PATH:
            source = value
            root = find_root_dir(value, roots)
            path = relative_to_root(value, root) if root else None
        else:
            root = self.root
            path = value
            source = f"{self.root.rstrip(SEPARATORS)}/{value}"

        if "*" in source:
            return self.create_glob_asset(source, root)
        return self.create_file_asset(source, root, path)

    def create_asset_reference(self, name: str) -> AssetReference:
        if self.asset_manager is None:
            raise AssetManagerMissingError(name)
        # Unknown names fail here, not on first load.
        self.asset_manager.get(name)
        return AssetReference(self.asset_manager, name)

    def create_http_asset(self, url: str) -> HttpAsset:
        return HttpAsset(url, client=self.http_client)

    def create_glob_asset(self, pattern: str, base_dir: str | None = None) -> GlobAsset:
        return GlobAsset(pattern, base_dir)

    def create_file_asset(
        self,
        source: str,
        root: str | None = None,
        path: str | None = None,
    ) -> FileAsset:
        return FileAsset(source, root, path)
