"""Write built assets to disk."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from floe_assets.errors import FloeAssetError
from floe_assets.observability import get_logger

if TYPE_CHECKING:
    from floe_assets.assets import BaseAsset


class AssetWriter:
    """Dump assets below an output directory at their target path.

    Example:
        >>> writer = AssetWriter("web/")
        >>> writer.write_asset(asset)
        PosixPath('web/assetic/a1b2c3d.css')
    """

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def write_asset(self, asset: BaseAsset) -> Path:
        """Write the filtered content of ``asset``.

        Args:
            asset: Asset with a bound target path.

        Returns:
            Path of the written file.

        Raises:
            FloeAssetError: If the asset has no target path.
        """
        if not asset.target_path:
            raise FloeAssetError("Asset has no target path", details={"asset": repr(asset)})

        destination = self.directory / asset.target_path
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(asset.dump(), encoding="utf-8")

        get_logger().info("asset_written", path=str(destination))
        return destination
