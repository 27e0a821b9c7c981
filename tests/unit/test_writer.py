"""Unit tests for AssetWriter."""

from __future__ import annotations

from pathlib import Path

import pytest

from floe_assets.assets import AssetCollection, FileAsset
from floe_assets.errors import FloeAssetError
from floe_assets.filters import CallableFilter
from floe_assets.writer import AssetWriter


class TestAssetWriter:
    """Tests for AssetWriter.write_asset."""

    def test_writes_filtered_content(
        self, site_dir: Path, tmp_path_factory: pytest.TempPathFactory, upper_filter: CallableFilter
    ) -> None:
        """Test the dumped content lands at directory/target_path."""
        out_dir = tmp_path_factory.mktemp("web")
        asset = AssetCollection([FileAsset(str(site_dir / "app.js"))])
        asset.ensure_filter(upper_filter)
        asset.set_target_path("js/deep/app.js")

        written = AssetWriter(out_dir).write_asset(asset)

        assert written == out_dir / "js" / "deep" / "app.js"
        assert written.read_text(encoding="utf-8") == "VAR APP = 1;"

    def test_overwrites_existing(self, site_dir: Path, tmp_path: Path) -> None:
        """Test writing twice replaces the file."""
        (tmp_path / "out").mkdir()
        (tmp_path / "out" / "app.js").write_text("stale", encoding="utf-8")
        asset = AssetCollection([FileAsset(str(site_dir / "app.js"))])
        asset.set_target_path("out/app.js")

        AssetWriter(tmp_path).write_asset(asset)

        assert (tmp_path / "out" / "app.js").read_text(encoding="utf-8") == "var app = 1;"

    def test_requires_target_path(self, tmp_path: Path) -> None:
        """Test assets without a target path cannot be written."""
        with pytest.raises(FloeAssetError, match="no target path"):
            AssetWriter(tmp_path).write_asset(AssetCollection())
