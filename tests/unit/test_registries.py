"""Unit tests for the asset and filter registries, filters and workers."""

from __future__ import annotations

import pytest

from floe_assets.assets import AssetCollection, FileAsset
from floe_assets.errors import AssetNotFoundError, FilterNotFoundError
from floe_assets.filters import CallableFilter, Filter, FilterLookup, FilterManager
from floe_assets.manager import AssetManager, ReferenceLookup
from floe_assets.workers import EnsureFilterWorker, Worker


class TestFilterManager:
    """Tests for FilterManager."""

    def test_set_and_get(self, minify_filter: CallableFilter) -> None:
        """Test registered filters are returned by name."""
        fm = FilterManager()
        fm.set("minify", minify_filter)

        assert fm.get("minify") is minify_filter
        assert fm.has("minify") is True
        assert fm.names() == ["minify"]

    def test_get_unknown(self) -> None:
        """Test unknown names raise FilterNotFoundError."""
        with pytest.raises(FilterNotFoundError) as exc_info:
            FilterManager().get("gzip")

        assert "gzip" in str(exc_info.value)

    def test_set_replaces(self, minify_filter: CallableFilter, upper_filter: CallableFilter) -> None:
        """Test registering a name twice replaces the filter."""
        fm = FilterManager()
        fm.set("f", minify_filter)
        fm.set("f", upper_filter)

        assert fm.get("f") is upper_filter

    @pytest.mark.parametrize("name", ["", "?minify", "yui-css", "9lives", "a b"])
    def test_invalid_names(self, name: str, minify_filter: CallableFilter) -> None:
        """Test names must be identifiers."""
        with pytest.raises(ValueError, match="Invalid filter name"):
            FilterManager().set(name, minify_filter)

    def test_clear(self, minify_filter: CallableFilter) -> None:
        """Test clear removes every filter."""
        fm = FilterManager()
        fm.set("minify", minify_filter)

        fm.clear()

        assert fm.has("minify") is False

    def test_satisfies_lookup_protocol(self) -> None:
        """Test FilterManager is a FilterLookup."""
        assert isinstance(FilterManager(), FilterLookup)

    def test_get_only_registry_is_a_lookup(self) -> None:
        """Test get() alone satisfies FilterLookup."""

        class GetOnlyRegistry:
            def get(self, name: str) -> CallableFilter:
                return CallableFilter(str.upper, name=name)

        assert isinstance(GetOnlyRegistry(), FilterLookup)


class TestAssetManager:
    """Tests for AssetManager."""

    def test_set_and_get(self) -> None:
        """Test registered assets are returned by name."""
        am = AssetManager()
        asset = FileAsset("/vendor/jquery.js")
        am.set("jquery", asset)

        assert am.get("jquery") is asset
        assert am.has("jquery") is True
        assert am.names() == ["jquery"]

    def test_get_unknown(self) -> None:
        """Test unknown names raise AssetNotFoundError."""
        with pytest.raises(AssetNotFoundError):
            AssetManager().get("jquery")

    def test_invalid_name(self) -> None:
        """Test names must be identifiers."""
        with pytest.raises(ValueError, match="Invalid asset name"):
            AssetManager().set("@jquery", FileAsset("/vendor/jquery.js"))

    def test_clear(self) -> None:
        """Test clear removes every asset."""
        am = AssetManager()
        am.set("jquery", FileAsset("/vendor/jquery.js"))

        am.clear()

        assert am.names() == []

    def test_satisfies_lookup_protocol(self) -> None:
        """Test AssetManager is a ReferenceLookup."""
        assert isinstance(AssetManager(), ReferenceLookup)

    def test_get_only_registry_is_a_lookup(self) -> None:
        """Test get() alone satisfies ReferenceLookup."""

        class GetOnlyRegistry:
            def get(self, name: str) -> FileAsset:
                return FileAsset(f"/vendor/{name}.js")

        assert isinstance(GetOnlyRegistry(), ReferenceLookup)


class TestCallableFilter:
    """Tests for CallableFilter."""

    def test_apply(self) -> None:
        """Test the wrapped callable transforms content."""
        assert CallableFilter(str.strip).apply("  x  ") == "x"

    def test_name_defaults_to_callable_name(self) -> None:
        """Test the filter is named after the callable."""
        assert CallableFilter(str.strip).name == "strip"
        assert CallableFilter(str.strip, name="trim").name == "trim"

    def test_satisfies_filter_protocol(self) -> None:
        """Test CallableFilter is a Filter."""
        assert isinstance(CallableFilter(str.strip), Filter)


class TestEnsureFilterWorker:
    """Tests for EnsureFilterWorker."""

    def test_matching_target_path(self, upper_filter: CallableFilter) -> None:
        """Test the filter is ensured on matching assets."""
        asset = AssetCollection()
        asset.set_target_path("css/site.css")

        EnsureFilterWorker(r"\.css$", upper_filter).process(asset)

        assert asset.filters == [upper_filter]

    def test_non_matching_target_path(self, upper_filter: CallableFilter) -> None:
        """Test other assets are left alone."""
        asset = AssetCollection()
        asset.set_target_path("js/site.js")

        EnsureFilterWorker(r"\.css$", upper_filter).process(asset)

        assert asset.filters == []

    def test_unbound_target_path(self, upper_filter: CallableFilter) -> None:
        """Test assets without a target path are left alone."""
        asset = AssetCollection()

        EnsureFilterWorker(".*", upper_filter).process(asset)

        assert asset.filters == []

    def test_satisfies_worker_protocol(self, upper_filter: CallableFilter) -> None:
        """Test EnsureFilterWorker is a Worker."""
        assert isinstance(EnsureFilterWorker(".*", upper_filter), Worker)
