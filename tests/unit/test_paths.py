"""Unit tests for input classification and root directory helpers."""

from __future__ import annotations

import pytest

from floe_assets.paths import (
    InputKind,
    classify,
    find_root_dir,
    is_absolute_path,
    normalize_root,
    relative_to_root,
)


class TestIsAbsolutePath:
    """Tests for is_absolute_path."""

    @pytest.mark.parametrize(
        "path",
        ["/var/www/app.css", "\\share\\app.css", "C:\\app.css", "c:/app.css", "/"],
    )
    def test_absolute(self, path: str) -> None:
        """Test unix, backslash and drive-letter paths are absolute."""
        assert is_absolute_path(path) is True

    @pytest.mark.parametrize("path", ["app.css", "css/app.css", "C:", "C:/", "1:/app.css", ""])
    def test_relative(self, path: str) -> None:
        """Test relative, too-short drive and non-alpha drive paths are relative."""
        assert is_absolute_path(path) is False


class TestClassify:
    """Tests for classify."""

    def test_reference_strips_sentinel(self) -> None:
        """Test @name classifies as a reference with the sentinel removed."""
        result = classify("@jquery")

        assert result.kind is InputKind.REFERENCE
        assert result.value == "jquery"

    def test_reference_checked_before_url(self) -> None:
        """Test a leading @ wins over an embedded URL."""
        assert classify("@http://cdn/x.js").kind is InputKind.REFERENCE

    @pytest.mark.parametrize(
        "value",
        ["http://cdn/x.js", "https://cdn.example.com/a.css", "//cdn/x.js", "file:///site/a.css"],
    )
    def test_remote(self, value: str) -> None:
        """Test absolute and protocol-relative URLs classify as remote."""
        result = classify(value)

        assert result.kind is InputKind.REMOTE
        assert result.value == value

    def test_remote_checked_before_absolute_path(self) -> None:
        """Test a string that is both a URL and an absolute path is remote."""
        assert is_absolute_path("/proxy/http://cdn/x.js") is True
        assert classify("/proxy/http://cdn/x.js").kind is InputKind.REMOTE

    def test_absolute_path(self) -> None:
        """Test absolute paths classify as absolute."""
        assert classify("/var/www/app.css").kind is InputKind.ABSOLUTE_PATH
        assert classify("C:\\app.css").kind is InputKind.ABSOLUTE_PATH

    def test_relative_path(self) -> None:
        """Test everything else classifies as relative."""
        assert classify("app.css").kind is InputKind.RELATIVE_PATH

    def test_empty_string_is_relative(self) -> None:
        """Test classification is total over the empty string."""
        result = classify("")

        assert result.kind is InputKind.RELATIVE_PATH
        assert result.value == ""

    def test_is_glob(self) -> None:
        """Test the glob flag follows the wildcard."""
        assert classify("css/*.css").is_glob is True
        assert classify("css/app.css").is_glob is False


class TestFindRootDir:
    """Tests for find_root_dir."""

    def test_path_under_root(self) -> None:
        """Test a path under the root returns the root."""
        assert find_root_dir("/site/css/app.css", "/site") == "/site"

    def test_root_trailing_separator_stripped(self) -> None:
        """Test the returned root has no trailing separator."""
        assert find_root_dir("/site/css/app.css", "/site/") == "/site"

    def test_path_outside_root(self) -> None:
        """Test a path outside every root returns None."""
        assert find_root_dir("/elsewhere/app.css", "/site") is None

    def test_prefix_must_end_on_separator(self) -> None:
        """Test /site does not own /sitemap."""
        assert find_root_dir("/sitemap/app.css", "/site") is None

    def test_longest_root_wins(self) -> None:
        """Test the most specific matching root is chosen."""
        assert find_root_dir("/site/css/app.css", ["/site", "/site/css"]) == "/site/css"

    def test_windows_paths(self) -> None:
        """Test backslash paths match forward-slash roots."""
        assert find_root_dir("C:\\site\\app.css", "C:/site") == "C:/site"

    def test_filesystem_root(self) -> None:
        """Test / owns every unix absolute path."""
        assert find_root_dir("/var/app.css", "/") == "/"

    def test_no_roots(self) -> None:
        """Test None and empty candidate lists never match."""
        assert find_root_dir("/site/app.css", None) is None
        assert find_root_dir("/site/app.css", []) is None
        assert find_root_dir("/site/app.css", [""]) is None


class TestRootHelpers:
    """Tests for normalize_root and relative_to_root."""

    def test_normalize_root(self) -> None:
        """Test trailing separators are stripped but / survives."""
        assert normalize_root("/site///") == "/site"
        assert normalize_root("C:\\site\\") == "C:\\site"
        assert normalize_root("/") == "/"

    def test_relative_to_root(self) -> None:
        """Test the root and leading separators are removed."""
        assert relative_to_root("/site/css/app.css", "/site") == "css/app.css"
        assert relative_to_root("/var/app.css", "/") == "var/app.css"
