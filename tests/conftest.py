"""Shared test fixtures for floe-assets tests.

This module provides pytest fixtures for the asset factory, its
collaborator registries and an on-disk site tree.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from floe_assets.factory import AssetFactory
from floe_assets.filters import CallableFilter, FilterManager
from floe_assets.manager import AssetManager

SITE_ROOT = "/site"


@pytest.fixture
def minify_filter() -> CallableFilter:
    """Filter collapsing whitespace."""
    return CallableFilter(lambda content: " ".join(content.split()), name="minify")


@pytest.fixture
def upper_filter() -> CallableFilter:
    """Filter upper-casing content."""
    return CallableFilter(str.upper, name="upper")


@pytest.fixture
def filter_manager(minify_filter: CallableFilter, upper_filter: CallableFilter) -> FilterManager:
    """Filter manager with minify and upper registered."""
    fm = FilterManager()
    fm.set("minify", minify_filter)
    fm.set("upper", upper_filter)
    return fm


@pytest.fixture
def asset_manager() -> AssetManager:
    """Empty asset manager."""
    return AssetManager()


@pytest.fixture
def factory(filter_manager: FilterManager, asset_manager: AssetManager) -> AssetFactory:
    """Factory rooted at /site with default output out/*."""
    return AssetFactory(
        SITE_ROOT,
        default_output="out/*",
        filter_manager=filter_manager,
        asset_manager=asset_manager,
    )


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """On-disk site with two stylesheets and one script."""
    css = tmp_path / "css"
    css.mkdir()
    (css / "a.css").write_text("a {  color: red; }", encoding="utf-8")
    (css / "b.css").write_text("b {  color: blue; }", encoding="utf-8")
    (tmp_path / "app.js").write_text("var app = 1;", encoding="utf-8")
    return tmp_path


@pytest.fixture
def span_exporter() -> Iterator[tuple[Any, Any]]:
    """In-memory OpenTelemetry exporter for span assertions."""
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import SimpleSpanProcessor
    from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))

    yield exporter, provider

    exporter.shutdown()
    provider.shutdown()
