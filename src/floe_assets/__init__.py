"""floe-assets: Static asset graph assembly for floe-runtime.

This package builds composite assets (stylesheets, scripts and similar
static resources) from declarative input and filter descriptors:
- Input classification (references, URLs, globs, files)
- Deterministic asset naming for output templates
- Ordered filter chains with debug-mode suppression
- Post-assembly workers
- Structured logging via structlog and OpenTelemetry span tracing

Example:
    >>> from floe_assets import AssetFactory, FilterManager, CallableFilter
    >>> fm = FilterManager()
    >>> fm.set("strip", CallableFilter(str.strip))
    >>> factory = AssetFactory("/srv/site", default_output="cache/*.css", filter_manager=fm)
    >>> asset = factory.create_asset(["css/base.css", "css/*.css"], ["?strip"])
    >>> asset.target_path == f"cache/{factory.generate_asset_name(['css/base.css', 'css/*.css'], ['?strip'])}.css"
    True
"""

from __future__ import annotations

from floe_assets.assets import (
    AssetCollection,
    AssetReference,
    BaseAsset,
    FileAsset,
    GlobAsset,
    HttpAsset,
)
from floe_assets.config import AssetFactorySettings, AssetOptions, ResolvedAssetOptions
from floe_assets.errors import (
    AssetManagerMissingError,
    AssetNotFoundError,
    ConfigurationMissingError,
    FilterManagerMissingError,
    FilterNotFoundError,
    FloeAssetError,
    InvalidInputError,
    LookupFailedError,
)
from floe_assets.factory import AssetFactory, create_factory
from floe_assets.filters import CallableFilter, Filter, FilterLookup, FilterManager
from floe_assets.manager import AssetManager, ReferenceLookup
from floe_assets.naming import generate_asset_name
from floe_assets.paths import ClassifiedInput, InputKind, classify, find_root_dir, is_absolute_path
from floe_assets.resolver import AssetResolver
from floe_assets.workers import EnsureFilterWorker, Worker
from floe_assets.writer import AssetWriter

__version__ = "0.1.0"

__all__ = [
    # Factory
    "AssetFactory",
    "create_factory",
    "AssetResolver",
    # Configuration
    "AssetFactorySettings",
    "AssetOptions",
    "ResolvedAssetOptions",
    # Assets
    "BaseAsset",
    "AssetCollection",
    "AssetReference",
    "FileAsset",
    "GlobAsset",
    "HttpAsset",
    # Collaborators
    "AssetManager",
    "ReferenceLookup",
    "Filter",
    "FilterLookup",
    "FilterManager",
    "CallableFilter",
    "Worker",
    "EnsureFilterWorker",
    "AssetWriter",
    # Classification and naming
    "InputKind",
    "ClassifiedInput",
    "classify",
    "is_absolute_path",
    "find_root_dir",
    "generate_asset_name",
    # Exceptions
    "FloeAssetError",
    "ConfigurationMissingError",
    "AssetManagerMissingError",
    "FilterManagerMissingError",
    "LookupFailedError",
    "AssetNotFoundError",
    "FilterNotFoundError",
    "InvalidInputError",
]
