"""Asset factory: build asset collections from input and filter descriptors.

This module provides AssetFactory, the public entry point of floe-assets,
and create_factory() for building one from AssetFactorySettings.

Pipeline for a single create_asset call:

1. Normalize scalar inputs/filters into lists
2. Layer per-call options over the factory defaults
3. Resolve every input into a child asset, in order
4. Attach filters, omitting ``?``-prefixed ones in debug mode
5. Bind the target path (``*`` in the output template -> asset name)
6. Run workers in registration order
7. Optionally write the asset to disk

Thread safety:
    create_asset does not mutate factory state and may run concurrently.
    The setters are not synchronized; callers sharing a factory across
    threads must not reconfigure it while assets are being created.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

from floe_assets.assets import AssetCollection
from floe_assets.config import (
    DEFAULT_OUTPUT,
    AssetFactorySettings,
    AssetOptions,
    require_wildcard,
    resolve_options,
)
from floe_assets.naming import generate_asset_name
from floe_assets.observability import asset_operation, get_logger
from floe_assets.paths import normalize_root
from floe_assets.pipeline import attach_filters
from floe_assets.resolver import AssetResolver
from floe_assets.writer import AssetWriter

if TYPE_CHECKING:
    import httpx

    from floe_assets.assets import BaseAsset
    from floe_assets.filters import FilterLookup
    from floe_assets.manager import ReferenceLookup
    from floe_assets.workers import Worker


def _as_list(value: str | Iterable[str] | None) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


class AssetFactory:
    """Create asset collections from input and filter descriptors.

    Args:
        root: Root directory relative inputs are resolved against. Trailing
            separators are stripped.
        debug: Omit ``?``-prefixed filters by default.
        default_output: Output template used when a call gives none.
        asset_manager: Lookup for ``@name`` references.
        filter_manager: Lookup for filter names.
        writer: Writer used when ``auto_write`` is on.
        auto_write: Write every created asset with ``writer``.
        http_client: Optional httpx client for remote assets.

    Example:
        >>> fm = FilterManager()
        >>> fm.set("minify", CallableFilter(minify_css))
        >>> factory = AssetFactory("/site", default_output="out/*", filter_manager=fm)
        >>> asset = factory.create_asset(["a.css", "b.css"], ["?minify"])
        >>> [child.source for child in asset]
        ['/site/a.css', '/site/b.css']
    """

    def __init__(
        self,
        root: str,
        *,
        debug: bool = False,
        default_output: str = DEFAULT_OUTPUT,
        asset_manager: ReferenceLookup | None = None,
        filter_manager: FilterLookup | None = None,
        writer: AssetWriter | None = None,
        auto_write: bool = False,
        http_client: httpx.Client | None = None,
    ) -> None:
        if auto_write and writer is None:
            msg = "A writer is required when auto_write is enabled"
            raise ValueError(msg)

        self._root = normalize_root(root)
        self._debug = debug
        self._default_output = require_wildcard(default_output)
        self._workers: list[Worker] = []
        self._asset_manager = asset_manager
        self._filter_manager = filter_manager
        self._writer = writer
        self._auto_write = auto_write
        self._http_client = http_client

    @property
    def root(self) -> str:
        """Root directory, without trailing separators."""
        return self._root

    @property
    def debug(self) -> bool:
        return self._debug

    @debug.setter
    def debug(self, value: bool) -> None:
        self._debug = value

    @property
    def default_output(self) -> str:
        return self._default_output

    @default_output.setter
    def default_output(self, value: str) -> None:
        self._default_output = require_wildcard(value)

    @property
    def asset_manager(self) -> ReferenceLookup | None:
        return self._asset_manager

    @asset_manager.setter
    def asset_manager(self, manager: ReferenceLookup | None) -> None:
        self._asset_manager = manager

    @property
    def filter_manager(self) -> FilterLookup | None:
        return self._filter_manager

    @filter_manager.setter
    def filter_manager(self, manager: FilterLookup | None) -> None:
        self._filter_manager = manager

    @property
    def workers(self) -> tuple[Worker, ...]:
        """Registered workers, in the order they run."""
        return tuple(self._workers)

    def add_worker(self, worker: Worker) -> None:
        self._workers.append(worker)

    def create_asset(
        self,
        inputs: str | Sequence[str] | None = None,
        filters: str | Sequence[str] | None = None,
        options: AssetOptions | dict[str, Any] | None = None,
    ) -> AssetCollection:
        """Create a new asset collection.

        Input strings are interpreted as:

        - ``@name``: a reference to an asset in the asset manager
        - a string containing ``://`` or starting with ``//``: a remote asset
        - a string containing ``*``: a glob
        - anything else: a filesystem path

        Relative paths and globs are absolutized with the factory root.
        Prefixing a filter name with ``?`` omits it in debug mode.

        Args:
            inputs: Input descriptor or list of input descriptors.
            filters: Filter name or list of filter names.
            options: Per-call options (output, name, debug, root).

        Returns:
            The assembled asset collection. The caller owns it.

        Raises:
            InvalidInputError: If an input or filter name is empty.
            ConfigurationMissingError: If a reference or filter is used without
                the matching manager.
            LookupFailedError: If a reference or filter name is not registered.
        """
        input_list = _as_list(inputs)
        filter_list = _as_list(filters)
        resolved = resolve_options(
            options,
            default_output=self._default_output,
            default_debug=self._debug,
            default_roots=(self._root,),
            inputs=input_list,
            filters=filter_list,
        )

        attributes = {
            "asset.name": resolved.name,
            "asset.inputs": len(input_list),
            "asset.filters": len(filter_list),
            "asset.debug": resolved.debug,
        }
        with asset_operation("create_asset", attributes=attributes):
            asset = self.create_asset_collection()

            resolver = self.create_resolver()
            for value in input_list:
                asset.add(resolver.resolve(value, resolved.roots))

            attach_filters(
                asset,
                filter_list,
                debug=resolved.debug,
                registry=self._filter_manager,
            )

            asset.set_target_path(resolved.target_path)

            for worker in tuple(self._workers):
                worker.process(asset)

            if self._auto_write and self._writer is not None:
                self._writer.write_asset(asset)

        return asset

    def generate_asset_name(self, inputs: Sequence[str], filters: Sequence[str]) -> str:
        """Generate the default name for an input/filter combination."""
        return generate_asset_name(_as_list(inputs), _as_list(filters))

    def parse_input(self, value: str, roots: str | Iterable[str] | None = None) -> BaseAsset:
        """Resolve a single input descriptor with the factory configuration.

        Args:
            value: Input descriptor.
            roots: Candidate roots for absolute paths. Defaults to the
                factory root.

        Returns:
            The asset for the input.
        """
        return self.create_resolver().resolve(value, self._root if roots is None else roots)

    def create_asset_collection(self) -> AssetCollection:
        return AssetCollection()

    def create_resolver(self) -> AssetResolver:
        return AssetResolver(
            self._root,
            asset_manager=self._asset_manager,
            http_client=self._http_client,
        )


def create_factory(
    settings: AssetFactorySettings,
    *,
    asset_manager: ReferenceLookup | None = None,
    filter_manager: FilterLookup | None = None,
    workers: Iterable[Worker] = (),
    writer: AssetWriter | None = None,
    http_client: httpx.Client | None = None,
) -> AssetFactory:
    """Create an asset factory from settings.

    Args:
        settings: Factory settings.
        asset_manager: Lookup for ``@name`` references.
        filter_manager: Lookup for filter names.
        workers: Workers to register, in order.
        writer: Writer for auto_write. Defaults to an AssetWriter on
            ``settings.write_dir`` when auto_write is on.
        http_client: Optional httpx client for remote assets.

    Returns:
        Configured AssetFactory.

    Example:
        >>> settings = AssetFactorySettings(root="/srv/site", debug=True)
        >>> factory = create_factory(settings, filter_manager=fm)
        >>> factory.debug
        True
    """
    if writer is None and settings.auto_write and settings.write_dir:
        writer = AssetWriter(settings.write_dir)

    factory = AssetFactory(
        settings.root,
        debug=settings.debug,
        default_output=settings.default_output,
        asset_manager=asset_manager,
        filter_manager=filter_manager,
        writer=writer,
        auto_write=settings.auto_write,
        http_client=http_client,
    )
    for worker in workers:
        factory.add_worker(worker)

    get_logger().debug(
        "factory_created",
        root=factory.root,
        debug=factory.debug,
        default_output=factory.default_output,
        auto_write=settings.auto_write,
    )
    return factory
