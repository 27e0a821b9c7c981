"""Asset types built by the asset factory.

Every asset holds an ordered, identity-deduplicated filter chain and a
target path. Content is materialized lazily: constructing an asset never
touches the filesystem or the network, ``load()`` does.

Types:
- BaseAsset: shared filter/target-path behaviour
- FileAsset: a single file on disk
- GlobAsset: every file matching a wildcard pattern
- HttpAsset: a remote resource fetched with httpx
- AssetReference: a named asset held by an asset manager
- AssetCollection: an ordered composite of other assets
"""

from __future__ import annotations

import glob
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import httpx

from floe_assets.paths import find_root_dir, relative_to_root

if TYPE_CHECKING:
    from floe_assets.filters import Filter
    from floe_assets.manager import ReferenceLookup


class BaseAsset:
    """Shared behaviour for all assets.

    Attributes:
        source_root: Root directory (or URL base) the asset was found under.
        source_path: Path of the asset relative to ``source_root``.
        target_path: Output path the asset is written to, once bound.
    """

    def __init__(
        self,
        *,
        source_root: str | None = None,
        source_path: str | None = None,
    ) -> None:
        self.source_root = source_root
        self.source_path = source_path
        self.target_path: str | None = None
        self._filters: list[Filter] = []
        self._content: str | None = None

    @property
    def filters(self) -> list[Filter]:
        """Attached filters, in application order."""
        return list(self._filters)

    def ensure_filter(self, filter_: Filter) -> bool:
        """Attach a filter unless that same filter object is already attached.

        Args:
            filter_: Filter to attach.

        Returns:
            True if the filter was added, False if it was already present.
        """
        if any(existing is filter_ for existing in self._filters):
            return False
        self._filters.append(filter_)
        return True

    def clear_filters(self) -> None:
        self._filters.clear()

    def set_target_path(self, path: str) -> None:
        self.target_path = path

    def load(self) -> str:
        """Load the raw content of the asset, before filters."""
        self._content = self._load_raw()
        return self._content

    def dump(self) -> str:
        """Return the content with every attached filter applied in order."""
        content = self._content if self._content is not None else self.load()
        for filter_ in self._filters:
            content = filter_.apply(content)
        return content

    def _load_raw(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source_root={self.source_root!r}, source_path={self.source_path!r})"


class FileAsset(BaseAsset):
    """A single file on disk.

    Example:
        >>> asset = FileAsset("/site/css/app.css", root="/site", path="css/app.css")
        >>> asset.source_path
        'css/app.css'
    """

    def __init__(self, source: str, root: str | None = None, path: str | None = None) -> None:
        super().__init__(source_root=root, source_path=path)
        self.source = source

    def _load_raw(self) -> str:
        return Path(self.source).read_text(encoding="utf-8")

    def __repr__(self) -> str:
        return f"FileAsset({self.source!r})"


class GlobAsset(BaseAsset):
    """Every file matching a wildcard pattern.

    Matches are expanded on first access, sorted, and wrapped in FileAsset
    children rooted at ``base_dir``.
    """

    def __init__(self, pattern: str, base_dir: str | None = None) -> None:
        super().__init__(source_root=base_dir)
        self.pattern = pattern
        self.base_dir = base_dir
        self._children: list[FileAsset] | None = None

    def all(self) -> list[FileAsset]:
        """Expand the pattern into file assets."""
        if self._children is None:
            self._children = [self._file_asset(match) for match in self._matches()]
        return list(self._children)

    def _matches(self) -> list[str]:
        return sorted(match for match in glob.glob(self.pattern) if Path(match).is_file())

    def _file_asset(self, match: str) -> FileAsset:
        root = find_root_dir(match, self.base_dir) if self.base_dir else None
        path = relative_to_root(match, root) if root else None
        return FileAsset(match, root, path)

    def _load_raw(self) -> str:
        return "\n".join(child.dump() for child in self.all())

    def __repr__(self) -> str:
        return f"GlobAsset({self.pattern!r})"


class HttpAsset(BaseAsset):
    """A remote resource.

    Protocol-relative URLs (``//cdn.example.com/x.js``) are fetched over
    plain http.
    """

    def __init__(self, url: str, client: httpx.Client | None = None) -> None:
        self.url = f"http:{url}" if url.startswith("//") else url
        parsed = httpx.URL(self.url)
        super().__init__(
            source_root=f"{parsed.scheme}://{parsed.netloc.decode('ascii')}",
            source_path=parsed.path.lstrip("/") or None,
        )
        self._client = client

    def _load_raw(self) -> str:
        if self._client is not None:
            response = self._client.get(self.url)
        else:
            response = httpx.get(self.url, follow_redirects=True)
        response.raise_for_status()
        return response.text

    def __repr__(self) -> str:
        return f"HttpAsset({self.url!r})"


class AssetReference(BaseAsset):
    """A named asset held by an asset manager.

    The referenced asset is looked up again on every load, so replacing the
    registration is picked up by existing references.
    """

    def __init__(self, manager: ReferenceLookup, name: str) -> None:
        super().__init__()
        self._manager = manager
        self.name = name

    def resolve(self) -> BaseAsset:
        return self._manager.get(self.name)

    def _load_raw(self) -> str:
        return self.resolve().dump()

    def __repr__(self) -> str:
        return f"AssetReference({self.name!r})"


class AssetCollection(BaseAsset):
    """An ordered composite of assets sharing one filter chain and target path.

    Children are dumped in insertion order and joined with newlines before
    the collection's own filters run.

    Example:
        >>> collection = AssetCollection()
        >>> collection.add(FileAsset("/site/a.css"))
        >>> len(collection)
        1
    """

    def __init__(self, assets: list[BaseAsset] | None = None) -> None:
        super().__init__()
        self._assets: list[BaseAsset] = list(assets or [])

    def add(self, asset: BaseAsset) -> None:
        self._assets.append(asset)

    def all(self) -> list[BaseAsset]:
        """Child assets, in insertion order."""
        return list(self._assets)

    def __iter__(self) -> Iterator[BaseAsset]:
        return iter(list(self._assets))

    def __len__(self) -> int:
        return len(self._assets)

    def _load_raw(self) -> str:
        return "\n".join(asset.dump() for asset in self._assets)

    def __repr__(self) -> str:
        return f"AssetCollection({self._assets!r})"
