"""Post-assembly workers.

Workers run in registration order after an asset is assembled and may
mutate it in place. A failing worker aborts the remaining chain; mutations
made by earlier workers are not rolled back.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from floe_assets.assets import AssetCollection
    from floe_assets.filters import Filter


@runtime_checkable
class Worker(Protocol):
    """Post-processes an asset built by the factory."""

    def process(self, asset: AssetCollection) -> None:
        """Mutate ``asset`` in place."""
        ...


class EnsureFilterWorker:
    """Ensure a filter on every asset whose target path matches a pattern.

    Example:
        >>> factory.add_worker(EnsureFilterWorker(r"\\.css$", fm.get("cssrewrite")))
    """

    def __init__(self, pattern: str, filter_: Filter) -> None:
        self.pattern = re.compile(pattern)
        self.filter = filter_

    def process(self, asset: AssetCollection) -> None:
        if asset.target_path is not None and self.pattern.search(asset.target_path):
            asset.ensure_filter(self.filter)
