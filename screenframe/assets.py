"""Frame asset lookup.

The renderer only needs ``resolve_asset(name) -> bytes | None``.  Two
stores are provided: an in-memory mapping and a directory of PNG files.
Neither mutates after construction, so concurrent lookups are safe.
"""

import logging
import os
from typing import Dict, Mapping, Optional, Protocol

from PySide6.QtGui import QImage

logger = logging.getLogger(__name__)

ASSET_EXT = ".png"


class AssetStore(Protocol):
    def resolve_asset(self, name: str) -> Optional[bytes]:
        ...


class MemoryAssetStore:
    """Asset bytes held in a dict keyed by asset name."""

    def __init__(self, assets: Optional[Mapping[str, bytes]] = None) -> None:
        self._assets: Dict[str, bytes] = dict(assets or {})

    def resolve_asset(self, name: str) -> Optional[bytes]:
        return self._assets.get(name)


class DirectoryAssetStore:
    """Assets stored as ``<root>/<name>.png``."""

    def __init__(self, root: str) -> None:
        self.root = root

    def path_for(self, name: str) -> str:
        return os.path.join(self.root, name + ASSET_EXT)

    def resolve_asset(self, name: str) -> Optional[bytes]:
        path = self.path_for(name)
        if not os.path.isfile(path):
            logger.debug("Frame asset not found: %s", path)
            return None
        with open(path, "rb") as f:
            return f.read()


def decode_image(data: bytes) -> QImage:
    """Decode raster bytes; returns a null image when the data is unreadable."""
    image = QImage()
    image.loadFromData(data)
    return image
