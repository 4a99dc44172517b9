"""Render facade: device lookup → orientation → compositing.

This is the surface the UI and export layers talk to.  It resolves the
item's frame asset, rotates it for landscape items and hands the result
to the compositor or the preview layout.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from PySide6.QtGui import QImage

from .assets import AssetStore, DirectoryAssetStore, MemoryAssetStore, decode_image
from .catalog_file import load_catalog
from .compositor import render_framed
from .devices import (
    DEVICE_CATALOG,
    DeviceProfile,
    FrameStyle,
    check_content_scale,
    matching_device,
)
from .errors import MissingAsset, NoFrameStyle, RenderError
from .geometry import Size
from .models import ScreenItem
from .orientation import OrientedFrame, orient_frame
from .preview import PreviewLayout, preview_layout
from .settings import RenderSettings

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Outcome of rendering one item in a batch."""
    item: ScreenItem
    data: Optional[bytes] = None
    error: Optional[RenderError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class FrameRenderer:
    """Renders screen items using one asset store and one device catalog."""

    def __init__(self, assets: AssetStore,
                 catalog: Sequence[DeviceProfile] = DEVICE_CATALOG,
                 default_content_scale: Optional[float] = None) -> None:
        self.assets = assets
        self.catalog: Tuple[DeviceProfile, ...] = tuple(catalog)
        # Applied to new items in place of each device's own content scale
        self.default_content_scale = check_content_scale(default_content_scale)

    @staticmethod
    def from_settings(settings: RenderSettings) -> "FrameRenderer":
        """Build a renderer from saved settings."""
        catalog = load_catalog(settings.catalog_path) if settings.catalog_path else DEVICE_CATALOG
        assets: AssetStore
        if settings.asset_dir:
            assets = DirectoryAssetStore(settings.asset_dir)
        else:
            logger.warning("No asset directory configured; every frame will be missing")
            assets = MemoryAssetStore()
        return FrameRenderer(assets, catalog, settings.content_scale_override)

    # ── items ───────────────────────────────────────────────────────

    def matching_device(self, image_size: Size) -> DeviceProfile:
        return matching_device(image_size, self.catalog)

    def create_item(self, source: str, image: QImage,
                    content_scale_override: Optional[float] = None) -> ScreenItem:
        """Ingest a screenshot: auto-match the device and detect orientation."""
        size = Size(float(image.width()), float(image.height()))
        if size.is_empty:
            raise ValueError(f"{source}: image has no pixels")
        device = self.matching_device(size)
        if content_scale_override is None:
            content_scale_override = self.default_content_scale
        item = ScreenItem.create(
            source, image, device, content_scale_override=content_scale_override,
        )
        logger.info("Added %s as %s (%s, %s)",
                    item.display_name, device.name, item.color.name, item.orientation)
        return item

    # ── rendering ───────────────────────────────────────────────────

    def resolve_frame(self, item: ScreenItem) -> Tuple[FrameStyle, OrientedFrame]:
        """Frame style and oriented frame asset for *item*.

        The returned style carries insets that match the oriented asset.
        """
        style = item.device.frame_style
        if style is None:
            raise NoFrameStyle(item.device.name)

        asset_name = item.color.frame_asset_name
        data = self.assets.resolve_asset(asset_name)
        if data is None:
            raise MissingAsset(asset_name)

        frame = orient_frame(decode_image(data), style.insets, item.orientation, asset_name)
        return dataclasses.replace(style, insets=frame.insets), frame

    def render(self, item: ScreenItem) -> bytes:
        """PNG bytes of *item* composited into its device frame."""
        style, frame = self.resolve_frame(item)
        return render_framed(
            item.image, frame.image, style, item.content_scale_override,
            asset_name=item.color.frame_asset_name,
        )

    def preview_layout(self, item: ScreenItem, available: Size) -> PreviewLayout:
        style, frame = self.resolve_frame(item)
        return preview_layout(
            item.image_size,
            frame.size,
            style,
            item.effective_content_scale(),
            available,
        )

    def render_all(self, items: Iterable[ScreenItem]) -> List[RenderResult]:
        """Render every item; one failure never stops the others."""
        results: List[RenderResult] = []
        for item in items:
            try:
                results.append(RenderResult(item=item, data=self.render(item)))
            except RenderError as exc:
                logger.warning("Render failed for %s: %s", item.display_name, exc)
                results.append(RenderResult(item=item, error=exc))

        failed = sum(1 for r in results if not r.ok)
        logger.info("Rendered %d item(s), %d failed", len(results) - failed, failed)
        return results
