"""Persistent render settings stored via ``QSettings``.

Keys:
  - assetDir             : directory holding ``<asset name>.png`` bezels
  - catalogPath          : optional JSON device catalog (see catalog_file)
  - contentScaleOverride : default content scale for new items, "" = none
"""

import logging
from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

ORG_NAME = "ScreenFrame"
APP_NAME = "ScreenFrame"


def _default_settings() -> QSettings:
    return QSettings(ORG_NAME, APP_NAME)


def _parse_scale(raw) -> Optional[float]:
    if raw in (None, ""):
        return None
    try:
        scale = float(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid contentScaleOverride %r", raw)
        return None
    if not 0.0 < scale <= 1.0:
        logger.warning("Ignoring out-of-range contentScaleOverride %s", scale)
        return None
    return scale


@dataclass
class RenderSettings:
    asset_dir: str = ""
    catalog_path: str = ""
    content_scale_override: Optional[float] = None

    @staticmethod
    def load(settings: Optional[QSettings] = None) -> "RenderSettings":
        s = settings or _default_settings()
        return RenderSettings(
            asset_dir=str(s.value("assetDir", "") or ""),
            catalog_path=str(s.value("catalogPath", "") or ""),
            content_scale_override=_parse_scale(s.value("contentScaleOverride", "")),
        )

    def save(self, settings: Optional[QSettings] = None) -> None:
        s = settings or _default_settings()
        s.setValue("assetDir", self.asset_dir)
        s.setValue("catalogPath", self.catalog_path)
        scale = self.content_scale_override
        s.setValue("contentScaleOverride", "" if scale is None else str(scale))
        s.sync()
