"""Screen items: one ingested screenshot and the choices made for it.

A ScreenItem always holds a colour that belongs to its device.  Changing
the device through :meth:`ScreenItem.set_device` keeps the colour when
the new device offers it and otherwise falls back to the device's first
colour.
"""

import os
import re
import uuid
from dataclasses import dataclass, field
from typing import Optional

from PySide6.QtGui import QImage

from .compositor import effective_content_scale
from .devices import DeviceColor, DeviceProfile, FrameStyle, check_content_scale
from .geometry import Size
from .orientation import ORIENTATIONS, detect_orientation

_UNSAFE_CHARS = re.compile(r"[^\w-]")


def sanitize_name(source: str) -> str:
    """File-stem of *source* with anything but letters, digits, ``-`` and ``_`` dashed."""
    base = os.path.splitext(os.path.basename(source))[0]
    name = _UNSAFE_CHARS.sub("-", base).replace("--", "-")
    return name or "screenshot"


@dataclass(eq=False)
class ScreenItem:
    """A screenshot queued for framing.

    ``source`` is wherever the image came from (usually a file path) and
    is only used for naming.
    """

    source: str
    image: QImage
    device: DeviceProfile
    color: DeviceColor
    orientation: str
    content_scale_override: Optional[float] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self) -> None:
        if self.orientation not in ORIENTATIONS:
            raise ValueError(f"unknown orientation {self.orientation!r}")
        if not self.device.has_color(self.color):
            raise ValueError(f"{self.color.id} is not a colour of {self.device.id}")
        check_content_scale(self.content_scale_override)

    @staticmethod
    def create(
        source: str,
        image: QImage,
        device: DeviceProfile,
        color: Optional[DeviceColor] = None,
        orientation: Optional[str] = None,
        content_scale_override: Optional[float] = None,
    ) -> "ScreenItem":
        """Build an item, defaulting colour and detecting orientation."""
        if orientation is None:
            orientation = detect_orientation(Size(image.width(), image.height()))
        return ScreenItem(
            source=source,
            image=image,
            device=device,
            color=color or device.default_color,
            orientation=orientation,
            content_scale_override=content_scale_override,
        )

    @property
    def image_size(self) -> Size:
        return Size(float(self.image.width()), float(self.image.height()))

    @property
    def display_name(self) -> str:
        return os.path.basename(self.source)

    @property
    def sanitized_name(self) -> str:
        return sanitize_name(self.source)

    def set_device(self, device: DeviceProfile) -> None:
        self.device = device
        if not device.has_color(self.color):
            self.color = device.default_color

    def set_color(self, color: DeviceColor) -> None:
        if not self.device.has_color(color):
            raise ValueError(f"{color.id} is not a colour of {self.device.id}")
        self.color = color

    def set_content_scale_override(self, scale: Optional[float]) -> None:
        """Set or clear (``None``) the per-item content scale."""
        self.content_scale_override = check_content_scale(scale)

    def effective_content_scale(self) -> Optional[float]:
        """Override if set, else the device default; None when unrenderable."""
        style: Optional[FrameStyle] = self.device.frame_style
        if style is None:
            return None
        return effective_content_scale(style, self.content_scale_override)
