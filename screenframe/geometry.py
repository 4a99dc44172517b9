"""Rectangle math shared by the compositor and the preview layout.

Two vertical conventions are in play: raster compositing measures ``y``
from the bottom edge, on-screen layout measures it from the top.  The
only way to move a rectangle between them is :func:`flipped_y`.
"""

from dataclasses import dataclass

from PySide6.QtCore import QRectF


@dataclass(frozen=True)
class Size:
    """Width × height in pixels (or points for preview layout)."""
    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def swapped(self) -> "Size":
        return Size(self.height, self.width)

    def sorted_dims(self) -> tuple[float, float]:
        """Return (short side, long side)."""
        return (min(self.width, self.height), max(self.width, self.height))


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def offset(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def to_qrectf(self) -> QRectF:
        return QRectF(self.x, self.y, self.width, self.height)


def aspect_fit_rect(content: Size, container: Rect) -> Rect:
    """Largest rect with *content*'s aspect ratio that fits *container*.

    The result is centred on both axes.  Content and container must have
    positive area.
    """
    if content.is_empty:
        raise ValueError(f"content size must be positive, got {content}")
    if container.width <= 0 or container.height <= 0:
        raise ValueError(f"container must have positive area, got {container}")

    content_aspect = content.width / content.height
    container_aspect = container.width / container.height

    if content_aspect > container_aspect:
        # Width-bound: letterbox top and bottom
        height = container.width / content_aspect
        return Rect(
            container.x,
            container.y + (container.height - height) / 2,
            container.width,
            height,
        )
    width = container.height * content_aspect
    return Rect(
        container.x + (container.width - width) / 2,
        container.y,
        width,
        container.height,
    )


def scale_rect(rect: Rect, scale: float) -> Rect:
    """Grow or shrink *rect* around its own centre."""
    if scale == 1:
        return rect
    new_w = rect.width * scale
    new_h = rect.height * scale
    dx = (rect.width - new_w) / 2
    dy = (rect.height - new_h) / 2
    return Rect(rect.x + dx, rect.y + dy, new_w, new_h)


def flipped_y(rect: Rect, container_height: float) -> Rect:
    """Convert between top-origin and bottom-origin coordinates.

    Applying it twice with the same height returns the original rect.
    """
    return Rect(rect.x, container_height - rect.max_y, rect.width, rect.height)
