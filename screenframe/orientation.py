"""Portrait / landscape handling for frame assets.

Frame assets are drawn in portrait.  A landscape screenshot gets the
asset rotated 90° counterclockwise, and the cutout insets are moved to
the edges they land on after that rotation.
"""

from dataclasses import dataclass

from PySide6.QtGui import QImage, QTransform
from PySide6.QtCore import Qt

from .devices import ScreenInsets
from .errors import RotationFailed
from .geometry import Size

PORTRAIT = "portrait"
LANDSCAPE = "landscape"
ORIENTATIONS = (PORTRAIT, LANDSCAPE)


@dataclass(frozen=True)
class OrientedFrame:
    """A frame raster and the insets that match its current rotation."""
    image: QImage
    insets: ScreenInsets

    @property
    def size(self) -> Size:
        return Size(float(self.image.width()), float(self.image.height()))


def detect_orientation(size: Size) -> str:
    """Landscape when strictly wider than tall, otherwise portrait."""
    return LANDSCAPE if size.width > size.height else PORTRAIT


def oriented_size(size: Size, orientation: str) -> Size:
    return size.swapped() if orientation == LANDSCAPE else size


def oriented_insets(insets: ScreenInsets, orientation: str) -> ScreenInsets:
    return insets.rotated_ccw() if orientation == LANDSCAPE else insets


def rotate_frame(image: QImage, orientation: str, asset_name: str = "") -> QImage:
    """Return *image* as it should be drawn for *orientation*.

    Raises :class:`RotationFailed` when the raster is unusable.
    """
    if orientation not in ORIENTATIONS:
        raise ValueError(f"unknown orientation {orientation!r}")
    if image.isNull():
        raise RotationFailed(asset_name)
    if orientation == PORTRAIT:
        return image

    # Qt's y axis points down, so a negative angle turns counterclockwise
    rotated = image.transformed(
        QTransform().rotate(-90), Qt.TransformationMode.SmoothTransformation,
    )
    expected = oriented_size(Size(float(image.width()), float(image.height())), orientation)
    if rotated.isNull() or Size(float(rotated.width()), float(rotated.height())) != expected:
        raise RotationFailed(asset_name)
    return rotated


def orient_frame(image: QImage, insets: ScreenInsets, orientation: str,
                 asset_name: str = "") -> OrientedFrame:
    """Rotate a frame asset and its insets together."""
    return OrientedFrame(
        image=rotate_frame(image, orientation, asset_name),
        insets=oriented_insets(insets, orientation),
    )
