"""Compositor: renders a screenshot inside a device bezel asset.

Layers, bottom to top:  screenshot clipped to a rounded rect  →  frame
asset at full canvas size.  The frame's transparent cutout shows the
screenshot underneath.  Output is PNG at the frame's native size.

Layout is computed with a bottom-left origin and flipped once to Qt's
top-left origin right before painting.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import QBuffer, QIODevice, QRectF, Qt
from PySide6.QtGui import QImage, QPainter, QPainterPath

from .devices import FrameStyle
from .errors import EncodingFailed
from .geometry import Rect, Size, aspect_fit_rect, flipped_y, scale_rect

logger = logging.getLogger(__name__)

OUTPUT_FORMAT = "PNG"


@dataclass(frozen=True)
class RasterLayout:
    """Where the screenshot lands on the canvas (bottom-left origin)."""
    cutout: Rect          # raw screen area from the insets
    fitted: Rect          # screenshot aspect-fit into the cutout
    content: Rect         # fitted rect after the content scale
    corner_radius: float


def effective_content_scale(style: FrameStyle, override: Optional[float] = None) -> float:
    """The per-item override when set, otherwise the style's default."""
    return style.content_scale if override is None else override


def raster_layout(image_size: Size, canvas_size: Size, style: FrameStyle,
                  content_scale: float) -> RasterLayout:
    """Compute the screenshot placement for a canvas of *canvas_size*."""
    cutout = style.insets.rect_in_bottom_coordinate(canvas_size)
    fitted = aspect_fit_rect(image_size, cutout)
    content = scale_rect(fitted, content_scale)
    return RasterLayout(
        cutout=cutout,
        fitted=fitted,
        content=content,
        corner_radius=content.width * style.screen_corner_radius_ratio,
    )


def encode_png(image: QImage, subject: str = "") -> bytes:
    """Encode *image* losslessly; raises :class:`EncodingFailed`."""
    buf = QBuffer()
    buf.open(QIODevice.OpenModeFlag.WriteOnly)
    ok = image.save(buf, OUTPUT_FORMAT)
    buf.close()
    if not ok:
        raise EncodingFailed(subject)
    return bytes(buf.data())


def render_framed(
    image: QImage,
    frame: QImage,
    style: FrameStyle,
    content_scale_override: Optional[float] = None,
    asset_name: str = "",
) -> bytes:
    """Composite *image* into *frame* and return PNG bytes.

    *style* must carry insets that match *frame*'s current orientation.
    Nothing is written anywhere; the caller owns persistence.  *asset_name*
    becomes the subject of any :class:`EncodingFailed` raised.
    """
    if image.isNull() or frame.isNull():
        raise EncodingFailed(asset_name)

    W, H = frame.width(), frame.height()
    canvas_size = Size(float(W), float(H))
    scale = effective_content_scale(style, content_scale_override)
    layout = raster_layout(
        Size(float(image.width()), float(image.height())), canvas_size, style, scale,
    )
    logger.debug(
        "Compositing %dx%d into %dx%d canvas: content=%s radius=%.1f",
        image.width(), image.height(), W, H, layout.content, layout.corner_radius,
    )

    canvas = QImage(W, H, QImage.Format.Format_ARGB32_Premultiplied)
    if canvas.isNull():
        raise EncodingFailed(asset_name)
    canvas.fill(Qt.GlobalColor.transparent)

    # QPainter measures y from the top
    screen_rect = flipped_y(layout.content, canvas_size.height).to_qrectf()
    radius = layout.corner_radius

    painter = QPainter(canvas)
    try:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)

        # ── screenshot (bottom layer) ──────────────────────────────
        source_rect = QRectF(0, 0, image.width(), image.height())
        if radius > 0:
            screen_path = QPainterPath()
            screen_path.addRoundedRect(screen_rect, radius, radius)
            painter.save()
            painter.setClipPath(screen_path)
            painter.drawImage(screen_rect, image, source_rect)
            painter.restore()
        else:
            painter.drawImage(screen_rect, image, source_rect)

        # ── bezel on top ───────────────────────────────────────────
        painter.drawImage(QRectF(0, 0, W, H), frame, QRectF(0, 0, W, H))
    finally:
        painter.end()

    return encode_png(canvas.convertToFormat(QImage.Format.Format_ARGB32), asset_name)
