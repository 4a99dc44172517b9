"""Layout for showing a framed screenshot at on-screen size.

Produces the same content rect as the compositor, scaled to whatever
area the preview has, in top-left-origin coordinates so a widget can
place the screenshot and the frame directly.
"""

from dataclasses import dataclass

from .devices import FrameStyle
from .geometry import Rect, Size, aspect_fit_rect, flipped_y, scale_rect


@dataclass(frozen=True)
class PreviewLayout:
    """Rects in the available area's coordinates (top-left origin)."""
    content_rect: Rect
    frame_rect: Rect
    corner_radius: float


def preview_frame_size(frame_size: Size, available: Size) -> Size:
    """Largest size with the frame's aspect ratio that fits *available*."""
    aspect = frame_size.aspect
    if available.aspect > aspect:
        width = available.height * aspect
    else:
        width = available.width
    return Size(width, width / aspect)


def preview_layout(
    image_size: Size,
    frame_size: Size,
    style: FrameStyle,
    content_scale: float,
    available: Size,
) -> PreviewLayout:
    """Fit the frame into *available* and place the screenshot inside it.

    *frame_size* and *style* must already match the item's orientation.
    """
    if frame_size.is_empty or available.is_empty:
        raise ValueError("frame and available sizes must be positive")

    preview = preview_frame_size(frame_size, available)
    screen_top = style.insets.rect_in_top_coordinate(preview)

    # Content fitting is done bottom-origin, then brought back to top-origin
    screen_bottom = flipped_y(screen_top, preview.height)
    fitted_bottom = aspect_fit_rect(image_size, screen_bottom)
    fitted_top = flipped_y(fitted_bottom, preview.height)
    content = scale_rect(fitted_top, content_scale)

    frame_rect = Rect(
        (available.width - preview.width) / 2,
        (available.height - preview.height) / 2,
        preview.width,
        preview.height,
    )
    return PreviewLayout(
        content_rect=content.offset(frame_rect.x, frame_rect.y),
        frame_rect=frame_rect,
        corner_radius=content.width * style.screen_corner_radius_ratio,
    )
