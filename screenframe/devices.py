"""Device profiles and best-fit matching for screenshots.

Each profile names a device, its native display resolution and the
colour variants it ships in.  A profile with a :class:`FrameStyle` knows
where the screen sits inside its bezel asset and can be composited;
profiles without one are listed but cannot be rendered.

Profiles and colours compare by ``id`` only.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .errors import NoDeviceAvailable
from .geometry import Rect, Size

logger = logging.getLogger(__name__)

FAMILY_PHONE = "phone"
FAMILY_TABLET = "tablet"
FAMILY_LAPTOP = "laptop"
FAMILIES = (FAMILY_PHONE, FAMILY_TABLET, FAMILY_LAPTOP)


@dataclass(frozen=True, eq=False)
class DeviceColor:
    """A colour variant and the asset that draws its bezel."""
    id: str
    name: str
    frame_asset_name: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeviceColor):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "frame_asset_name": self.frame_asset_name}

    @staticmethod
    def from_dict(d: dict) -> "DeviceColor":
        return DeviceColor(id=d["id"], name=d["name"], frame_asset_name=d["frame_asset_name"])


@dataclass(frozen=True)
class ScreenInsets:
    """Screen cutout margins as fractions of the frame's own size."""
    top: float
    leading: float
    bottom: float
    trailing: float

    def __post_init__(self) -> None:
        for name in ("top", "leading", "bottom", "trailing"):
            value = getattr(self, name)
            if not 0.0 <= value < 1.0:
                raise ValueError(f"inset {name} must be in [0, 1), got {value}")
        if self.top + self.bottom >= 1.0 or self.leading + self.trailing >= 1.0:
            raise ValueError("opposing insets leave no screen area")

    def rect_in_bottom_coordinate(self, size: Size) -> Rect:
        """Cutout rect with ``y`` measured up from the bottom edge."""
        return Rect(
            size.width * self.leading,
            size.height * self.bottom,
            size.width * (1 - self.leading - self.trailing),
            size.height * (1 - self.top - self.bottom),
        )

    def rect_in_top_coordinate(self, size: Size) -> Rect:
        """Cutout rect with ``y`` measured down from the top edge."""
        return Rect(
            size.width * self.leading,
            size.height * self.top,
            size.width * (1 - self.leading - self.trailing),
            size.height * (1 - self.top - self.bottom),
        )

    def rotated_ccw(self) -> "ScreenInsets":
        """Insets of the same frame after a 90° counterclockwise turn.

        The old top edge becomes the leading edge, leading becomes
        bottom, bottom becomes trailing and trailing becomes top.
        """
        return ScreenInsets(
            top=self.trailing,
            leading=self.top,
            bottom=self.leading,
            trailing=self.bottom,
        )

    def to_dict(self) -> dict:
        return {
            "top": self.top,
            "leading": self.leading,
            "bottom": self.bottom,
            "trailing": self.trailing,
        }

    @staticmethod
    def from_dict(d: dict) -> "ScreenInsets":
        return ScreenInsets(
            top=float(d["top"]),
            leading=float(d["leading"]),
            bottom=float(d["bottom"]),
            trailing=float(d["trailing"]),
        )


ZERO_INSETS = ScreenInsets(0.0, 0.0, 0.0, 0.0)


def check_content_scale(scale: Optional[float]) -> Optional[float]:
    """Return *scale* if it is None or in (0, 1], else raise ValueError."""
    if scale is not None and not 0.0 < scale <= 1.0:
        raise ValueError(f"content scale must be in (0, 1], got {scale}")
    return scale


@dataclass(frozen=True)
class FrameStyle:
    """Compositing geometry for one device's bezel assets."""
    insets: ScreenInsets
    screen_corner_radius_ratio: float  # fraction of content width
    content_scale: float = 0.97        # shrink applied to the fitted image

    def __post_init__(self) -> None:
        check_content_scale(self.content_scale)
        if self.screen_corner_radius_ratio < 0:
            raise ValueError("screen_corner_radius_ratio must not be negative")

    def to_dict(self) -> dict:
        return {
            "insets": self.insets.to_dict(),
            "screen_corner_radius_ratio": self.screen_corner_radius_ratio,
            "content_scale": self.content_scale,
        }

    @staticmethod
    def from_dict(d: dict) -> "FrameStyle":
        return FrameStyle(
            insets=ScreenInsets.from_dict(d["insets"]),
            screen_corner_radius_ratio=float(d["screen_corner_radius_ratio"]),
            content_scale=float(d["content_scale"]),
        )


@dataclass(frozen=True, eq=False)
class DeviceProfile:
    """A device that screenshots can be framed in."""
    id: str
    name: str
    family: str                     # one of FAMILIES
    display_size: Size              # native screen resolution in px
    corner_radius: float            # display only, unused when compositing
    colors: tuple[DeviceColor, ...]
    frame_style: Optional[FrameStyle] = None

    def __post_init__(self) -> None:
        if self.family not in FAMILIES:
            raise ValueError(f"unknown device family {self.family!r}")
        if self.display_size.is_empty:
            raise ValueError(f"{self.id}: display size must be positive")
        if not self.colors:
            raise ValueError(f"{self.id}: a device needs at least one colour")
        # Accept any sequence but store a tuple so the profile stays immutable
        object.__setattr__(self, "colors", tuple(self.colors))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeviceProfile):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def can_render(self) -> bool:
        return self.frame_style is not None

    @property
    def default_color(self) -> DeviceColor:
        return self.colors[0]

    def has_color(self, color: DeviceColor) -> bool:
        return color in self.colors

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "name": self.name,
            "family": self.family,
            "display_size": [self.display_size.width, self.display_size.height],
            "corner_radius": self.corner_radius,
            "colors": [c.to_dict() for c in self.colors],
        }
        if self.frame_style is not None:
            d["frame_style"] = self.frame_style.to_dict()
        return d

    @staticmethod
    def from_dict(d: dict) -> "DeviceProfile":
        style = d.get("frame_style")
        width, height = d["display_size"]
        return DeviceProfile(
            id=d["id"],
            name=d["name"],
            family=d["family"],
            display_size=Size(float(width), float(height)),
            corner_radius=float(d.get("corner_radius", 0.0)),
            colors=tuple(DeviceColor.from_dict(c) for c in d["colors"]),
            frame_style=FrameStyle.from_dict(style) if style else None,
        )


# ── Built-in catalog ────────────────────────────────────────────────

BLUE = DeviceColor("blue", "Blue", "iphone14_blue")
MIDNIGHT = DeviceColor("midnight", "Midnight", "iphone14_midnight")
PURPLE = DeviceColor("purple", "Purple", "iphone14_purple")
RED = DeviceColor("red", "Red", "iphone14_red")
STARLIGHT = DeviceColor("starlight", "Starlight", "iphone14_starlight")
ULTRAMARINE = DeviceColor("ultramarine", "Ultramarine", "iPhone 16 - Ultramarine - Portrait")
PINK_16 = DeviceColor("pink16", "Pink", "iPhone 16 Plus - Pink - Portrait 2")
BLACK_TITANIUM = DeviceColor("blackTitanium", "Black Titanium", "iPhone 16 Pro - Black Titanium - Portrait 2")
DESERT_TITANIUM = DeviceColor("desertTitanium", "Desert Titanium", "iPhone 16 Pro Max - Desert Titanium - Portrait 2")
MIST_BLUE = DeviceColor("mistBlue", "Mist Blue", "iPhone 17 - Mist Blue - Portrait 1")
COSMIC_ORANGE = DeviceColor("cosmicOrange", "Cosmic Orange", "iPhone 17 Pro - Cosmic Orange - Portrait 1")
COSMIC_ORANGE_MAX = DeviceColor("cosmicOrangeMax", "Cosmic Orange", "iPhone 17 Pro Max - Cosmic Orange - Portrait 1")
SPACE_GRAY = DeviceColor("spaceGray", "Space Gray", "iPad Pro 12.9 - Space Gray - Portrait")


def _phone_style(top: float, leading: float, bottom: float, trailing: float) -> FrameStyle:
    return FrameStyle(
        insets=ScreenInsets(top, leading, bottom, trailing),
        screen_corner_radius_ratio=0.06,
        content_scale=0.97,
    )


DEVICE_CATALOG: tuple[DeviceProfile, ...] = (
    DeviceProfile(
        id="iphone14", name="iPhone 14", family=FAMILY_PHONE,
        display_size=Size(2532, 1170), corner_radius=106,
        colors=(BLUE, MIDNIGHT, PURPLE, RED, STARLIGHT),
        frame_style=_phone_style(6.0 / 850.0, 10.0 / 421.0, 8.0 / 850.0, 11.0 / 421.0),
    ),
    DeviceProfile(
        id="iphone16", name="iPhone 16", family=FAMILY_PHONE,
        display_size=Size(2556, 1179), corner_radius=108,
        colors=(ULTRAMARINE,),
        frame_style=_phone_style(1.0 / 879.0, 0.0, 1.0 / 879.0, 0.0),
    ),
    DeviceProfile(
        id="iphone16Plus", name="iPhone 16 Plus", family=FAMILY_PHONE,
        display_size=Size(2796, 1290), corner_radius=112,
        colors=(PINK_16,),
        frame_style=_phone_style(2.0 / 964.0, 0.0, 2.0 / 964.0, 0.0),
    ),
    DeviceProfile(
        id="iphone16Pro", name="iPhone 16 Pro", family=FAMILY_PHONE,
        display_size=Size(2556, 1179), corner_radius=110,
        colors=(BLACK_TITANIUM,),
        frame_style=_phone_style(3.0 / 884.0, 0.0, 1.0 / 884.0, 0.0),
    ),
    DeviceProfile(
        id="iphone16ProMax", name="iPhone 16 Pro Max", family=FAMILY_PHONE,
        display_size=Size(2796, 1290), corner_radius=118,
        colors=(DESERT_TITANIUM,),
        frame_style=_phone_style(1.0 / 958.0, 0.0, 1.0 / 958.0, 0.0),
    ),
    DeviceProfile(
        id="iphone17", name="iPhone 17", family=FAMILY_PHONE,
        display_size=Size(2556, 1179), corner_radius=110,
        colors=(MIST_BLUE,),
        frame_style=_phone_style(0.009101, 0.011628, 0.009101, 0.011628),
    ),
    DeviceProfile(
        id="iphone17Pro", name="iPhone 17 Pro", family=FAMILY_PHONE,
        display_size=Size(2556, 1179), corner_radius=112,
        colors=(COSMIC_ORANGE,),
        frame_style=_phone_style(0.006826, 0.009302, 0.006826, 0.009302),
    ),
    DeviceProfile(
        id="iphone17ProMax", name="iPhone 17 Pro Max", family=FAMILY_PHONE,
        display_size=Size(2796, 1290), corner_radius=120,
        colors=(COSMIC_ORANGE_MAX,),
        frame_style=_phone_style(0.006263, 0.010661, 0.006263, 0.010661),
    ),
    DeviceProfile(
        id="ipadPro129", name="iPad Pro 12.9", family=FAMILY_TABLET,
        display_size=Size(2752, 2064), corner_radius=0,
        colors=(SPACE_GRAY,),
        frame_style=FrameStyle(
            insets=ZERO_INSETS, screen_corner_radius_ratio=0.0, content_scale=0.94,
        ),
    ),
)

DEFAULT_DEVICE = DEVICE_CATALOG[0]  # "iPhone 14"


def device_by_id(device_id: str,
                 catalog: Sequence[DeviceProfile] = DEVICE_CATALOG) -> Optional[DeviceProfile]:
    """Look up a profile by its stable id."""
    for profile in catalog:
        if profile.id == device_id:
            return profile
    return None


def match_score(image_size: Size, profile: DeviceProfile) -> float:
    """Relative error between an image and a device's display size.

    Both sizes are compared short side to short side and long side to
    long side, so the score ignores orientation.  0 is an exact match.
    """
    img_short, img_long = image_size.sorted_dims()
    dev_short, dev_long = profile.display_size.sorted_dims()
    return abs(img_short - dev_short) / dev_short + abs(img_long - dev_long) / dev_long


def matching_device(image_size: Size,
                    catalog: Iterable[DeviceProfile] = DEVICE_CATALOG) -> DeviceProfile:
    """Return the catalog profile whose display best fits *image_size*.

    Only renderable profiles are considered unless the catalog has none.
    Ties keep the earliest catalog entry, so results depend on catalog
    order.
    """
    profiles: List[DeviceProfile] = list(catalog)
    if not profiles:
        raise NoDeviceAvailable()

    candidates = [p for p in profiles if p.can_render] or profiles

    best = candidates[0]
    best_score = float("inf")
    for profile in candidates:
        score = match_score(image_size, profile)
        if score < best_score:
            best, best_score = profile, score

    logger.debug("Matched %sx%s to %s (score %.4f)",
                 image_size.width, image_size.height, best.id, best_score)
    return best
