"""Shared pytest fixtures for ScreenFrame tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QGuiApplication, QImage, QPainter

from screenframe.assets import MemoryAssetStore
from screenframe.compositor import encode_png
from screenframe.devices import (
    DeviceColor,
    DeviceProfile,
    FrameStyle,
    ScreenInsets,
    FAMILY_PHONE,
)
from screenframe.geometry import Size
from screenframe.renderer import FrameRenderer


# ── Qt ──────────────────────────────────────────────────────────────

@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """One QGuiApplication for the whole run (offscreen platform)."""
    app = QGuiApplication.instance() or QGuiApplication([])
    yield app


# ── Image helpers ──────────────────────────────────────────────────

def solid_image(width: int, height: int, color=Qt.GlobalColor.red) -> QImage:
    img = QImage(width, height, QImage.Format.Format_ARGB32)
    img.fill(QColor(color))
    return img


def frame_image(width: int, height: int, insets: ScreenInsets) -> QImage:
    """Opaque black bezel with a transparent cutout at *insets*."""
    img = QImage(width, height, QImage.Format.Format_ARGB32)
    img.fill(QColor(Qt.GlobalColor.black))
    cutout = insets.rect_in_top_coordinate(Size(width, height))
    painter = QPainter(img)
    painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
    painter.fillRect(
        QRectF(cutout.x, cutout.y, cutout.width, cutout.height),
        QColor(0, 0, 0, 0),
    )
    painter.end()
    return img


def decode(data: bytes) -> QImage:
    img = QImage()
    assert img.loadFromData(data)
    return img


# ── Devices ─────────────────────────────────────────────────────────

# 200×400 frame → cutout (20, 40, 160, 320)
EVEN_INSETS = ScreenInsets(top=0.1, leading=0.1, bottom=0.1, trailing=0.1)
EVEN_STYLE = FrameStyle(EVEN_INSETS, screen_corner_radius_ratio=0.1, content_scale=0.9)

GRAPHITE = DeviceColor("graphite", "Graphite", "test_graphite")
SILVER = DeviceColor("silver", "Silver", "test_silver")
GOLD = DeviceColor("gold", "Gold", "test_gold")


@pytest.fixture
def test_device() -> DeviceProfile:
    return DeviceProfile(
        id="testPhone",
        name="Test Phone",
        family=FAMILY_PHONE,
        display_size=Size(400, 200),
        corner_radius=20,
        colors=(GRAPHITE, SILVER),
        frame_style=EVEN_STYLE,
    )


@pytest.fixture
def styleless_device() -> DeviceProfile:
    return DeviceProfile(
        id="mockup",
        name="Mockup Phone",
        family=FAMILY_PHONE,
        display_size=Size(400, 200),
        corner_radius=20,
        colors=(GOLD,),
    )


@pytest.fixture
def frame_png() -> bytes:
    return encode_png(frame_image(200, 400, EVEN_INSETS))


@pytest.fixture
def asset_store(frame_png: bytes) -> MemoryAssetStore:
    return MemoryAssetStore({"test_graphite": frame_png, "test_silver": frame_png})


@pytest.fixture
def renderer(asset_store, test_device, styleless_device) -> FrameRenderer:
    return FrameRenderer(asset_store, catalog=(test_device, styleless_device))


@pytest.fixture
def portrait_shot() -> QImage:
    return solid_image(100, 200)


@pytest.fixture
def landscape_shot() -> QImage:
    return solid_image(200, 100, Qt.GlobalColor.blue)
