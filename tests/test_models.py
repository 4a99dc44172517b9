"""Tests for screenframe.models: ScreenItem invariants and naming."""

import pytest

from screenframe.devices import DEVICE_CATALOG, DEFAULT_DEVICE, device_by_id
from screenframe.models import ScreenItem, sanitize_name
from screenframe.orientation import LANDSCAPE, PORTRAIT

from conftest import GOLD, GRAPHITE, SILVER, solid_image


@pytest.fixture
def item(test_device) -> ScreenItem:
    return ScreenItem.create("/tmp/shots/Home Screen.png", solid_image(100, 200), test_device)


class TestCreate:
    def test_defaults(self, item, test_device) -> None:
        assert item.device == test_device
        assert item.color == GRAPHITE
        assert item.orientation == PORTRAIT
        assert item.content_scale_override is None

    def test_landscape_detected(self, test_device) -> None:
        wide = ScreenItem.create("wide.png", solid_image(200, 100), test_device)
        assert wide.orientation == LANDSCAPE

    def test_explicit_orientation(self, test_device) -> None:
        forced = ScreenItem.create("x.png", solid_image(200, 100), test_device, orientation=PORTRAIT)
        assert forced.orientation == PORTRAIT

    def test_explicit_color(self, test_device) -> None:
        assert ScreenItem.create("x.png", solid_image(1, 1), test_device, color=SILVER).color == SILVER

    def test_foreign_color_rejected(self, test_device) -> None:
        with pytest.raises(ValueError):
            ScreenItem.create("x.png", solid_image(1, 1), test_device, color=GOLD)

    def test_unknown_orientation_rejected(self, test_device) -> None:
        with pytest.raises(ValueError):
            ScreenItem.create("x.png", solid_image(1, 1), test_device, orientation="diagonal")

    def test_unique_ids(self, test_device) -> None:
        a = ScreenItem.create("a.png", solid_image(1, 1), test_device)
        b = ScreenItem.create("a.png", solid_image(1, 1), test_device)
        assert a.id != b.id


class TestDeviceChange:
    def test_color_kept_when_available(self, item, test_device) -> None:
        item.set_color(SILVER)
        item.set_device(test_device)
        assert item.color == SILVER

    def test_color_falls_back_to_first(self, item) -> None:
        iphone16 = device_by_id("iphone16")
        item.set_device(iphone16)
        assert item.device == iphone16
        assert item.color == iphone16.colors[0]

    def test_color_always_belongs_to_device(self, item) -> None:
        for device in DEVICE_CATALOG:
            item.set_device(device)
            assert item.color in device.colors

    def test_set_color_rejects_foreign(self, item) -> None:
        with pytest.raises(ValueError):
            item.set_color(GOLD)
        assert item.color == GRAPHITE


class TestContentScale:
    def test_device_default(self, item) -> None:
        assert item.effective_content_scale() == 0.9

    def test_override(self, item) -> None:
        item.set_content_scale_override(0.8)
        assert item.effective_content_scale() == 0.8
        item.set_content_scale_override(None)
        assert item.effective_content_scale() == 0.9

    def test_override_survives_device_change(self, item) -> None:
        item.set_content_scale_override(0.8)
        item.set_device(DEFAULT_DEVICE)
        assert item.effective_content_scale() == 0.8

    def test_override_range(self, item) -> None:
        with pytest.raises(ValueError):
            item.set_content_scale_override(0.0)
        with pytest.raises(ValueError):
            item.set_content_scale_override(1.5)

    def test_create_rejects_out_of_range_override(self, test_device) -> None:
        with pytest.raises(ValueError):
            ScreenItem.create("shot.png", solid_image(100, 200), test_device,
                              content_scale_override=2.5)
        with pytest.raises(ValueError):
            ScreenItem.create("shot.png", solid_image(100, 200), test_device,
                              content_scale_override=0.0)

    def test_constructor_rejects_out_of_range_override(self, test_device) -> None:
        with pytest.raises(ValueError):
            ScreenItem(
                source="shot.png",
                image=solid_image(100, 200),
                device=test_device,
                color=GRAPHITE,
                orientation=PORTRAIT,
                content_scale_override=-0.5,
            )

    def test_styleless_device(self, item, styleless_device) -> None:
        item.set_device(styleless_device)
        assert item.effective_content_scale() is None


class TestNaming:
    def test_display_name(self, item) -> None:
        assert item.display_name == "Home Screen.png"

    def test_sanitized_name(self, item) -> None:
        assert item.sanitized_name == "Home-Screen"

    @pytest.mark.parametrize("source,expected", [
        ("shot_01.png", "shot_01"),
        ("Screenshot 2025-12-27 at 10.15.03.png", "Screenshot-2025-12-27-at-10-15-03"),
        ("a  b.jpg", "a-b"),
        ("плюс.png", "плюс"),
        ("a/b/c d.png", "c-d"),
        ("", "screenshot"),
    ])
    def test_sanitize(self, source: str, expected: str) -> None:
        assert sanitize_name(source) == expected
