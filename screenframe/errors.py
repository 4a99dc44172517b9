"""Render failures.

Every failure is terminal for one render attempt.  ``subject`` names the
device or asset involved and ``str(err)`` is a message a caller can show
in place of the framed preview.
"""


class RenderError(Exception):
    """Base class for anything that stops a screen item from rendering."""

    def __init__(self, message: str, subject: str = "") -> None:
        super().__init__(message)
        self.subject = subject


class NoDeviceAvailable(RenderError):
    """The device catalog is empty."""

    def __init__(self) -> None:
        super().__init__("No device profiles are available.")


class NoFrameStyle(RenderError):
    """The chosen profile has no compositing geometry."""

    def __init__(self, device_name: str) -> None:
        super().__init__(f"No frame style for {device_name}.", device_name)


class MissingAsset(RenderError):
    """The asset store could not resolve a frame asset."""

    def __init__(self, asset_name: str) -> None:
        super().__init__(f"Asset {asset_name} not found.", asset_name)


class RotationFailed(RenderError):
    """The frame asset could not be rotated for landscape output."""

    def __init__(self, asset_name: str) -> None:
        super().__init__(f"Unable to rotate asset {asset_name}.", asset_name)


class EncodingFailed(RenderError):
    """The composited canvas could not be allocated or encoded."""

    def __init__(self, subject: str = "") -> None:
        super().__init__("Unable to render framed asset.", subject)
