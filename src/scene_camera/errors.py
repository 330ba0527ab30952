"""Camera error types."""

from __future__ import annotations


class CameraError(ValueError):
    """Base class for camera computation failures."""


class InvalidViewport(CameraError):
    """Viewport width or height is not a positive, finite number."""

    def __init__(self, width, height):
        super().__init__(
            f"Viewport must have positive, finite dimensions, got ({width}, {height})"
        )
        self.width = width
        self.height = height


class DegenerateOrientation(CameraError):
    """Look-at target coincides with the eye, or the up hint has zero length."""


class InvalidCameraParameters(CameraError):
    """Camera fields violate their invariants (clip planes, scale, fov)."""
