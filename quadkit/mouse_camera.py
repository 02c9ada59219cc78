"""A 2D camera steered by mouse position and wheel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from quadkit.vector import Vec2


class _Camera2DParams(NamedTuple):
    zoom: Vec2
    offset: Vec2
    target: Vec2
    rotation: float


@dataclass
class MouseCamera:
    """2D camera whose offset and scale follow mouse input."""

    offset: Vec2 = field(default_factory=Vec2)
    scale: float = 1.0
    _last_mouse_pos: Vec2 = field(default_factory=Vec2, init=False, repr=False)

    def scale_wheel(self, center: Vec2, wheel_value: float, scale_factor: float) -> None:
        """Zoom in on a positive wheel value and out on a negative one."""
        if wheel_value > 0.0:
            self.scale_mul(center, scale_factor)
        elif wheel_value < 0.0:
            self.scale_mul(center, 1.0 / scale_factor)

    def scale_mul(self, center: Vec2, mul_to_scale: float) -> None:
        """Multiply the scale around ``center``."""
        self.scale_new(center, self.scale * mul_to_scale)

    def scale_new(self, center: Vec2, new_scale: float) -> None:
        """Replace the scale, keeping ``center`` fixed."""
        self.offset = (self.offset - center) * (new_scale / self.scale) + center
        self.scale = new_scale

    def update(self, mouse_pos: Vec2, should_offset: bool) -> None:
        """Track the mouse; move by its motion when ``should_offset`` is true."""
        if should_offset:
            self.offset = self.offset + (mouse_pos - self._last_mouse_pos)
        self._last_mouse_pos = mouse_pos

    def camera_params(self, aspect: float) -> _Camera2DParams:
        """Zoom, offset, target and rotation for a 2D camera of the given aspect."""
        return _Camera2DParams(
            zoom=Vec2(self.scale, -self.scale * aspect),
            offset=Vec2(self.offset.x, -self.offset.y),
            target=Vec2(0.0, 0.0),
            rotation=0.0,
        )