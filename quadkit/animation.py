"""Sprite-sheet animation: one animation per row, one frame per tile."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from quadkit.rect import Rect
from quadkit.vector import Vec2


@dataclass
class Animation:
    """One animation: a row of ``frames`` tiles played at ``fps``."""

    name: str
    row: int
    frames: int
    fps: int


@dataclass
class AnimationFrame:
    """Area of the current frame in the source image and its size."""

    source_rect: Rect
    dest_size: Vec2


class AnimatedSprite:
    """All animations of one sprite sheet plus playback state."""

    def __init__(
        self,
        tile_width: int,
        tile_height: int,
        animations: Iterable[Animation],
        playing: bool,
    ) -> None:
        self.tile_width = float(tile_width)
        self.tile_height = float(tile_height)
        self.animations: List[Animation] = list(animations)
        self.playing = playing
        self._current_animation = 0
        self._time = 0.0
        self._frame = 0

    @property
    def current_animation(self) -> int:
        """Index of the chosen animation."""
        return self._current_animation

    @property
    def current_frame(self) -> int:
        """Index of the current frame within the animation."""
        return self._frame

    def set_animation(self, animation: int) -> None:
        """Choose the animation; the frame index is kept, wrapped to its length."""
        chosen = self.animations[animation]
        self._current_animation = animation
        self._frame %= chosen.frames

    def set_frame(self, frame: int) -> None:
        """Jump to a frame of the current animation."""
        self._frame = frame

    def update(self, frame_time: float) -> None:
        """Advance to the next frame once more than 1/fps seconds have passed."""
        animation = self.animations[self._current_animation]
        if self.playing:
            self._time += frame_time
            if self._time > 1.0 / animation.fps:
                self._frame += 1
                self._time = 0.0
        self._frame %= animation.frames

    def frame(self) -> AnimationFrame:
        """Source rectangle and size of the current frame."""
        animation = self.animations[self._current_animation]
        return AnimationFrame(
            source_rect=Rect(
                self.tile_width * self._frame,
                self.tile_height * animation.row,
                self.tile_width,
                self.tile_height,
            ),
            dest_size=Vec2(self.tile_width, self.tile_height),
        )