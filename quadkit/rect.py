"""Rectangles, circles and small geometric helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, TypeVar

from quadkit.vector import Vec2

T = TypeVar("T")


@dataclass
class Rect:
    """A 2D rectangle given by its top-left corner, width and height."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def point(self) -> Vec2:
        """Top-left corner."""
        return Vec2(self.x, self.y)

    def size(self) -> Vec2:
        """Width and height."""
        return Vec2(self.w, self.h)

    def center(self) -> Vec2:
        """Center position."""
        return Vec2(self.x + self.w * 0.5, self.y + self.h * 0.5)

    def left(self) -> float:
        return self.x

    def right(self) -> float:
        return self.x + self.w

    def top(self) -> float:
        return self.y

    def bottom(self) -> float:
        return self.y + self.h

    def move_to(self, destination: Vec2) -> None:
        """Move the top-left corner to ``destination``."""
        self.x = destination.x
        self.y = destination.y

    def scale(self, sx: float, sy: float) -> None:
        """Scale width and height in place."""
        self.w *= sx
        self.h *= sy

    def contains(self, point: Vec2) -> bool:
        """Whether the point lies inside (right and bottom edges excluded)."""
        return (
            self.left() <= point.x < self.right()
            and self.top() <= point.y < self.bottom()
        )

    def overlaps(self, other: Rect) -> bool:
        """Whether the two rectangles overlap."""
        return (
            self.left() < other.right()
            and self.right() > other.left()
            and self.top() < other.bottom()
            and self.bottom() > other.top()
        )

    def combine_with(self, other: Rect) -> Rect:
        """Smallest rectangle holding both rectangles."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        w = max(self.right(), other.right()) - x
        h = max(self.bottom(), other.bottom()) - y
        return Rect(x, y, w, h)

    def intersect(self, other: Rect) -> Optional[Rect]:
        """Intersection of both rectangles, or None if they do not meet."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right(), other.right())
        bottom = min(self.bottom(), other.bottom())
        if right < left or bottom < top:
            return None
        return Rect(left, top, right - left, bottom - top)

    def offset(self, offset: Vec2) -> Rect:
        """A copy translated by ``offset``."""
        return Rect(self.x + offset.x, self.y + offset.y, self.w, self.h)


@dataclass
class RectOffset:
    """Offsets for the four sides of a rectangle."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


@dataclass
class Circle:
    """A circle given by its center and radius."""

    x: float = 0.0
    y: float = 0.0
    r: float = 0.0

    def point(self) -> Vec2:
        """Center of the circle."""
        return Vec2(self.x, self.y)

    def radius(self) -> float:
        return self.r

    def move_to(self, destination: Vec2) -> None:
        """Move the center to ``destination``."""
        self.x = destination.x
        self.y = destination.y

    def scale(self, sr: float) -> None:
        """Scale the radius in place."""
        self.r *= sr

    def contains(self, pos: Vec2) -> bool:
        """Whether the point lies strictly inside the circle."""
        return pos.distance(self.point()) < self.r

    def overlaps(self, other: Circle) -> bool:
        """Whether two circles overlap."""
        return self.point().distance(other.point()) < self.r + other.r

    def overlaps_rect(self, rect: Rect) -> bool:
        """Whether the circle overlaps a rectangle."""
        center = rect.center()
        dist_x = abs(self.x - center.x)
        dist_y = abs(self.y - center.y)
        half_w = rect.w / 2.0
        half_h = rect.h / 2.0
        if dist_x > half_w + self.r or dist_y > half_h + self.r:
            return False
        if dist_x <= half_w or dist_y <= half_h:
            return True
        lhs = dist_x - half_w
        rhs = dist_y - half_h
        return lhs * lhs + rhs * rhs <= self.r * self.r

    def offset(self, offset: Vec2) -> Circle:
        """A copy translated by ``offset``."""
        return Circle(self.x + offset.x, self.y + offset.y, self.r)


def polar_to_cartesian(rho: float, theta: float) -> Vec2:
    """Convert polar coordinates to cartesian coordinates."""
    return Vec2(rho * math.cos(theta), rho * math.sin(theta))


def cartesian_to_polar(cartesian: Vec2) -> Vec2:
    """Convert cartesian coordinates to (rho, theta)."""
    return Vec2(
        math.sqrt(cartesian.x**2 + cartesian.y**2),
        math.atan2(cartesian.y, cartesian.x),
    )


def clamp(value: T, minimum: T, maximum: T) -> T:
    """Bound ``value`` to the range [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value