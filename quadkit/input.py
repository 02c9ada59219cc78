"""Keyboard, mouse and touch state, fed by window events and read per frame."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Hashable, List, Optional, Tuple

from quadkit.vector import Vec2


class TouchPhase(Enum):
    """Lifecycle phase of a touch point."""

    STARTED = "started"
    STATIONARY = "stationary"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


class MouseButton(Enum):
    """Mouse buttons."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Touch:
    """One touch point with its position in pixels."""

    id: int
    phase: TouchPhase
    position: Vec2


class InputEventKind(Enum):
    """Kinds of recorded input events."""

    MOUSE_MOTION = "mouse_motion"
    MOUSE_WHEEL = "mouse_wheel"
    MOUSE_BUTTON_DOWN = "mouse_button_down"
    MOUSE_BUTTON_UP = "mouse_button_up"
    CHAR = "char"
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"
    TOUCH = "touch"


@dataclass(frozen=True)
class InputEvent:
    """A recorded input event; only the fields relevant to ``kind`` are set."""

    kind: InputEventKind
    x: float = 0.0
    y: float = 0.0
    button: Optional[MouseButton] = None
    character: Optional[str] = None
    keycode: Optional[Hashable] = None
    modifiers: Any = None
    repeat: bool = False
    phase: Optional[TouchPhase] = None
    touch_id: Optional[int] = None


def _to_local(position: Vec2, screen_width: float, screen_height: float) -> Vec2:
    """Map a pixel position to the range [-1, 1] on both axes."""
    return Vec2(position.x / screen_width, position.y / screen_height) * 2.0 - Vec2(1.0, 1.0)


class InputState:
    """Collects input events and answers per-frame input queries."""

    def __init__(self) -> None:
        self.simulate_mouse_with_touch = True
        self._keys_down: Dict[Hashable, None] = {}
        self._keys_pressed: Dict[Hashable, None] = {}
        self._keys_released: Dict[Hashable, None] = {}
        self._mouse_down: set = set()
        self._mouse_pressed: set = set()
        self._mouse_released: set = set()
        self._touches: Dict[int, Touch] = {}
        self._chars_pressed: List[str] = []
        self._mouse_position = Vec2(0.0, 0.0)
        self._mouse_wheel = Vec2(0.0, 0.0)
        self._prevent_quit = False
        self._quit_requested = False
        self._cursor_grabbed = False
        self._subscribers: List[List[InputEvent]] = []

    @property
    def cursor_grabbed(self) -> bool:
        """Whether the cursor is constrained to the window."""
        return self._cursor_grabbed

    def _broadcast(self, event: InputEvent) -> None:
        for queue in self._subscribers:
            queue.append(event)

    # Event handlers

    def mouse_motion_event(self, x: float, y: float) -> None:
        """Absolute mouse motion; ignored while the cursor is grabbed."""
        if self._cursor_grabbed:
            return
        self._mouse_position = Vec2(x, y)
        self._broadcast(InputEvent(InputEventKind.MOUSE_MOTION, x=x, y=y))

    def raw_mouse_motion(self, x: float, y: float) -> None:
        """Relative mouse motion; applied only while the cursor is grabbed."""
        if not self._cursor_grabbed:
            return
        self._mouse_position = self._mouse_position + Vec2(x, y)
        position = self._mouse_position
        self._broadcast(InputEvent(InputEventKind.MOUSE_MOTION, x=position.x, y=position.y))

    def mouse_wheel_event(self, x: float, y: float) -> None:
        """Wheel motion during this frame."""
        self._mouse_wheel = Vec2(x, y)
        self._broadcast(InputEvent(InputEventKind.MOUSE_WHEEL, x=x, y=y))

    def mouse_button_down_event(self, btn: MouseButton, x: float, y: float) -> None:
        """A mouse button went down at (x, y)."""
        self._mouse_down.add(btn)
        self._mouse_pressed.add(btn)
        self._broadcast(InputEvent(InputEventKind.MOUSE_BUTTON_DOWN, x=x, y=y, button=btn))
        if not self._cursor_grabbed:
            self._mouse_position = Vec2(x, y)

    def mouse_button_up_event(self, btn: MouseButton, x: float, y: float) -> None:
        """A mouse button went up at (x, y)."""
        self._mouse_down.discard(btn)
        self._mouse_released.add(btn)
        self._broadcast(InputEvent(InputEventKind.MOUSE_BUTTON_UP, x=x, y=y, button=btn))
        if not self._cursor_grabbed:
            self._mouse_position = Vec2(x, y)

    def touch_event(self, phase: TouchPhase, touch_id: int, x: float, y: float) -> None:
        """A touch point changed; may also raise mouse events."""
        self._touches[touch_id] = Touch(touch_id, phase, Vec2(x, y))
        if self.simulate_mouse_with_touch:
            if phase is TouchPhase.STARTED:
                self.mouse_button_down_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.ENDED:
                self.mouse_button_up_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.MOVED:
                self.mouse_motion_event(x, y)
        self._broadcast(
            InputEvent(InputEventKind.TOUCH, x=x, y=y, phase=phase, touch_id=touch_id)
        )

    def char_event(self, character: str, modifiers: Any, repeat: bool) -> None:
        """A character was typed."""
        self._chars_pressed.append(character)
        self._broadcast(
            InputEvent(
                InputEventKind.CHAR, character=character, modifiers=modifiers, repeat=repeat
            )
        )

    def key_down_event(self, keycode: Hashable, modifiers: Any, repeat: bool) -> None:
        """A key went down; repeats do not count as fresh presses."""
        self._keys_down[keycode] = None
        if not repeat:
            self._keys_pressed.pop(keycode, None)
            self._keys_pressed[keycode] = None
        self._broadcast(
            InputEvent(
                InputEventKind.KEY_DOWN, keycode=keycode, modifiers=modifiers, repeat=repeat
            )
        )

    def key_up_event(self, keycode: Hashable, modifiers: Any) -> None:
        """A key went up."""
        self._keys_down.pop(keycode, None)
        self._keys_released[keycode] = None
        self._broadcast(InputEvent(InputEventKind.KEY_UP, keycode=keycode, modifiers=modifiers))

    def quit_requested_event(self) -> bool:
        """Handle a quit request; return False when quitting was prevented."""
        if self._prevent_quit:
            self._quit_requested = True
            return False
        return True

    def end_frame(self) -> None:
        """Clear per-frame state and settle touch phases."""
        self._mouse_wheel = Vec2(0.0, 0.0)
        self._keys_pressed.clear()
        self._keys_released.clear()
        self._mouse_pressed.clear()
        self._mouse_released.clear()
        self._quit_requested = False
        self._touches = {
            touch_id: (
                replace(touch, phase=TouchPhase.STATIONARY)
                if touch.phase in (TouchPhase.STARTED, TouchPhase.MOVED)
                else touch
            )
            for touch_id, touch in self._touches.items()
            if touch.phase not in (TouchPhase.ENDED, TouchPhase.CANCELLED)
        }

    # Queries and settings

    def set_cursor_grab(self, grab: bool) -> None:
        """Constrain the mouse to the window, or release it."""
        self._cursor_grabbed = grab

    def prevent_quit(self) -> None:
        """Turn quit requests into a flag instead of quitting."""
        self._prevent_quit = True

    def is_quit_requested(self) -> bool:
        """Whether a prevented quit was requested this frame."""
        return self._quit_requested

    def is_key_pressed(self, keycode: Hashable) -> bool:
        """Whether the key was pressed this frame."""
        return keycode in self._keys_pressed

    def is_key_down(self, keycode: Hashable) -> bool:
        """Whether the key is held down."""
        return keycode in self._keys_down

    def is_key_released(self, keycode: Hashable) -> bool:
        """Whether the key was released this frame."""
        return keycode in self._keys_released

    def get_char_pressed(self) -> Optional[str]:
        """Take the most recently typed character from the queue, or None."""
        return self._chars_pressed.pop() if self._chars_pressed else None

    def get_last_key_pressed(self) -> Optional[Hashable]:
        """The key pressed most recently this frame, or None."""
        return next(reversed(self._keys_pressed), None)

    def is_mouse_button_down(self, btn: MouseButton) -> bool:
        """Whether the button is held down."""
        return btn in self._mouse_down

    def is_mouse_button_pressed(self, btn: MouseButton) -> bool:
        """Whether the button was pressed this frame."""
        return btn in self._mouse_pressed

    def is_mouse_button_released(self, btn: MouseButton) -> bool:
        """Whether the button was released this frame."""
        return btn in self._mouse_released

    def mouse_position(self, dpi_scale: float) -> Tuple[float, float]:
        """Mouse position in logical pixels."""
        return (self._mouse_position.x / dpi_scale, self._mouse_position.y / dpi_scale)

    def mouse_position_local(self, screen_width: float, screen_height: float) -> Vec2:
        """Mouse position mapped to [-1, 1] on both axes."""
        return _to_local(self._mouse_position, screen_width, screen_height)

    def mouse_wheel(self) -> Tuple[float, float]:
        """Wheel motion during this frame."""
        return (self._mouse_wheel.x, self._mouse_wheel.y)

    def touches(self) -> List[Touch]:
        """Current touches with positions in pixels."""
        return list(self._touches.values())

    def touches_local(self, screen_width: float, screen_height: float) -> List[Touch]:
        """Current touches with positions mapped to [-1, 1]."""
        return [
            replace(touch, position=_to_local(touch.position, screen_width, screen_height))
            for touch in self._touches.values()
        ]

    def register_input_subscriber(self) -> int:
        """Start recording events for a new subscriber; return its id."""
        self._subscribers.append([])
        return len(self._subscribers) - 1

    def drain_input_events(self, subscriber: int) -> List[InputEvent]:
        """Return and forget the events recorded for a subscriber."""
        queue = self._subscribers[subscriber]
        events = list(queue)
        queue.clear()
        return events