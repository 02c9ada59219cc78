"""Frame profiler: nested timing zones and logged strings."""

from __future__ import annotations

import copy
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional


@dataclass
class Zone:
    """A named, timed span of work; zones nest through ``children``."""

    name: str
    start_time: float
    duration: float = 0.0
    children: List[Zone] = field(default_factory=list)


@dataclass
class Frame:
    """Zones recorded during one frame and the frame's full duration."""

    full_frame_time: float = 0.0
    zones: List[Zone] = field(default_factory=list)


class Profiler:
    """Collects zones per frame; enabling or disabling takes effect on reset."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock if clock is not None else time.perf_counter
        self._frame = Frame()
        self._prev_frame = Frame()
        self._active: List[Zone] = []
        self._enabled = False
        self._enable_request: Optional[bool] = None
        self._strings: List[str] = []

    @property
    def enabled(self) -> bool:
        """Whether zones are being recorded in the current frame."""
        return self._enabled

    def enable(self) -> None:
        """Start recording zones from the next frame on."""
        self._enable_request = True

    def disable(self) -> None:
        """Stop recording zones from the next frame on."""
        self._enable_request = False

    def begin_zone(self, name: str) -> None:
        """Open a zone nested in the currently open one, if recording."""
        if not self._enabled:
            return
        siblings = self._active[-1].children if self._active else self._frame.zones
        zone = Zone(name=name, start_time=self._clock())
        siblings.append(zone)
        self._active.append(zone)

    def end_zone(self) -> None:
        """Close the innermost open zone, if recording."""
        if not self._enabled:
            return
        if not self._active:
            raise RuntimeError("end_zone called without begin_zone")
        zone = self._active.pop()
        zone.duration = self._clock() - zone.start_time

    @contextmanager
    def zone(self, name: str) -> Iterator[None]:
        """Record the enclosed block as a zone."""
        self.begin_zone(name)
        try:
            yield
        finally:
            self.end_zone()

    def reset(self, frame_time: float) -> None:
        """Finish the current frame and start a new one."""
        if self._active:
            raise RuntimeError("New frame started with unpaired begin/end zones.")
        self._frame.full_frame_time = frame_time
        self._prev_frame = self._frame
        self._frame = Frame()
        if self._enable_request is not None:
            self._enabled = self._enable_request
            self._enable_request = None

    def frame(self) -> Frame:
        """A copy of the last finished frame."""
        return copy.deepcopy(self._prev_frame)

    def log_string(self, string: str) -> None:
        """Append a string to the log."""
        self._strings.append(string)

    def strings(self) -> List[str]:
        """A copy of all logged strings."""
        return list(self._strings)

    @contextmanager
    def log_time(self, name: str) -> Iterator[None]:
        """Log how long the enclosed block took."""
        start = self._clock()
        try:
            yield
        finally:
            self.log_string(f"Time query: {name}, {self._clock() - start:.1f}s")