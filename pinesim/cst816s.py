"""Simulated CST816S touch controller fed by mouse state."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Tuple

from pinesim.gpio import MOUSE_BUTTON_LMASK
from pinesim.nrflog import log_info

MAX_X = 240
MAX_Y = 240
_MOVE_THRESHOLD = 20
_LONG_PRESS_SECONDS = 1.0


class Gesture(IntEnum):
    """Gestures reported by the touch controller."""

    NONE = 0x00
    SLIDE_DOWN = 0x01
    SLIDE_UP = 0x02
    SLIDE_LEFT = 0x03
    SLIDE_RIGHT = 0x04
    SINGLE_TAP = 0x05
    DOUBLE_TAP = 0x0B
    LONG_PRESS = 0x0C


@dataclass
class TouchInfo:
    """One sample of the touch panel."""

    x: int = 0
    y: int = 0
    gesture: Gesture = Gesture.NONE
    touching: bool = False
    is_valid: bool = False


class Cst816S:
    """Touch panel that turns mouse movement into taps, swipes and long presses.

    mouse_state is a callable returning (x, y, buttons) in window pixels;
    coordinates are divided by zoom. clock returns seconds.
    """

    def __init__(self, mouse_state, zoom=1, clock=None):
        self._mouse_state: Callable[[], Tuple[int, int, int]] = mouse_state
        self.zoom = zoom
        self._clock: Callable[[], float] = clock or time.monotonic
        self._chip_id = 0xB4
        self._vendor_id = 0
        self._fw_version = 1
        self._pressed_since = 0.0
        self._is_pressed = False
        self._is_long_press = False
        self._is_stationary = True
        self._is_swipe = False
        self._x_start = 0
        self._y_start = 0

    def init(self):
        """Initialise the controller; always succeeds."""
        return True

    def get_touch_info(self):
        """Sample the mouse and return the touch state with any gesture."""
        x, y, buttons = self._mouse_state()
        x = int(x / self.zoom)
        y = int(y / self.zoom)

        info = TouchInfo(
            x=x & 0xFFFF,
            y=y & 0xFFFF,
            touching=(buttons & MOUSE_BUTTON_LMASK) != 0,
            is_valid=0 < x <= MAX_X and 0 < y <= MAX_Y,
        )
        if not info.is_valid:
            return info

        if not self._is_pressed and info.touching:
            self._pressed_since = self._clock()
            self._is_pressed = True
            self._is_long_press = False
            self._is_swipe = False
            self._is_stationary = True
            self._x_start = info.x
            self._y_start = info.y
        elif self._is_pressed and info.touching:
            x_diff, y_diff = self._offset(info)
            if self._is_stationary and math.hypot(x_diff, y_diff) > _MOVE_THRESHOLD:
                self._is_stationary = False
            if not self._is_long_press and not self._is_swipe:
                duration = self._clock() - self._pressed_since
                if self._is_stationary and duration > _LONG_PRESS_SECONDS:
                    self._is_long_press = True
                    info.gesture = Gesture.LONG_PRESS
                elif not self._is_stationary:
                    self._is_swipe = True
                    if abs(x_diff) > abs(y_diff):
                        info.gesture = Gesture.SLIDE_LEFT if x_diff < 0 else Gesture.SLIDE_RIGHT
                    else:
                        info.gesture = Gesture.SLIDE_UP if y_diff < 0 else Gesture.SLIDE_DOWN
        elif self._is_pressed and not info.touching:
            self._is_pressed = False
            x_diff, y_diff = self._offset(info)
            if (
                math.hypot(x_diff, y_diff) < _MOVE_THRESHOLD
                and self._is_stationary
                and not self._is_long_press
                and not self._is_swipe
            ):
                info.gesture = Gesture.SINGLE_TAP
        return info

    def _offset(self, info: TouchInfo) -> Tuple[float, float]:
        return float(info.x - self._x_start), float(info.y - self._y_start)

    def sleep(self):
        """Put the panel to sleep."""
        log_info("[TOUCHPANEL] Sleep")

    def wakeup(self):
        """Wake the panel and re-initialise it."""
        self.init()
        log_info("[TOUCHPANEL] Wakeup")

    def chip_id(self):
        """Return the chip identifier."""
        return self._chip_id

    def vendor_id(self):
        """Return the vendor identifier."""
        return self._vendor_id

    def fw_version(self):
        """Return the firmware version."""
        return self._fw_version

    def _check_device_ids(self) -> bool:
        return self._chip_id == 0xB4 and self._vendor_id == 0 and self._fw_version == 1