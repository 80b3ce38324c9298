"""
xdoctl/mouse.py
Pointer movement and button events.
"""

import enum
from typing import Union

from xdoctl.commands import Command, Mouse
from xdoctl.models import InvocationResult
from xdoctl.options import OptionsArg


class MouseButton(enum.IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    SCROLL_UP = 4
    SCROLL_DOWN = 5
    SCROLL_LEFT = 6
    SCROLL_RIGHT = 7


Button = Union[MouseButton, int]


class MouseMixin:

    def move_mouse(self, x: int, y: int, options: OptionsArg = None) -> InvocationResult:
        """Move the pointer to absolute screen coordinates."""
        return self.execute(Command(Mouse.MOUSE_MOVE, options), x, y)

    def move_mouse_relative(self, x: int, y: int, options: OptionsArg = None) -> InvocationResult:
        """Move the pointer relative to its current position."""
        args = (x, y)
        if x < 0 or y < 0:
            # negative offsets would otherwise be parsed as flags
            args = ("--", x, y)
        return self.execute(Command(Mouse.MOUSE_MOVE_RELATIVE, options), *args)

    def click(self, button: Button = MouseButton.LEFT, options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Mouse.CLICK, options), int(button))

    def mouse_down(self, button: Button = MouseButton.LEFT,
                   options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Mouse.MOUSE_DOWN, options), int(button))

    def mouse_up(self, button: Button = MouseButton.LEFT,
                 options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Mouse.MOUSE_UP, options), int(button))

    def get_mouse_location(self, options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Mouse.GET_MOUSE_LOCATION, options))
