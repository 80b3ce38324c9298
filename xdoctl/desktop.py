"""
xdoctl/desktop.py
Desktop and workspace commands (windowactivate, set_desktop, viewports, ...).
"""

from xdoctl.commands import Command, Desktop
from xdoctl.models import InvocationResult
from xdoctl.options import OptionsArg


class DesktopMixin:

    def activate_window(self, window: str, options: OptionsArg = None) -> InvocationResult:
        """
        Activate the window. Unlike focus_window, this switches to the
        window's desktop first if it lives on another one.

        Options: SyncOption.SYNC waits until the window is actually active.
        """
        return self.execute(Command(Desktop.WINDOW_ACTIVATE, options), window)

    def get_active_window(self) -> InvocationResult:
        """
        Output the active window id. Usually more reliable than
        get_window_focus.
        """
        return self.execute(Command(Desktop.GET_ACTIVE_WINDOW))

    def set_num_desktops(self, num: int) -> InvocationResult:
        return self.execute(Command(Desktop.SET_NUM_DESKTOPS), num)

    def get_num_desktops(self) -> InvocationResult:
        return self.execute(Command(Desktop.GET_NUM_DESKTOPS))

    def set_desktop_viewport(self, x: int, y: int) -> InvocationResult:
        """Move the viewport to the given position. Not all requests are obeyed."""
        return self.execute(Command(Desktop.SET_DESKTOP_VIEWPORT), x, y)

    def get_desktop_viewport(self, options: OptionsArg = None) -> InvocationResult:
        """
        Report the current viewport position. Some window managers use one
        large viewport instead of separate virtual desktops.
        """
        return self.execute(Command(Desktop.GET_DESKTOP_VIEWPORT, options))

    def set_desktop(self, desktop_number: int, options: OptionsArg = None) -> InvocationResult:
        """
        Switch to the given desktop.

        Options: SetDesktopOption.RELATIVE moves relative to the current desktop.
        """
        return self.execute(Command(Desktop.SET_DESKTOP, options), desktop_number)

    def get_desktop(self) -> InvocationResult:
        return self.execute(Command(Desktop.GET_DESKTOP))

    def set_desktop_for_window(self, window: str, desktop_number: int) -> InvocationResult:
        return self.execute(Command(Desktop.SET_DESKTOP_FOR_WINDOW), window, desktop_number)

    def get_desktop_for_window(self, window: str) -> InvocationResult:
        return self.execute(Command(Desktop.GET_DESKTOP_FOR_WINDOW), window)
