"""
xdoctl/window.py
Window queries and window manipulation commands.

Window ids are passed through as opaque strings, exactly as xdotool
printed them (decimal ids, or "%1"/"%@" window-stack references).
"""

from typing import Union

from xdoctl.commands import Command, Window
from xdoctl.models import InvocationResult
from xdoctl.options import OptionsArg

# windowsize accepts pixels or percentages such as "50%"
Dimension = Union[int, str]


class WindowMixin:

    # ── queries ───────────────────────────────────────────────────────────────

    def search(self, pattern: str, options: OptionsArg = None) -> InvocationResult:
        """
        Search for windows whose title, class or name matches the regular
        expression. Matching ids are printed one per line.

        Options (SearchOption): CLASS, CLASSNAME, NAME, ROLE restrict which
        properties are matched; PID, SCREEN, DESKTOP, LIMIT, MAX_DEPTH take a
        value; ONLY_VISIBLE, SYNC, ALL, ANY are plain flags.
        """
        return self.execute(Command(Window.SEARCH, options), pattern)

    def get_window_focus(self, options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Window.GET_WINDOW_FOCUS, options))

    def get_window_pid(self, window: str) -> InvocationResult:
        return self.execute(Command(Window.GET_WINDOW_PID), window)

    def get_window_name(self, window: str) -> InvocationResult:
        return self.execute(Command(Window.GET_WINDOW_NAME), window)

    def get_window_classname(self, window: str) -> InvocationResult:
        return self.execute(Command(Window.GET_WINDOW_CLASSNAME), window)

    def get_window_geometry(self, window: str, options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Window.GET_WINDOW_GEOMETRY, options), window)

    def get_display_geometry(self, options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Window.GET_DISPLAY_GEOMETRY, options))

    def select_window(self) -> InvocationResult:
        """Let the user click a window and output its id. Blocks until they do."""
        return self.execute(Command(Window.SELECT_WINDOW))

    # ── manipulation ──────────────────────────────────────────────────────────

    def focus_window(self, window: str, options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Window.WINDOW_FOCUS, options), window)

    def set_window(self, window: str, options: OptionsArg = None) -> InvocationResult:
        """
        Set window properties.

            server.set_window(wid, SetWindowOption.NAME.with_value("editor"))
        """
        return self.execute(Command(Window.SET_WINDOW, options), window)

    def resize_window(self, window: str, width: Dimension, height: Dimension,
                      options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Window.WINDOW_SIZE, options), window, width, height)

    def move_window(self, window: str, x: int, y: int,
                    options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Window.WINDOW_MOVE, options), window, x, y)

    def map_window(self, window: str, options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Window.WINDOW_MAP, options), window)

    def unmap_window(self, window: str, options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Window.WINDOW_UNMAP, options), window)

    def minimize_window(self, window: str, options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Window.WINDOW_MINIMIZE, options), window)

    def raise_window(self, window: str) -> InvocationResult:
        return self.execute(Command(Window.WINDOW_RAISE), window)

    def reparent_window(self, window: str, parent: str) -> InvocationResult:
        return self.execute(Command(Window.WINDOW_REPARENT), window, parent)

    def kill_window(self, window: str) -> InvocationResult:
        """Kill the client owning the window. Every window of that client goes away."""
        return self.execute(Command(Window.WINDOW_KILL), window)

    def close_window(self, window: str) -> InvocationResult:
        return self.execute(Command(Window.WINDOW_CLOSE), window)
