"""
xdoctl/commands.py
Typed xdotool sub-commands and their rendering to command-line tokens.

A Command pairs one action (a member of a category enum) with an
OptionSet of the kind that action accepts:

    cmd = Command(Window.SEARCH, OptionSet(SearchOption.NAME))
    str(cmd)   # "search --name"

Positional arguments are never part of a Command; the executor appends
them after the rendered tokens.
"""

import enum
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Type

from xdoctl.options import (
    EMPTY, ClickOption, ExecOption, GetDesktopViewportOption,
    GetDisplayGeometryOption, GetMouseLocationOption, GetWindowFocusOption,
    GetWindowGeometryOption, KeyOption, MouseButtonOption,
    MouseMoveOption, MouseMoveRelativeOption, Option, OptionsArg,
    OptionSet, SearchOption, SetDesktopOption, SetWindowOption,
    SyncOption, TypeOption, WindowMoveOption, WindowSizeOption,
    as_option_set,
)


class Category(enum.Enum):
    DESKTOP = "desktop"
    WINDOW = "window"
    KEYBOARD = "keyboard"
    MOUSE = "mouse"
    MISC = "misc"


class Action(enum.Enum):
    """Base class for the per-category action enums."""

    def __init__(self, subcommand: str, option_kind: Optional[Type[Option]] = None):
        self.subcommand = subcommand
        self.option_kind = option_kind

    @property
    def category(self) -> Category:
        return _CATEGORIES[type(self)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"


# ── categories ───────────────────────────────────────────────────────────────

class Desktop(Action):
    WINDOW_ACTIVATE = ("windowactivate", SyncOption)
    GET_ACTIVE_WINDOW = "getactivewindow"
    SET_NUM_DESKTOPS = "set_num_desktops"
    GET_NUM_DESKTOPS = "get_num_desktops"
    SET_DESKTOP_VIEWPORT = "set_desktop_viewport"
    GET_DESKTOP_VIEWPORT = ("get_desktop_viewport", GetDesktopViewportOption)
    SET_DESKTOP = ("set_desktop", SetDesktopOption)
    GET_DESKTOP = "get_desktop"
    SET_DESKTOP_FOR_WINDOW = "set_desktop_for_window"
    GET_DESKTOP_FOR_WINDOW = "get_desktop_for_window"


class Window(Action):
    SEARCH = ("search", SearchOption)
    GET_WINDOW_FOCUS = ("getwindowfocus", GetWindowFocusOption)
    GET_WINDOW_PID = "getwindowpid"
    GET_WINDOW_NAME = "getwindowname"
    GET_WINDOW_CLASSNAME = "getwindowclassname"
    GET_WINDOW_GEOMETRY = ("getwindowgeometry", GetWindowGeometryOption)
    GET_DISPLAY_GEOMETRY = ("getdisplaygeometry", GetDisplayGeometryOption)
    WINDOW_FOCUS = ("windowfocus", SyncOption)
    SELECT_WINDOW = "selectwindow"
    SET_WINDOW = ("set_window", SetWindowOption)
    WINDOW_SIZE = ("windowsize", WindowSizeOption)
    WINDOW_MOVE = ("windowmove", WindowMoveOption)
    WINDOW_MAP = ("windowmap", SyncOption)
    WINDOW_UNMAP = ("windowunmap", SyncOption)
    WINDOW_MINIMIZE = ("windowminimize", SyncOption)
    WINDOW_RAISE = "windowraise"
    WINDOW_REPARENT = "windowreparent"
    WINDOW_KILL = "windowkill"
    WINDOW_CLOSE = "windowclose"


class Keyboard(Action):
    KEY = ("key", KeyOption)
    KEY_DOWN = ("keydown", KeyOption)
    KEY_UP = ("keyup", KeyOption)
    TYPE = ("type", TypeOption)


class Mouse(Action):
    MOUSE_MOVE = ("mousemove", MouseMoveOption)
    MOUSE_MOVE_RELATIVE = ("mousemove_relative", MouseMoveRelativeOption)
    CLICK = ("click", ClickOption)
    MOUSE_DOWN = ("mousedown", MouseButtonOption)
    MOUSE_UP = ("mouseup", MouseButtonOption)
    GET_MOUSE_LOCATION = ("getmouselocation", GetMouseLocationOption)


class Misc(Action):
    EXEC = ("exec", ExecOption)
    SLEEP = "sleep"
    VERSION = "version"


_CATEGORIES: Dict[Type[Action], Category] = {
    Desktop: Category.DESKTOP,
    Window: Category.WINDOW,
    Keyboard: Category.KEYBOARD,
    Mouse: Category.MOUSE,
    Misc: Category.MISC,
}

_BY_SUBCOMMAND: Dict[str, Action] = {
    action.subcommand: action
    for kind in _CATEGORIES
    for action in kind
}


def lookup(subcommand: str) -> Action:
    """Resolve an xdotool sub-command literal such as "windowactivate"."""
    try:
        return _BY_SUBCOMMAND[subcommand]
    except KeyError:
        raise KeyError(f"unknown xdotool command: {subcommand!r}") from None


# ── command ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Command:
    action: Action
    options: OptionSet = field(default=EMPTY)

    def __init__(self, action: Action, options: OptionsArg = None):
        if not isinstance(action, Action):
            raise TypeError(f"not an xdotool action: {action!r}")
        opts = as_option_set(options)
        if opts.kind is not None and opts.kind is not action.option_kind:
            accepted = action.option_kind.__name__ if action.option_kind else "no options"
            raise TypeError(
                f"{action.subcommand} accepts {accepted}, got {opts.kind.__name__}")
        object.__setattr__(self, "action", action)
        object.__setattr__(self, "options", opts)

    @property
    def category(self) -> Category:
        return self.action.category

    def tokens(self) -> Tuple[str, ...]:
        return (self.action.subcommand, *self.options.tokens())

    def __str__(self) -> str:
        return " ".join(self.tokens())
