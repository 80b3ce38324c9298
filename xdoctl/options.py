"""
xdoctl/options.py
Option flags accepted by xdotool sub-commands.

Each option set is an Enum whose members map to one literal flag token.
Members declared with ``takes_value`` render as ``<flag> <value>``.
An OptionSet always renders in the enumeration's definition order,
regardless of the order options were given in.
"""

import enum
from typing import Any, Dict, Iterable, Iterator, NamedTuple, Optional, Tuple, Type, Union


class Option(enum.Enum):
    """Base class for every xdotool option set."""

    def __init__(self, flag: str, takes_value: bool = False):
        self.flag = flag
        self.takes_value = takes_value

    def with_value(self, value: Any) -> "OptionValue":
        return OptionValue(self, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"


class OptionValue(NamedTuple):
    option: Option
    value: Any


OptionLike = Union[Option, OptionValue]
OptionsArg = Union[None, "OptionSet", OptionLike, Iterable[OptionLike]]


class OptionSet:
    """
    Immutable set of options from a single Option enumeration.

        OptionSet(KeyOption.CLEAR_MODIFIERS, KeyOption.DELAY.with_value(12))

    Adding a member twice keeps one entry, the last value wins.
    """

    __slots__ = ("_kind", "_entries")

    def __init__(self, *options: OptionLike):
        kind: Optional[Type[Option]] = None
        values: Dict[Option, Optional[str]] = {}

        for item in options:
            if isinstance(item, OptionValue):
                opt, value = item.option, item.value
            else:
                opt, value = item, None

            if not isinstance(opt, Option):
                raise TypeError(f"not an xdotool option: {opt!r}")
            if kind is None:
                kind = type(opt)
            elif type(opt) is not kind:
                raise TypeError(
                    f"cannot mix {kind.__name__} and {type(opt).__name__} in one option set")

            if opt.takes_value and value is None:
                raise ValueError(f"{opt.flag} requires a value")
            if not opt.takes_value and value is not None:
                raise ValueError(f"{opt.flag} does not take a value")

            if value is not None:
                value = str(value)
                if not value:
                    raise ValueError(f"{opt.flag} requires a non-empty value")
            values[opt] = value

        if kind is not None:
            order = {member: i for i, member in enumerate(kind)}
            ordered = sorted(values.items(), key=lambda entry: order[entry[0]])
        else:
            ordered = []

        self._kind = kind
        self._entries: Tuple[Tuple[Option, Optional[str]], ...] = tuple(ordered)

    @property
    def kind(self) -> Optional[Type[Option]]:
        """The Option enumeration this set draws from, None when empty."""
        return self._kind

    def tokens(self) -> Tuple[str, ...]:
        out = []
        for opt, value in self._entries:
            out.append(opt.flag)
            if value is not None:
                out.append(value)
        return tuple(out)

    def __iter__(self) -> Iterator[Option]:
        return (opt for opt, _ in self._entries)

    def __contains__(self, opt: object) -> bool:
        return any(opt is member for member, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionSet):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __str__(self) -> str:
        return " ".join(self.tokens())

    def __repr__(self) -> str:
        parts = [repr(opt) if value is None else f"{opt!r}={value}"
                 for opt, value in self._entries]
        return f"OptionSet({', '.join(parts)})"


EMPTY = OptionSet()


def as_option_set(options: OptionsArg) -> OptionSet:
    """Accept None, a single option, an iterable of options or an OptionSet."""
    if options is None:
        return EMPTY
    if isinstance(options, OptionSet):
        return options
    if isinstance(options, (Option, OptionValue)):
        return OptionSet(options)
    return OptionSet(*options)


# ── shared ────────────────────────────────────────────────────────────────────

class SyncOption(Option):
    SYNC = "--sync"


# ── desktop ───────────────────────────────────────────────────────────────────

class SetDesktopOption(Option):
    RELATIVE = "--relative"


class GetDesktopViewportOption(Option):
    SHELL = "--shell"


# ── window ────────────────────────────────────────────────────────────────────

class SearchOption(Option):
    CLASS = "--class"
    CLASSNAME = "--classname"
    ROLE = "--role"
    NAME = "--name"
    PID = ("--pid", True)
    SCREEN = ("--screen", True)
    DESKTOP = ("--desktop", True)
    LIMIT = ("--limit", True)
    ONLY_VISIBLE = "--onlyvisible"
    MAX_DEPTH = ("--maxdepth", True)
    SYNC = "--sync"
    ALL = "--all"
    ANY = "--any"


class GetWindowFocusOption(Option):
    # report the window with focus even if it is not a top-level client
    FOCUS_ONLY = "-f"


class GetWindowGeometryOption(Option):
    SHELL = "--shell"


class GetDisplayGeometryOption(Option):
    SHELL = "--shell"
    SCREEN = ("--screen", True)


class SetWindowOption(Option):
    NAME = ("--name", True)
    ICON_NAME = ("--icon-name", True)
    ROLE = ("--role", True)
    CLASSNAME = ("--classname", True)
    CLASS = ("--class", True)
    URGENCY = ("--urgency", True)
    OVERRIDE_REDIRECT = ("--overrideredirect", True)


class WindowSizeOption(Option):
    USE_HINTS = "--usehints"
    SYNC = "--sync"


class WindowMoveOption(Option):
    SYNC = "--sync"
    RELATIVE = "--relative"


# ── keyboard ──────────────────────────────────────────────────────────────────

class KeyOption(Option):
    WINDOW = ("--window", True)
    CLEAR_MODIFIERS = "--clearmodifiers"
    DELAY = ("--delay", True)
    REPEAT = ("--repeat", True)
    REPEAT_DELAY = ("--repeat-delay", True)


class TypeOption(Option):
    WINDOW = ("--window", True)
    DELAY = ("--delay", True)
    CLEAR_MODIFIERS = "--clearmodifiers"


# ── mouse ─────────────────────────────────────────────────────────────────────

class MouseMoveOption(Option):
    WINDOW = ("--window", True)
    SCREEN = ("--screen", True)
    POLAR = "--polar"
    CLEAR_MODIFIERS = "--clearmodifiers"
    SYNC = "--sync"


class MouseMoveRelativeOption(Option):
    POLAR = "--polar"
    CLEAR_MODIFIERS = "--clearmodifiers"
    SYNC = "--sync"


class ClickOption(Option):
    CLEAR_MODIFIERS = "--clearmodifiers"
    REPEAT = ("--repeat", True)
    DELAY = ("--delay", True)
    WINDOW = ("--window", True)


class MouseButtonOption(Option):
    CLEAR_MODIFIERS = "--clearmodifiers"
    WINDOW = ("--window", True)


class GetMouseLocationOption(Option):
    SHELL = "--shell"


# ── misc ──────────────────────────────────────────────────────────────────────

class ExecOption(Option):
    SYNC = "--sync"
    ARGS = ("--args", True)
    TERMINATOR = ("--terminator", True)
