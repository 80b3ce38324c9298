"""
xdoctl/keyboard.py
Key presses and text typing.

keys examples: "Return", "ctrl+c", "alt+F4", "super"
"""

from typing import Sequence, Tuple, Union

from xdoctl.commands import Command, Keyboard
from xdoctl.models import InvocationResult
from xdoctl.options import OptionsArg

Keys = Union[str, Sequence[str]]


def _key_args(keys: Keys) -> Tuple[str, ...]:
    # keysyms never contain spaces, so a string is a space-separated sequence
    if isinstance(keys, str):
        return tuple(keys.split())
    return tuple(keys)


class KeyboardMixin:

    def send_key(self, keys: Keys, options: OptionsArg = None) -> InvocationResult:
        """
        Press and release a key or key combination, e.g. "ctrl+l" or
        ["ctrl+l", "BackSpace"].

        Options (KeyOption): WINDOW, DELAY, REPEAT and REPEAT_DELAY take a
        value; CLEAR_MODIFIERS releases held modifiers first.
        """
        return self.execute(Command(Keyboard.KEY, options), *_key_args(keys))

    def key_down(self, keys: Keys, options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Keyboard.KEY_DOWN, options), *_key_args(keys))

    def key_up(self, keys: Keys, options: OptionsArg = None) -> InvocationResult:
        return self.execute(Command(Keyboard.KEY_UP, options), *_key_args(keys))

    def type_text(self, text: str, options: OptionsArg = None) -> InvocationResult:
        """
        Type a string of text. TypeOption.DELAY sets the inter-keystroke delay
        in milliseconds (xdotool defaults to 12).
        """
        return self.execute(Command(Keyboard.TYPE, options), "--", text)
