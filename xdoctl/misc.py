"""
xdoctl/misc.py
exec, sleep and version.
"""

from typing import Union

from xdoctl.commands import Command, Misc
from xdoctl.models import InvocationResult
from xdoctl.options import OptionsArg


class MiscMixin:

    def exec_program(self, program: str, *args: str, options: OptionsArg = None) -> InvocationResult:
        """
        Have xdotool execute a program. ExecOption.SYNC waits for it to exit,
        otherwise xdotool returns right after starting it.
        """
        return self.execute(Command(Misc.EXEC, options), program, *args)

    def sleep(self, seconds: Union[int, float]) -> InvocationResult:
        return self.execute(Command(Misc.SLEEP), seconds)

    def version(self) -> InvocationResult:
        return self.execute(Command(Misc.VERSION))
