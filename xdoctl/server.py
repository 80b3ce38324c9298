"""
xdoctl/server.py
XServer: the display/authority context every xdotool command runs against.

xdotool and xwd are well-maintained CLI tools; spawning them with
subprocess is the simplest way to drive X11 from Python without a C
binding. Every call blocks until the child exits and hands back its
exit status and raw output. Nothing is interpreted here.

    server = XServer(display=0, auth="/home/me/.Xauthority")
    result = server.search("firefox", SearchOption.NAME)
    window_ids = result.lines()
"""

import logging
import os
import subprocess
from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field

from xdoctl.commands import Command
from xdoctl.config import XConfig
from xdoctl.desktop import DesktopMixin
from xdoctl.keyboard import KeyboardMixin
from xdoctl.misc import MiscMixin
from xdoctl.models import Invocation, InvocationResult
from xdoctl.mouse import MouseMixin
from xdoctl.window import WindowMixin

log = logging.getLogger(__name__)


class SpawnError(RuntimeError):
    """The child process could not be started at all."""

    def __init__(self, invocation: Invocation, cause: OSError):
        super().__init__(f"failed to execute {invocation.line!r}: {cause}")
        self.invocation = invocation
        self.cause = cause


class XServer(DesktopMixin, WindowMixin, KeyboardMixin, MouseMixin, MiscMixin, BaseModel):
    """Immutable; one instance may be shared between threads."""

    model_config = ConfigDict(frozen=True)

    display:      int = Field(..., ge=0)
    auth:         str
    xdotool_path: str = "xdotool"
    xwd_path:     str = "xwd"

    @classmethod
    def from_config(cls, config: XConfig) -> "XServer":
        return cls(
            display=config.display,
            auth=config.auth,
            xdotool_path=config.xdotool_path,
            xwd_path=config.xwd_path,
        )

    @classmethod
    def from_env(cls) -> "XServer":
        return cls.from_config(XConfig())

    @property
    def environment(self) -> Dict[str, str]:
        """Variables overridden in every child process."""
        return {"DISPLAY": f":{self.display}", "XAUTHORITY": self.auth}

    # ── execution ────────────────────────────────────────────────────────────

    def run(self, command: Command, args: str = "") -> InvocationResult:
        """
        Execute an xdotool command through ``/bin/sh -c``.

        This is the only method you strictly need; the convenience methods
        cover the common commands and should be preferred. ``args`` is
        appended verbatim, so shell metacharacters in it are interpreted
        by the shell. Quote them yourself if they must reach xdotool
        literally.

        Example, search a window:

            cmd = Command(Window.SEARCH, OptionSet(SearchOption.NAME))
            result = server.run(cmd, "firefox")
            sys.stdout.buffer.write(result.stdout)
        """
        invocation = Invocation(
            program=self.xdotool_path,
            command=command.tokens(),
            args=(args,) if args else (),
            shell=True,
        )
        return self._spawn(invocation)

    def screenshot(self) -> InvocationResult:
        """Dump the root window with xwd. stdout holds the XWD image bytes."""
        return self._spawn(Invocation(program=self.xwd_path, command=("-root",)))

    def execute(self, command: Command, *args: Union[str, int, float]) -> InvocationResult:
        """
        Run an xdotool command as an argument vector, no shell involved.
        Every positional argument becomes exactly one argv entry.
        """
        invocation = Invocation(
            program=self.xdotool_path,
            command=command.tokens(),
            args=tuple(str(a) for a in args),
        )
        return self._spawn(invocation)

    def _spawn(self, invocation: Invocation) -> InvocationResult:
        env = os.environ.copy()
        env.update(self.environment)

        log.debug("[:%d] %s", self.display, invocation.line)
        target = invocation.line if invocation.shell else invocation.argv
        try:
            proc = subprocess.run(target, shell=invocation.shell, env=env,
                                  capture_output=True)
        except OSError as e:
            log.error("cannot execute %r: %s", invocation.line, e)
            raise SpawnError(invocation, e) from e

        if proc.returncode != 0:
            log.debug("%s exited with status %d", invocation.program, proc.returncode)

        return InvocationResult(
            invocation=invocation,
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )
