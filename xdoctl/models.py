"""
xdoctl/models.py
Pydantic models describing one child process run and its outcome.
"""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict


# ── invocation ────────────────────────────────────────────────────────────────

class Invocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    program: str
    command: Tuple[str, ...] = ()
    """rendered sub-command and flag tokens"""
    args:    Tuple[str, ...] = ()
    """positional arguments, appended after the command tokens"""
    shell:   bool = False

    @property
    def line(self) -> str:
        """The command line, single-spaced, with empty positional arguments dropped."""
        return " ".join([self.program, *self.command, *(a for a in self.args if a)])

    @property
    def argv(self) -> List[str]:
        return [self.program, *self.command, *self.args]


# ── result ────────────────────────────────────────────────────────────────────

class InvocationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    invocation: Invocation
    returncode: int
    stdout:     bytes = b""
    stderr:     bytes = b""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    def text(self, encoding: str = "utf-8") -> str:
        """Decoded stdout with surrounding whitespace stripped."""
        return self.stdout.decode(encoding, errors="replace").strip()

    def lines(self, encoding: str = "utf-8") -> List[str]:
        return [ln for ln in self.text(encoding).splitlines() if ln]
