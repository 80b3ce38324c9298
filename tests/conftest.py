import subprocess

import pytest

from xdoctl.server import XServer


class FakeRun:
    """Stands in for subprocess.run and records every call."""

    def __init__(self):
        self.calls = []
        self.returncode = 0
        self.stdout = b""
        self.stderr = b""
        self.error = None

    def __call__(self, target, **kwargs):
        self.calls.append((target, kwargs))
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(target, self.returncode, self.stdout, self.stderr)

    @property
    def target(self):
        return self.calls[-1][0]

    @property
    def kwargs(self):
        return self.calls[-1][1]


@pytest.fixture
def fake_run(monkeypatch):
    fake = FakeRun()
    monkeypatch.setattr("xdoctl.server.subprocess.run", fake)
    return fake


@pytest.fixture
def server():
    return XServer(display=0, auth="/tmp/test.Xauthority")
