import pytest

import run_xdo
from xdoctl.commands import Desktop, Window
from xdoctl.options import SearchOption, SyncOption


def test_typed_command(fake_run, capsysbinary):
    fake_run.stdout = b"ok\n"
    fake_run.stderr = b"warn\n"

    code = run_xdo.main(["--display", "3", "--auth", "/tmp/a", "-o", "sync",
                         "windowactivate", "12345"])

    assert code == 0
    assert fake_run.target == ["xdotool", "windowactivate", "--sync", "12345"]
    assert fake_run.kwargs["env"]["DISPLAY"] == ":3"
    assert fake_run.kwargs["env"]["XAUTHORITY"] == "/tmp/a"
    out = capsysbinary.readouterr()
    assert out.out == b"ok\n"
    assert out.err.endswith(b"warn\n")


def test_exit_status_is_passed_through(fake_run):
    fake_run.returncode = 1
    assert run_xdo.main(["--display", "0", "getwindowname", "0"]) == 1


def test_valued_option(fake_run):
    run_xdo.main(["--display", "0", "-o", "name", "--option=--limit=2", "search", "term"])
    assert fake_run.target == ["xdotool", "search", "--name", "--limit", "2", "term"]


def test_shell_mode(fake_run):
    run_xdo.main(["--display", "0", "--shell", "key", "ctrl+l", "BackSpace"])
    assert fake_run.target == "xdotool key ctrl+l BackSpace"
    assert fake_run.kwargs["shell"] is True


def test_unknown_command_is_a_usage_error(fake_run):
    with pytest.raises(SystemExit) as excinfo:
        run_xdo.main(["--display", "0", "frobnicate"])
    assert excinfo.value.code == 2
    assert fake_run.calls == []


def test_spawn_failure_exit_code(fake_run):
    fake_run.error = PermissionError(13, "Permission denied")
    assert run_xdo.main(["--display", "0", "getactivewindow"]) == run_xdo.EXIT_SPAWN_FAILED


def test_raw_screenshot(fake_run, tmp_path):
    fake_run.stdout = b"XWD-BYTES"
    out = tmp_path / "root.xwd"
    assert run_xdo.main(["--display", "7", "screenshot", str(out)]) == 0
    assert out.read_bytes() == b"XWD-BYTES"
    assert fake_run.kwargs["env"]["DISPLAY"] == ":7"


def test_parse_options():
    assert run_xdo.parse_options(Desktop.WINDOW_ACTIVATE, ["sync"]).tokens() == ("--sync",)
    opts = run_xdo.parse_options(Window.SEARCH, ["--class", "pid=42"])
    assert SearchOption.CLASS in opts
    assert opts.tokens() == ("--class", "--pid", "42")
    assert run_xdo.parse_options(Window.WINDOW_RAISE, []).tokens() == ()
    with pytest.raises(ValueError):
        run_xdo.parse_options(Window.WINDOW_RAISE, ["sync"])
    with pytest.raises(ValueError):
        run_xdo.parse_options(Desktop.WINDOW_ACTIVATE, ["relative"])
    assert SyncOption.SYNC.flag == "--sync"


def test_options_after_the_subcommand(fake_run):
    run_xdo.main(["--display", "0", "windowactivate", "12345", "-o", "sync"])
    assert fake_run.target == ["xdotool", "windowactivate", "--sync", "12345"]


def test_global_flags_after_the_subcommand(fake_run):
    run_xdo.main(["getactivewindow", "--display", "4", "--auth", "/tmp/b"])
    assert fake_run.target == ["xdotool", "getactivewindow"]
    assert fake_run.kwargs["env"]["DISPLAY"] == ":4"
    assert fake_run.kwargs["env"]["XAUTHORITY"] == "/tmp/b"


def test_explicit_display_ignores_non_x11_display_variable(fake_run, monkeypatch):
    monkeypatch.delenv("XDOCTL_DISPLAY", raising=False)
    monkeypatch.setenv("DISPLAY", "wayland-0")
    assert run_xdo.main(["--display", "1", "getactivewindow"]) == 0
    assert fake_run.kwargs["env"]["DISPLAY"] == ":1"


def test_malformed_display_variable_is_a_usage_error(fake_run, monkeypatch):
    monkeypatch.delenv("XDOCTL_DISPLAY", raising=False)
    monkeypatch.setenv("DISPLAY", "wayland-0")
    with pytest.raises(SystemExit) as excinfo:
        run_xdo.main(["getactivewindow"])
    assert excinfo.value.code == 2
    assert fake_run.calls == []


def test_jpeg_screenshot_tool_failure(fake_run, tmp_path):
    fake_run.returncode = 1
    fake_run.stderr = b"xwd: unable to open display"
    out = tmp_path / "shot.jpg"
    assert run_xdo.main(["--display", "0", "--jpeg", "screenshot", str(out)]) == 1
    assert not out.exists()


def test_jpeg_screenshot_spawn_failure(fake_run, tmp_path):
    fake_run.error = FileNotFoundError(2, "No such file or directory")
    out = tmp_path / "shot.jpg"
    code = run_xdo.main(["--display", "0", "--jpeg", "screenshot", str(out)])
    assert code == run_xdo.EXIT_SPAWN_FAILED
