from dataclasses import dataclass, field
import os
import re


_DISPLAY_RE = re.compile(r"^[^:]*:(\d+)(?:\.\d+)?$")


def parse_display(value: str) -> int:
    """Display number from a DISPLAY string such as ":0", ":1.0" or "host:10"."""
    m = _DISPLAY_RE.match(value.strip())
    if m is None:
        raise ValueError(f"malformed DISPLAY value: {value!r}")
    return int(m.group(1))


def _display_from_env() -> int:
    explicit = os.getenv("XDOCTL_DISPLAY")
    if explicit:
        return int(explicit)
    display = os.getenv("DISPLAY")
    return parse_display(display) if display else 0


@dataclass
class XConfig:
    display: int = field(default_factory=_display_from_env)
    auth: str = field(default_factory=lambda: os.getenv(
        "XAUTHORITY", os.path.expanduser("~/.Xauthority")))
    xdotool_path: str = field(default_factory=lambda: os.getenv("XDOCTL_XDOTOOL", "xdotool"))
    xwd_path: str = field(default_factory=lambda: os.getenv("XDOCTL_XWD", "xwd"))
    log_level: str = field(default_factory=lambda: os.getenv("XDOCTL_LOG_LEVEL", "WARNING"))

    # ── screenshots ──────────────────────────────────────────────────────
    screenshot_max_width: int = field(
        default_factory=lambda: int(os.getenv("SCREENSHOT_MAX_WIDTH", "1280")))
    screenshot_quality: int = field(
        default_factory=lambda: int(os.getenv("SCREENSHOT_QUALITY", "80")))
