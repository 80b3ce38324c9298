"""
xdoctl/xwd.py
Decode ``xwd -root`` output into a Pillow image.

Only ZPixmap TrueColor/DirectColor dumps at 24 or 32 bits per pixel with
8-bit RGB masks are supported, which is what every current X server
produces for the root window.
"""

import io
import struct
from typing import NamedTuple

from PIL import Image

from xdoctl.server import XServer

HEADER_FORMAT = ">25I"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)
XWD_FILE_VERSION = 7
Z_PIXMAP = 2
LSB_FIRST = 0
COLOR_ENTRY_SIZE = 12


class XwdError(ValueError):
    pass


class CaptureError(RuntimeError):
    """xwd ran but exited non-zero, so there is no image to decode."""


class XwdHeader(NamedTuple):
    header_size: int
    file_version: int
    pixmap_format: int
    pixmap_depth: int
    pixmap_width: int
    pixmap_height: int
    xoffset: int
    byte_order: int
    bitmap_unit: int
    bitmap_bit_order: int
    bitmap_pad: int
    bits_per_pixel: int
    bytes_per_line: int
    visual_class: int
    red_mask: int
    green_mask: int
    blue_mask: int
    bits_per_rgb: int
    colormap_entries: int
    ncolors: int
    window_width: int
    window_height: int
    window_x: int
    window_y: int
    window_bdrwidth: int


def read_header(data: bytes) -> XwdHeader:
    if len(data) < HEADER_SIZE:
        raise XwdError("truncated XWD header")
    header = XwdHeader(*struct.unpack_from(HEADER_FORMAT, data))
    if header.file_version != XWD_FILE_VERSION:
        raise XwdError(f"unsupported XWD version {header.file_version}")
    return header


def _raw_mode(header: XwdHeader) -> str:
    masks = (header.red_mask, header.green_mask, header.blue_mask)
    if masks == (0xFF0000, 0x00FF00, 0x0000FF):
        rgb = True
    elif masks == (0x0000FF, 0x00FF00, 0xFF0000):
        rgb = False
    else:
        raise XwdError(f"unsupported colour masks {[hex(m) for m in masks]}")

    lsb = header.byte_order == LSB_FIRST
    if header.bits_per_pixel == 32:
        if rgb:
            return "BGRX" if lsb else "XRGB"
        return "RGBX" if lsb else "XBGR"
    if header.bits_per_pixel == 24:
        if rgb:
            return "BGR" if lsb else "RGB"
        return "RGB" if lsb else "BGR"
    raise XwdError(f"unsupported depth: {header.bits_per_pixel} bits per pixel")


def decode(data: bytes) -> Image.Image:
    """Decode XWD bytes into an RGB image."""
    header = read_header(data)
    if header.pixmap_format != Z_PIXMAP:
        raise XwdError(f"unsupported pixmap format {header.pixmap_format}")

    mode = _raw_mode(header)
    offset = header.header_size + header.ncolors * COLOR_ENTRY_SIZE
    size = header.bytes_per_line * header.pixmap_height
    pixels = data[offset:offset + size]
    if len(pixels) < size:
        raise XwdError(f"truncated pixel data: expected {size} bytes, got {len(pixels)}")

    return Image.frombytes(
        "RGB", (header.pixmap_width, header.pixmap_height), pixels,
        "raw", mode, header.bytes_per_line, 1,
    )


# ── capture ───────────────────────────────────────────────────────────────────

def capture_image(server: XServer) -> Image.Image:
    result = server.screenshot()
    if not result.success:
        detail = result.stderr.decode("utf-8", errors="replace").strip()
        raise CaptureError(f"xwd exited with status {result.returncode}: {detail}")
    return decode(result.stdout)


def capture_jpeg_bytes(server: XServer, max_width: int = 1280, quality: int = 80) -> bytes:
    img = capture_image(server)

    if img.width > max_width:
        ratio = max_width / img.width
        img = img.resize((max_width, int(img.height * ratio)), Image.Resampling.LANCZOS)

    buf = io.BytesIO()
    img.save(buf, format="JPEG", quality=quality, optimize=True)
    return buf.getvalue()
