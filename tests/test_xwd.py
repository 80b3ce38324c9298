import io
import struct

import pytest
from PIL import Image

from xdoctl import xwd
from xdoctl.xwd import (
    CaptureError, XwdError, capture_image, capture_jpeg_bytes, decode, read_header,
)

RGB_MASKS = (0xFF0000, 0x00FF00, 0x0000FF)
NAME = b"xwdump\x00"


def make_xwd(pixels, width, height, bpp=32, byte_order=0, masks=RGB_MASKS,
             bytes_per_line=None, ncolors=0, version=7):
    """Build an XWD dump from rows of (r, g, b) tuples."""
    pixel_size = bpp // 8
    if bytes_per_line is None:
        bytes_per_line = width * pixel_size

    body = bytearray()
    for row in pixels:
        line = bytearray()
        for r, g, b in row:
            value = (r << 16) | (g << 8) | b
            if masks != RGB_MASKS:
                value = (b << 16) | (g << 8) | r
            if bpp == 32:
                line += struct.pack("<I" if byte_order == 0 else ">I", value)
            else:
                raw = struct.pack(">I", value)[1:]
                line += raw[::-1] if byte_order == 0 else raw
        line += b"\x00" * (bytes_per_line - len(line))
        body += line

    header_size = xwd.HEADER_SIZE + len(NAME)
    fields = [
        header_size, version, xwd.Z_PIXMAP, 24, width, height, 0, byte_order,
        32, byte_order, 32, bpp, bytes_per_line, 4, *masks, 8, 256, ncolors,
        width, height, 0, 0, 0,
    ]
    colormap = b"\x00" * (xwd.COLOR_ENTRY_SIZE * ncolors)
    return struct.pack(xwd.HEADER_FORMAT, *fields) + NAME + colormap + bytes(body)


PIXELS = [
    [(255, 0, 0), (0, 255, 0)],
    [(0, 0, 255), (10, 20, 30)],
]


@pytest.mark.parametrize("bpp", [32, 24])
@pytest.mark.parametrize("byte_order", [0, 1])
def test_decode(bpp, byte_order):
    img = decode(make_xwd(PIXELS, 2, 2, bpp=bpp, byte_order=byte_order))
    assert img.mode == "RGB"
    assert img.size == (2, 2)
    assert img.getpixel((0, 0)) == (255, 0, 0)
    assert img.getpixel((1, 0)) == (0, 255, 0)
    assert img.getpixel((0, 1)) == (0, 0, 255)
    assert img.getpixel((1, 1)) == (10, 20, 30)


def test_decode_honours_line_padding_and_colormap():
    data = make_xwd(PIXELS, 2, 2, bpp=24, bytes_per_line=8, ncolors=3)
    img = decode(data)
    assert img.getpixel((1, 1)) == (10, 20, 30)


def test_decode_bgr_masks():
    data = make_xwd(PIXELS, 2, 2, masks=(0x0000FF, 0x00FF00, 0xFF0000))
    assert decode(data).getpixel((0, 0)) == (255, 0, 0)


def test_header_fields():
    header = read_header(make_xwd(PIXELS, 2, 2))
    assert header.pixmap_width == 2
    assert header.bits_per_pixel == 32
    assert header.header_size == xwd.HEADER_SIZE + len(NAME)


def test_unsupported_masks():
    with pytest.raises(XwdError):
        decode(make_xwd(PIXELS, 2, 2, masks=(0xF800, 0x07E0, 0x001F)))


def test_unsupported_version():
    with pytest.raises(XwdError):
        decode(make_xwd(PIXELS, 2, 2, version=6))


def test_truncated():
    data = make_xwd(PIXELS, 2, 2)
    with pytest.raises(XwdError):
        decode(data[:-3])
    with pytest.raises(XwdError):
        decode(data[:40])


def test_capture_image(server, fake_run):
    fake_run.stdout = make_xwd(PIXELS, 2, 2)
    img = capture_image(server)
    assert fake_run.target == ["xwd", "-root"]
    assert img.getpixel((0, 0)) == (255, 0, 0)


def test_capture_image_tool_failure(server, fake_run):
    fake_run.returncode = 1
    fake_run.stderr = b"xwd: unable to open display"
    with pytest.raises(CaptureError, match="unable to open display"):
        capture_image(server)


def test_capture_jpeg_bytes_downscales(server, fake_run):
    row = [(200, 100, 50)] * 40
    fake_run.stdout = make_xwd([row] * 20, 40, 20)

    data = capture_jpeg_bytes(server, max_width=10, quality=70)

    assert data[:2] == b"\xff\xd8"
    img = Image.open(io.BytesIO(data))
    assert img.size == (10, 5)
