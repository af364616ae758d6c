"""Tests for text and image rendering."""

import io

from PIL import Image

from pyqr import encode
from pyqr.render import parse_colour, render_image, render_text, save_image


def test_parse_colour():
    """Hex strings, names and ANSI codes convert to RGB."""
    assert parse_colour("#ff8000") == (255, 128, 0)
    assert parse_colour("Red") == (255, 0, 0)
    assert parse_colour("\033[34m") == (0, 0, 128)
    assert parse_colour(97) == (255, 255, 255)
    assert parse_colour("") is None
    assert parse_colour("not a colour") is None
    assert parse_colour("#zzzzzz") is None


def test_render_text_dimensions():
    """One line per module row plus border rows; two characters per module."""
    qr = encode("HELLO WORLD", ec_level="Q")
    lines = render_text(qr, border=2).split("\n")
    assert len(lines) == 25
    assert all(len(line) == 50 for line in lines)
    assert lines[2].startswith("    ██")


def test_render_text_frame():
    """A frame adds a top and bottom line and side bars."""
    qr = encode("1")
    lines = render_text(qr, fg_char="#", bg_char=".", frame=True).split("\n")
    assert len(lines) == qr.size + 2
    assert lines[0].startswith("┌") and lines[-1].startswith("└")
    assert lines[1] == "│" + "#######." + "".join(
        "#" if dark else "." for dark in encode("1").modules[0][8:]) + "│"


def test_save_image_png_in_memory():
    """Images are valid PNGs of (size + 2 * border) * scale pixels."""
    qr = encode("test")
    buffer = save_image(qr, io.BytesIO(), scale=10, border=4)
    buffer.seek(0)
    img = Image.open(buffer)
    assert img.format == "PNG"
    assert img.size == ((qr.size + 8) * 10, (qr.size + 8) * 10)


def test_render_image_colours():
    """Dark modules use the foreground colour, the quiet zone the background."""
    qr = encode("colours")
    img = render_image(qr, scale=2, border=1, fg_colour="#112233", bg_colour="white")
    assert img.getpixel((0, 0)) == (255, 255, 255)
    assert img.getpixel((2, 2)) == (0x11, 0x22, 0x33)


def test_render_image_frame():
    """The frame adds a band of foreground colour on every side."""
    qr = encode("frame")
    img = render_image(qr, scale=1, border=0, frame=True)
    assert img.size == (qr.size + 20, qr.size + 20)
    assert img.getpixel((0, 0)) == (0, 0, 0)
