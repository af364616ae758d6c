"""
Rendering helpers for finished symbols: console text and PNG images.

Includes colour conversion for ANSI codes, colour names and hex strings.
"""

import io

from PIL import Image, ImageDraw

from . import config

ANSI_RGB_MAP = {
    30: (0, 0, 0),
    31: (128, 0, 0),
    32: (0, 128, 0),
    33: (128, 128, 0),
    34: (0, 0, 128),
    35: (128, 0, 128),
    36: (0, 128, 128),
    37: (192, 192, 192),
    90: (128, 128, 128),
    91: (255, 0, 0),
    92: (0, 255, 0),
    93: (255, 255, 0),
    94: (0, 0, 255),
    95: (255, 0, 255),
    96: (0, 255, 255),
    97: (255, 255, 255),
}

NAMED_COLOURS = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "cyan": (0, 255, 255),
    "magenta": (255, 0, 255),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
}


def parse_colour(value):
    """
    Convert an ANSI escape code, numeric code, colour name or hex string to RGB.

    @param value: e.g. '\\033[31m', 31, 'red' or '#ff0000'
    @return: Tuple of (R, G, B) or None if conversion fails
    """
    if not value:
        return None
    if isinstance(value, str):
        if value.startswith("#") and len(value) == 7:
            try:
                return tuple(int(value[i:i + 2], 16) for i in (1, 3, 5))
            except ValueError:
                return None
        if value.lower() in NAMED_COLOURS:
            return NAMED_COLOURS[value.lower()]
    try:
        code = int(str(value).strip().replace("\033[", "").replace("m", ""))
    except ValueError:
        return None
    return ANSI_RGB_MAP.get(code)


def _bordered(qr, border):
    """Rows of the symbol surrounded by a light quiet zone."""
    width = qr.size + 2 * border
    blank = [False] * width
    rows = [blank] * border
    rows += [[False] * border + list(row) + [False] * border for row in qr.modules]
    rows += [blank] * border
    return rows


def render_text(qr, fg_char=config.DEFAULT_FG_CHAR, bg_char=config.DEFAULT_BG_CHAR,
                fg_colour="", bg_colour="", reset_colour="\033[0m",
                scale=1, border=0, frame=False) -> str:
    """
    Render a symbol as console text.

    @param qr: QRCode to render
    @param fg_char: Character(s) for dark modules
    @param bg_char: Character(s) for light modules
    @param fg_colour: ANSI colour prefix for dark modules
    @param bg_colour: ANSI colour prefix for light modules
    @param reset_colour: ANSI reset appended to coloured lines
    @param scale: Module scaling factor
    @param border: Quiet zone width in modules
    @param frame: Draw a box around the symbol
    @return: Multi-line string
    """
    fg = f"{fg_colour}{fg_char * scale}"
    bg = f"{bg_colour}{bg_char * scale}"
    reset = reset_colour if (fg_colour or bg_colour) else ""
    rows = _bordered(qr, border)
    lines = []
    for row in rows:
        line = "".join(fg if dark else bg for dark in row) + reset
        if frame:
            line = "│" + line + "│"
        lines.extend([line] * scale)
    if frame:
        width = len(rows[0]) * scale * len(fg_char)
        lines.insert(0, "┌" + "─" * width + "┐")
        lines.append("└" + "─" * width + "┘")
    return "\n".join(lines)


def print_matrix(qr, **kwargs):
    """Print a symbol to the console; keyword arguments as render_text()."""
    print(render_text(qr, **kwargs))


def render_image(qr, scale=config.DEFAULT_SCALE, border=config.DEFAULT_BORDER,
                 fg_colour="", bg_colour="", frame=False) -> Image.Image:
    """
    Draw a symbol with Pillow.

    @param qr: QRCode to render
    @param scale: Pixels per module
    @param border: Quiet zone width in modules
    @param fg_colour: Dark module colour (see parse_colour), black by default
    @param bg_colour: Light module colour, white by default
    @param frame: Add a solid frame in the dark colour around the image
    @return: RGB image
    """
    fg_rgb = parse_colour(fg_colour) or (0, 0, 0)
    bg_rgb = parse_colour(bg_colour) or (255, 255, 255)
    frame_width = config.FRAME_WIDTH if frame else 0
    side = (qr.size + 2 * border) * scale + 2 * frame_width
    img = Image.new("RGB", (side, side), fg_rgb if frame else bg_rgb)
    draw = ImageDraw.Draw(img)
    if frame:
        draw.rectangle([frame_width, frame_width, side - frame_width - 1, side - frame_width - 1],
                       fill=bg_rgb)
    offset = border * scale + frame_width
    for r, row in enumerate(qr.modules):
        for c, dark in enumerate(row):
            if dark:
                x = c * scale + offset
                y = r * scale + offset
                draw.rectangle([x, y, x + scale - 1, y + scale - 1], fill=fg_rgb)
    return img


def save_image(qr, target=config.DEFAULT_IMAGE_NAME, **kwargs):
    """
    Save a symbol as PNG.

    @param qr: QRCode to render
    @param target: File name or binary file object such as io.BytesIO
    @param kwargs: Passed to render_image()
    @return: The target
    """
    img = render_image(qr, **kwargs)
    if isinstance(target, io.IOBase):
        img.save(target, format="PNG")
    else:
        img.save(target)
    return target
