"""Dominant colour extraction for cover images.

Used to tint decorations around a post with the main colour of its cover.
"""

import colorsys
import re
from collections import Counter
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Union

from PIL import Image

SAMPLE_SIZE = 50
SAMPLE_STEP = 10
QUANTUM = 32
DEFAULT_COLOR = "rgb(128,128,128)"

_RGB_PATTERN = re.compile(r"rgb\((\d+),\s*(\d+),\s*(\d+)\)")

ImageSource = Union[str, Path, bytes, BinaryIO, Image.Image]


def _open(source: ImageSource) -> Image.Image:
    if isinstance(source, Image.Image):
        return source
    if isinstance(source, bytes):
        return Image.open(BytesIO(source))
    return Image.open(source)


def _quantize(channel: int) -> int:
    # Round half up
    return int(channel / QUANTUM + 0.5) * QUANTUM


def extract_dominant_color(source: ImageSource) -> str:
    """Return the most frequent colour of an image as ``rgb(r,g,b)``.

    The image is shrunk to 50x50 and every 10th pixel is sampled. Pixels
    that are mostly transparent are skipped and channels are quantized to
    multiples of 32 before counting.

    Args:
        source: Path, raw bytes, file object or an already opened image

    Returns:
        Dominant colour, or mid grey when no pixel qualifies
    """
    with _open(source) as image:
        data = image.convert("RGBA").resize((SAMPLE_SIZE, SAMPLE_SIZE)).tobytes()

    counts: Counter[tuple[int, int, int]] = Counter()
    for offset in range(0, len(data), 4 * SAMPLE_STEP):
        r, g, b, a = data[offset : offset + 4]
        if a < 128:
            continue
        counts[(_quantize(r), _quantize(g), _quantize(b))] += 1

    if not counts:
        return DEFAULT_COLOR
    (r, g, b), _ = counts.most_common(1)[0]
    return f"rgb({r},{g},{b})"


def lighten_color(color: str, amount: float = 0.3) -> str:
    """Raise the lightness of an ``rgb(...)`` colour.

    Args:
        color: Colour string such as ``"rgb(128, 128, 128)"``
        amount: Lightness to add, 0-1 (0.3 adds 30 percentage points)

    Returns:
        The lightened colour, or ``color`` unchanged if it is not rgb()
    """
    match = _RGB_PATTERN.fullmatch(color.strip())
    if not match:
        return color

    r, g, b = (min(255, int(channel)) / 255 for channel in match.groups())
    h, lightness, s = colorsys.rgb_to_hls(r, g, b)
    r, g, b = colorsys.hls_to_rgb(h, min(1.0, lightness + amount), s)
    return f"rgb({round(r * 255)}, {round(g * 255)}, {round(b * 255)})"
