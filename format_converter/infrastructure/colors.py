"""Color-space conversions between hex, RGB, HSL, HSV and CMYK.

Every color is parsed into RGB channels in [0, 1] and rendered from there,
using :mod:`colorsys` for the HSL and HSV math. Output channels are rounded
half-up and clamped: [0, 255] for RGB, [0, 100] for percentages and
[0, 360) for hue.
"""
import colorsys
import math
import re
from typing import Callable, Dict, Tuple

from ..domain.errors import DecodeError

RGB = Tuple[float, float, float]

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_NUMBER = re.compile(r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)")


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round(value: float) -> int:
    """Round half away from zero for non-negative channels."""
    return int(math.floor(value + 0.5))


def _numbers(text: str, count: int, label: str):
    values = [float(token) for token in _NUMBER.findall(text)]
    if len(values) != count:
        raise DecodeError(f"Expected {count} numbers for {label}, got {len(values)}")
    if not all(math.isfinite(value) for value in values):
        raise DecodeError(f"Numbers for {label} must be finite")
    return values


def _percent(value: float) -> float:
    return _clamp(value, 0.0, 100.0) / 100.0


def _hue(value: float) -> float:
    return (value % 360.0) / 360.0


# -------------------- Parsers --------------------

def parse_hex(text: str) -> RGB:
    match = _HEX_COLOR.match(text.strip())
    if match is None:
        raise DecodeError(f"Invalid hex color: {text.strip()!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(char * 2 for char in digits)
    return tuple(int(digits[i:i + 2], 16) / 255.0 for i in (0, 2, 4))


def parse_rgb(text: str) -> RGB:
    return tuple(_clamp(channel, 0.0, 255.0) / 255.0 for channel in _numbers(text, 3, "rgb"))


def parse_hsl(text: str) -> RGB:
    hue, saturation, lightness = _numbers(text, 3, "hsl")
    return colorsys.hls_to_rgb(_hue(hue), _percent(lightness), _percent(saturation))


def parse_hsv(text: str) -> RGB:
    hue, saturation, value = _numbers(text, 3, "hsv")
    return colorsys.hsv_to_rgb(_hue(hue), _percent(saturation), _percent(value))


def parse_cmyk(text: str) -> RGB:
    cyan, magenta, yellow, black = (_percent(value) for value in _numbers(text, 4, "cmyk"))
    return (
        (1 - cyan) * (1 - black),
        (1 - magenta) * (1 - black),
        (1 - yellow) * (1 - black),
    )


# -------------------- Renderers --------------------

def _channels_255(rgb: RGB) -> Tuple[int, int, int]:
    return tuple(int(_clamp(_round(channel * 255), 0, 255)) for channel in rgb)


def _pct(value: float) -> int:
    return int(_clamp(_round(value * 100), 0, 100))


def _deg(value: float) -> int:
    return _round(value * 360) % 360


def format_hex(rgb: RGB) -> str:
    return "#" + "".join(f"{channel:02x}" for channel in _channels_255(rgb))


def format_rgb(rgb: RGB) -> str:
    red, green, blue = _channels_255(rgb)
    return f"rgb({red}, {green}, {blue})"


def format_hsl(rgb: RGB) -> str:
    hue, lightness, saturation = colorsys.rgb_to_hls(*rgb)
    return f"hsl({_deg(hue)}, {_pct(saturation)}%, {_pct(lightness)}%)"


def format_hsv(rgb: RGB) -> str:
    hue, saturation, value = colorsys.rgb_to_hsv(*rgb)
    return f"hsv({_deg(hue)}, {_pct(saturation)}%, {_pct(value)}%)"


def format_cmyk(rgb: RGB) -> str:
    black = 1 - max(rgb)
    if black >= 1:
        return "cmyk(0%, 0%, 0%, 100%)"
    cyan, magenta, yellow = ((1 - channel - black) / (1 - black) for channel in rgb)
    return f"cmyk({_pct(cyan)}%, {_pct(magenta)}%, {_pct(yellow)}%, {_pct(black)}%)"


PARSERS: Dict[str, Callable[[str], RGB]] = {
    "hex": parse_hex,
    "rgb": parse_rgb,
    "hsl": parse_hsl,
    "hsv": parse_hsv,
    "cmyk": parse_cmyk,
}

RENDERERS: Dict[str, Callable[[RGB], str]] = {
    "hex": format_hex,
    "rgb": format_rgb,
    "hsl": format_hsl,
    "hsv": format_hsv,
    "cmyk": format_cmyk,
}


def color_converter(source: str, target: str) -> Callable[[str], str]:
    parse = PARSERS[source]
    render = RENDERERS[target]

    def convert(text: str) -> str:
        return render(parse(text))

    convert.__name__ = f"color_{source}_to_{target}"
    return convert
