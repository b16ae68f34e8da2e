"""CSS color literal classification and parsing."""

from __future__ import annotations

import colorsys
import logging
import math
import re

from themevars.core.models import (
    NOT_A_COLOR,
    RECOGNIZED_UNSUPPORTED,
    ColorClassification,
    ColorKind,
    NormalizedColor,
)

logger = logging.getLogger(__name__)

_HEX_COLOR_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6})$")
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")

# Prefixes that mark a value as a color even though no parser exists for it.
_UNSUPPORTED_PREFIXES: tuple[str, ...] = ("hsl", "oklch", "oklab(", "lab(", "lch(", "hwb(", "color(")

_NAMED_COLORS = frozenset(
    """
    aliceblue antiquewhite aqua aquamarine azure beige bisque black blanchedalmond
    blue blueviolet brown burlywood cadetblue chartreuse chocolate coral
    cornflowerblue cornsilk crimson cyan darkblue darkcyan darkgoldenrod darkgray
    darkgreen darkgrey darkkhaki darkmagenta darkolivegreen darkorange darkorchid
    darkred darksalmon darkseagreen darkslateblue darkslategray darkslategrey
    darkturquoise darkviolet deeppink deepskyblue dimgray dimgrey dodgerblue
    firebrick floralwhite forestgreen fuchsia gainsboro ghostwhite gold goldenrod
    gray green greenyellow grey honeydew hotpink indianred indigo ivory khaki
    lavender lavenderblush lawngreen lemonchiffon lightblue lightcoral lightcyan
    lightgoldenrodyellow lightgray lightgreen lightgrey lightpink lightsalmon
    lightseagreen lightskyblue lightslategray lightslategrey lightsteelblue
    lightyellow lime limegreen linen magenta maroon mediumaquamarine mediumblue
    mediumorchid mediumpurple mediumseagreen mediumslateblue mediumspringgreen
    mediumturquoise mediumvioletred midnightblue mintcream mistyrose moccasin
    navajowhite navy oldlace olive olivedrab orange orangered orchid palegoldenrod
    palegreen paleturquoise palevioletred papayawhip peachpuff peru pink plum
    powderblue purple rebeccapurple red rosybrown royalblue saddlebrown salmon
    sandybrown seagreen seashell sienna silver skyblue slateblue slategray
    slategrey snow springgreen steelblue tan teal thistle tomato turquoise violet
    wheat white whitesmoke yellow yellowgreen transparent
    """.split()
)


def classify_and_parse(value: str | None) -> ColorClassification:
    """Classify a literal and, where a parser exists, normalize it.

    Never raises. A value whose function prefix matched but whose payload
    could not be parsed is reported as recognized-but-unsupported rather
    than as plain text.
    """
    if value is None:
        return NOT_A_COLOR
    text = value.strip().lower()

    match = _HEX_COLOR_RE.match(text)
    if match:
        return _parsed(_parse_hex(match.group(1)))

    if text.startswith("rgb(") and text.endswith(")"):
        logger.debug("Parsing RGB color: %s", text)
        return _parsed_or_unsupported(_parse_rgb(text[4:-1]))

    if text.startswith("rgba(") and text.endswith(")"):
        logger.debug("Parsing RGBA color: %s", text)
        return _parsed_or_unsupported(_parse_rgba(text[5:-1]))

    if text.startswith("hsl(") and text.endswith(")"):
        logger.debug("Parsing HSL color: %s", text)
        return _parsed_or_unsupported(_parse_hsl(text[4:-1]))

    if text.startswith(_UNSUPPORTED_PREFIXES) or text in _NAMED_COLORS:
        logger.debug("Recognized unsupported color syntax: %s", text)
        return RECOGNIZED_UNSUPPORTED

    return NOT_A_COLOR


def is_color(value: str | None) -> bool:
    """Return True when the value parses as, or looks like, a color."""
    return classify_and_parse(value).kind is not ColorKind.NOT_A_COLOR


def _parsed(color: NormalizedColor) -> ColorClassification:
    return ColorClassification(ColorKind.PARSED, color)


def _parsed_or_unsupported(color: NormalizedColor | None) -> ColorClassification:
    if color is None:
        return RECOGNIZED_UNSUPPORTED
    return _parsed(color)


def _parse_hex(digits: str) -> NormalizedColor:
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return NormalizedColor(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def _parse_rgb(inner: str) -> NormalizedColor | None:
    parts = inner.split(",") if "," in inner else inner.split()
    if len(parts) != 3:
        return None
    channels = _channels(parts)
    if channels is None:
        return None
    return NormalizedColor(*channels)


def _parse_rgba(inner: str) -> NormalizedColor | None:
    # Space separated with slash alpha: "51 110 173 / 4%"
    if "/" in inner:
        color_part, sep, alpha_part = inner.partition("/")
        if sep and "/" not in alpha_part:
            channels = _channels(color_part.split())
            alpha = _alpha(alpha_part.strip())
            if channels is not None and len(channels) == 3 and alpha is not None:
                return NormalizedColor(*channels, a=alpha)

    # Comma separated: "255, 0, 0, 0.5"
    parts = inner.split(",")
    if len(parts) != 4:
        return None
    channels = _channels(parts[:3])
    alpha = _number(parts[3])
    if channels is None or alpha is None:
        return None
    return NormalizedColor(*channels, a=_clamp(alpha, 0.0, 1.0))


def _parse_hsl(inner: str) -> NormalizedColor | None:
    parts = inner.split(",")
    if len(parts) != 3:
        return None
    hue = _number(parts[0])
    saturation = _number(_strip_percent(parts[1]))
    lightness = _number(_strip_percent(parts[2]))
    if hue is None or saturation is None or lightness is None:
        return None
    r, g, b = colorsys.hls_to_rgb(
        hue / 360.0,
        _clamp(lightness / 100.0, 0.0, 1.0),
        _clamp(saturation / 100.0, 0.0, 1.0),
    )
    return NormalizedColor(r=_to_byte(r * 255), g=_to_byte(g * 255), b=_to_byte(b * 255))


def _channels(parts: list[str]) -> tuple[int, int, int] | None:
    if len(parts) != 3:
        return None
    values: list[int] = []
    for part in parts:
        number = _number(part)
        if number is None:
            return None
        values.append(_to_byte(number))
    return values[0], values[1], values[2]


def _alpha(token: str) -> float | None:
    if token.endswith("%"):
        number = _number(token[:-1])
        if number is None:
            return None
        return _clamp(number / 100.0, 0.0, 1.0)
    number = _number(token)
    if number is None:
        return None
    return _clamp(number, 0.0, 1.0)


def _number(token: str) -> float | None:
    token = token.strip()
    if not _NUMBER_RE.match(token):
        return None
    number = float(token)
    if not math.isfinite(number):
        return None
    return number


def _strip_percent(token: str) -> str:
    token = token.strip()
    return token[:-1] if token.endswith("%") else token


def _to_byte(value: float) -> int:
    return int(_clamp(round(value), 0, 255))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
