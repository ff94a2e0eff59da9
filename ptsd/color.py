"""RGBA colours and a table of named web colours."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Tuple, Union

from .logger import LOGGER_NAME

_log = logging.getLogger(LOGGER_NAME)

_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_ULONG_MAX = 0xFFFFFFFFFFFFFFFF


class Colors(IntEnum):
    """Common colours as 0xRRGGBB values."""

    ALICE_BLUE = 0xF0F8FF
    ANTIQUE_WHITE = 0xFAEBD7
    AQUA = 0x00FFFF
    AQUAMARINE = 0x7FFFD4
    AZURE = 0xF0FFFF
    BEIGE = 0xF5F5DC
    BISQUE = 0xFFE4C4
    BLACK = 0x000000
    BLANCHED_ALMOND = 0xFFEBCD
    BLUE = 0x0000FF
    BLUE_VIOLET = 0x8A2BE2
    BROWN = 0xA52A2A
    BURLY_WOOD = 0xDEB887
    CADET_BLUE = 0x5F9EA0
    CHARTREUSE = 0x7FFF00
    CHOCOLATE = 0xD2691E
    CORAL = 0xFF7F50
    CORNFLOWER_BLUE = 0x6495ED
    CORNSILK = 0xFFF8DC
    CRIMSON = 0xDC143C
    CYAN = 0x00FFFF
    DARK_BLUE = 0x00008B
    DARK_CYAN = 0x008B8B
    DARK_GOLDENROD = 0xB8860B
    DARK_GRAY = 0xA9A9A9
    DARK_GREEN = 0x006400
    DARK_KHAKI = 0xBDB76B
    DARK_MAGENTA = 0x8B008B
    DARK_OLIVE_GREEN = 0x556B2F
    DARK_ORANGE = 0xFF8C00
    DARK_ORCHID = 0x9932CC
    DARK_RED = 0x8B0000
    DARK_SALMON = 0xE9967A
    DARK_SEA_GREEN = 0x8FBC8F
    DARK_SLATE_BLUE = 0x483D8B
    DARK_SLATE_GRAY = 0x2F4F4F
    DARK_TURQUOISE = 0x00CED1
    DARK_VIOLET = 0x9400D3
    DEEP_PINK = 0xFF1493
    DEEP_SKY_BLUE = 0x00BFFF
    DIM_GRAY = 0x696969
    DODGER_BLUE = 0x1E90FF
    FIREBRICK = 0xB22222
    FLORAL_WHITE = 0xFFFAF0
    FOREST_GREEN = 0x228B22
    FUCHSIA = 0xFF00FF
    GAINSBORO = 0xDCDCDC
    GHOST_WHITE = 0xF8F8FF
    GOLD = 0xFFD700
    GOLDENROD = 0xDAA520
    GRAY = 0x808080
    GREEN = 0x008000
    GREEN_YELLOW = 0xADFF2F
    HONEYDEW = 0xF0FFF0
    HOT_PINK = 0xFF69B4
    INDIAN_RED = 0xCD5C5C
    INDIGO = 0x4B0082
    IVORY = 0xFFFFF0
    KHAKI = 0xF0E68C
    LAVENDER = 0xE6E6FA
    LAVENDER_BLUSH = 0xFFF0F5
    LAWN_GREEN = 0x7CFC00
    LEMON_CHIFFON = 0xFFFACD
    LIGHT_BLUE = 0xADD8E6
    LIGHT_CORAL = 0xF08080
    LIGHT_CYAN = 0xE0FFFF
    LIGHT_GOLDENROD_YELLOW = 0xFAFAD2
    LIGHT_GRAY = 0xD3D3D3
    LIGHT_GREEN = 0x90EE90
    LIGHT_PINK = 0xFFB6C1
    LIGHT_SALMON = 0xFFA07A
    LIGHT_SEA_GREEN = 0x20B2AA
    LIGHT_SKY_BLUE = 0x87CEFA
    LIGHT_SLATE_GRAY = 0x778899
    LIGHT_STEEL_BLUE = 0xB0C4DE
    LIGHT_YELLOW = 0xFFFFE0
    LIME = 0x00FF00
    LIME_GREEN = 0x32CD32
    LINEN = 0xFAF0E6
    MAGENTA = 0xFF00FF
    MAROON = 0x800000
    MEDIUM_AQUAMARINE = 0x66CDAA
    MEDIUM_BLUE = 0x0000CD
    MEDIUM_ORCHID = 0xBA55D3
    MEDIUM_PURPLE = 0x9370DB
    MEDIUM_SEA_GREEN = 0x3CB371
    MEDIUM_SLATE_BLUE = 0x7B68EE
    MEDIUM_SPRING_GREEN = 0x00FA9A
    MEDIUM_TURQUOISE = 0x48D1CC
    MEDIUM_VIOLET_RED = 0xC71585
    MIDNIGHT_BLUE = 0x191970
    MINT_CREAM = 0xF5FFFA
    MISTY_ROSE = 0xFFE4E1
    MOCCASIN = 0xFFE4B5
    NAVAJO_WHITE = 0xFFDEAD
    NAVY = 0x000080
    OLD_LACE = 0xFDF5E6
    OLIVE = 0x808000
    OLIVE_DRAB = 0x6B8E23
    ORANGE = 0xFFA500
    ORANGE_RED = 0xFF4500
    ORCHID = 0xDA70D6
    PALE_GOLDENROD = 0xEEE8AA
    PALE_GREEN = 0x98FB98
    PALE_TURQUOISE = 0xAFEEEE
    PALE_VIOLET_RED = 0xDB7093
    PAPAYA_WHIP = 0xFFEFD5
    PEACH_PUFF = 0xFFDAB9
    PERU = 0xCD853F
    PINK = 0xFFC0CB
    PLUM = 0xDDA0DD
    POWDER_BLUE = 0xB0E0E6
    PURPLE = 0x800080
    REBECCA_PURPLE = 0x663399
    RED = 0xFF0000
    ROSY_BROWN = 0xBC8F8F
    ROYAL_BLUE = 0x4169E1
    SADDLE_BROWN = 0x8B4513
    SALMON = 0xFA8072
    SANDY_BROWN = 0xF4A460
    SEA_GREEN = 0x2E8B57
    SEASHELL = 0xFFF5EE
    SIENNA = 0xA0522D
    SILVER = 0xC0C0C0
    SKY_BLUE = 0x87CEEB
    SLATE_BLUE = 0x6A5ACD
    SLATE_GRAY = 0x708090
    SNOW = 0xFFFAFA
    SPRING_GREEN = 0x00FF7F
    STEEL_BLUE = 0x4682B4
    TAN = 0xD2B48C
    TEAL = 0x008080
    THISTLE = 0xD8BFD8
    TOMATO = 0xFF6347
    TURQUOISE = 0x40E0D0
    VIOLET = 0xEE82EE
    WHEAT = 0xF5DEB3
    WHITE = 0xFFFFFF
    WHITE_SMOKE = 0xF5F5F5
    YELLOW = 0xFFFF00
    YELLOW_GREEN = 0x9ACD32


def _format_component(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components on the 0-255 scale."""

    r: float
    g: float
    b: float
    a: float = 255.0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, float(getattr(self, name)))

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a

    def __str__(self) -> str:
        parts = ",".join(_format_component(c) for c in self)
        return f"Color({parts})"

    def to_sdl_color(self) -> Tuple[int, int, int, int]:
        """Return the colour as four 8-bit integers."""
        r, g, b, a = (int(c) & 0xFF for c in self)
        return (r, g, b, a)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, a: int = 255) -> "Color":
        """Build a colour from 0-255 components; raise ValueError otherwise."""
        if not all(0 <= v <= 255 for v in (r, g, b, a)):
            _log.error("Invalid color: (%s, %s, %s, %s)", r, g, b, a)
            raise ValueError("Invalid color")
        return cls(r, g, b, a)

    @classmethod
    def from_hex(cls, value: Union[int, str]) -> "Color":
        """Build a colour from 0xRRGGBBAA, given as an integer or hex string."""
        if isinstance(value, str):
            return cls.from_hex(_parse_hex(value))
        value &= 0xFFFFFFFF
        return cls.from_rgb(
            (value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        )

    @classmethod
    def from_name(cls, name: Colors) -> "Color":
        """Opaque colour for a named entry of :class:`Colors`."""
        return cls.from_hex(int(name) << 8 | 0xFF)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> "Color":
        """Build a colour from hue, saturation, lightness and alpha in 0-1."""

        def hue_to_rgb(p: float, q: float, t: float) -> float:
            if t < 0:
                t += 1
            if t > 1:
                t -= 1
            if t < 1 / 6:
                return p + (q - p) * 6 * t
            if t < 1 / 2:
                return q
            if t < 2 / 3:
                return p + (q - p) * (2 / 3 - t) * 6
            return p

        if s == 0:
            r = g = b = l * 255.0
        else:
            q = l * (1 + s) if l < 0.5 else l + s - l * s
            p = 2 * l - q
            r = hue_to_rgb(p, q, h + 1 / 3) * 255
            g = hue_to_rgb(p, q, h) * 255
            b = hue_to_rgb(p, q, h - 1 / 3) * 255
        return cls.from_rgb(int(r), int(g), int(b), int(a * 255))

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, a: float = 1.0) -> "Color":
        """Build a colour from hue, saturation, value and alpha in 0-1.

        With no saturation the alpha is passed through unscaled.
        """
        v *= 255
        if s <= 0.0:
            return cls.from_rgb(int(v), int(v), int(v), int(a))
        h *= 360.0
        if h >= 360.0:
            h = 0.0
        h /= 60.0
        sector = int(h)
        ff = h - sector
        p = v * (1.0 - s)
        q = v * (1.0 - s * ff)
        t = v * (1.0 - s * (1.0 - ff))
        r, g, b = {
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
        }.get(sector, (v, p, q))
        return cls.from_rgb(int(r), int(g), int(b), int(a * 255))


def _parse_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    if match is None:
        _log.error("Invalid color hex: '%s'", text)
        raise ValueError("Invalid hex string")
    number = int(match.group(2), 16)
    if number > _ULONG_MAX:
        raise OverflowError(f"hex value out of range: '{text}'")
    if match.group(1) == "-":
        number = -number
    return number & _ULONG_MAX