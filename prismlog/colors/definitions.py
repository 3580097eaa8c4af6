# colors/definitions.py

import re
import colorsys
from enum import Enum
from dataclasses import dataclass
from typing import Dict, Tuple

Triple = Tuple[int, int, int]

BRIGHT_ADDITIVE = 60
BRIGHT_SUFFIX = "-bright"
DIM_SUFFIX = "-dim"

HEX_PATTERN = re.compile(r'^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$', re.IGNORECASE)
HSL_PATTERN = re.compile(r'^hsl\(\s*?(\d{1,3}),\s*?(\d{1,3})%,\s*?(\d{1,3})%\s*?\)$', re.IGNORECASE)
RGB_PATTERN = re.compile(r'^rgb\(\s*?(\d{1,3}),\s*?(\d{1,3}),\s*?(\d{1,3})\s*?\)$', re.IGNORECASE)
SUFFIX_PATTERN = re.compile(r'-(bright|dim)')
ANSI_PATTERN = re.compile(
    '[\u001b\u009b][\\[()#;?]*(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-ORZcf-nqry=><]'
)

# Channel defaults for partially captured notations
HSL_DEFAULTS: Triple = (0, 50, 100)
RGB_DEFAULTS: Triple = (255, 255, 255)


class Format(Enum):
    """Notation a canonical color was expressed in."""
    HEX = "hex"
    HSL = "hsl"
    RGB = "rgb"


def clamp(value: float, low: int = 0, high: int = 255) -> int:
    return max(low, min(high, int(value)))


@dataclass(frozen=True)
class Color:
    """
    Canonical color value.

    Hex and RGB colors carry channel values; HSL colors keep their
    hue/saturation/lightness unconverted until `rgb` is asked for.
    """
    format: Format
    values: Triple
    dim: bool = False

    @property
    def rgb(self) -> Triple:
        """Return the color as a clamped RGB triple."""
        if self.format is not Format.HSL:
            return tuple(clamp(v) for v in self.values)
        h, s, l = self.values
        r, g, b = colorsys.hls_to_rgb(
            clamp(h, high=360) / 360, clamp(l, high=100) / 100, clamp(s, high=100) / 100
        )
        return clamp(round(r * 255)), clamp(round(g * 255)), clamp(round(b * 255))


PALETTE: Dict[str, Triple] = {
    'red': (220, 40, 40),
    'orange': (220, 110, 40),
    'yellow': (220, 220, 40),
    'green': (40, 220, 40),
    'blue': (40, 110, 220),
    'purple': (165, 40, 220),
    'pink': (220, 40, 165),
    'white': (220, 220, 220),
    'gray': (110, 110, 110),
    'black': (40, 40, 40),
}

WHITE = Color(Format.RGB, PALETTE['white'])
