# colors/model.py

import re
import unicodedata
from functools import singledispatch
from typing import Callable, Optional, Union

from rich.color import Color as RichColor, ColorSystem
from rich.style import Style

from ..diagnostics import DiagnosticLogger
from ..errors import InvalidColorNotation
from .definitions import (
    ANSI_PATTERN, BRIGHT_ADDITIVE, BRIGHT_SUFFIX, DIM_SUFFIX, HEX_PATTERN,
    HSL_DEFAULTS, HSL_PATTERN, PALETTE, RGB_DEFAULTS, RGB_PATTERN,
    SUFFIX_PATTERN, WHITE, Color, Format, Triple, clamp
)

StyleFn = Callable[[str], str]
ColorReference = Union[Color, str]

logger = DiagnosticLogger(__name__)

def _captures(match: Optional[re.Match], defaults: Triple, notation: str) -> Triple:
    """Read three integer captures, substituting defaults for missing ones."""
    groups = match.groups() if match else (None, None, None)
    if any(g is None for g in groups):
        logger.warning(f"Color notation '{notation}' is incomplete, defaulted missing channels")
    return tuple(int(g) if g is not None else d for g, d in zip(groups, defaults))

def parse_hex(text: str) -> Color:
    match = HEX_PATTERN.match(text)
    if not match:
        logger.warning(f"Hex notation '{text}' is malformed, using white")
        return WHITE
    return Color(Format.HEX, tuple(int(pair, 16) for pair in match.groups()))

def parse_hsl(text: str) -> Color:
    """Parse `hsl(h, s%, l%)`; channels stay in HSL space."""
    return Color(Format.HSL, _captures(HSL_PATTERN.match(text), HSL_DEFAULTS, text))

def parse_rgb(text: str) -> Color:
    return Color(Format.RGB, _captures(RGB_PATTERN.match(text), RGB_DEFAULTS, text))

def palette_color(name: str) -> Color:
    """Look up a bare palette name, raising on unknown names."""
    try:
        return Color(Format.RGB, PALETTE[name])
    except KeyError:
        raise InvalidColorNotation(name) from None

def parse_name(text: str) -> Color:
    """
    Parse a palette name with an optional `-bright` or `-dim` suffix.

    Suffixes are detected on the end of the original string, while every
    suffix token anywhere in the string is removed before lookup. So
    `red-bright-dim` resolves to dim red and is not brightened.
    """
    bright = text.endswith(BRIGHT_SUFFIX)
    dim = text.endswith(DIM_SUFFIX)

    name = text
    while SUFFIX_PATTERN.search(name):
        name = SUFFIX_PATTERN.sub("", name, count=1)

    try:
        color = palette_color(name)
    except InvalidColorNotation as e:
        logger.warning(f"{e}, using white")
        return WHITE

    values = color.values
    if bright:
        values = tuple(clamp(v + BRIGHT_ADDITIVE) for v in values)
    return Color(Format.RGB, values, dim=dim)

def parse_notation(text: str) -> Color:
    """Detect the notation of `text` (hex, hsl, rgb, then palette name) and parse it."""
    if HEX_PATTERN.match(text):
        return parse_hex(text)
    elif HSL_PATTERN.match(text):
        return parse_hsl(text)
    elif RGB_PATTERN.match(text):
        return parse_rgb(text)
    return parse_name(text)

@singledispatch
def resolve(reference) -> Color:
    """Resolve a color reference into a canonical color."""
    logger.warning(f"Unsupported color reference {reference!r}, using white")
    return WHITE

@resolve.register
def _(reference: str) -> Color:
    return parse_notation(reference)

@resolve.register
def _(reference: Color) -> Color:
    return reference

def render(reference: ColorReference) -> StyleFn:
    """Return a function wrapping text in truecolor ANSI styling for `reference`."""
    color = resolve(reference)
    style = Style(color=RichColor.from_rgb(*color.rgb), dim=color.dim or None)

    def style_fn(text: str) -> str:
        return style.render(text, color_system=ColorSystem.TRUECOLOR)

    return style_fn

def strip_styling(text: str) -> str:
    """
    Remove ANSI escape sequences and NFC-normalize the result.

    Normalizing can compose new sequence bytes (U+212A becomes `K`) and
    stripping can join a base character with a combining mark, so both
    steps repeat until the text stops changing.
    """
    while True:
        stripped = unicodedata.normalize("NFC", ANSI_PATTERN.sub("", text))
        if stripped == text:
            return stripped
        text = stripped
