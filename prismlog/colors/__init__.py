# colors/__init__.py

from .definitions import Color, Format, PALETTE, WHITE, BRIGHT_ADDITIVE
from .model import (
    ColorReference, StyleFn, palette_color, parse_hex, parse_hsl, parse_name,
    parse_notation, parse_rgb, render, resolve, strip_styling
)

__all__ = [
    'Color', 'Format', 'PALETTE', 'WHITE', 'BRIGHT_ADDITIVE', 'ColorReference',
    'StyleFn', 'palette_color', 'parse_hex', 'parse_hsl', 'parse_name',
    'parse_notation', 'parse_rgb', 'render', 'resolve', 'strip_styling'
]
