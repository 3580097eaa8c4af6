# __init__.py

from .colors import Color as ColorValue, parse_notation, render, strip_styling
from .components import ColorComponent as Color, Level, PropComponent as Prop, RuleComponent as Rule
from .config import LoggerConfig
from .logger import Logger, get_default_logger

__all__ = [
    "Logger", "LoggerConfig", "Level", "Color", "Prop", "Rule", "ColorValue",
    "parse_notation", "render", "strip_styling", "get_default_logger"
]
