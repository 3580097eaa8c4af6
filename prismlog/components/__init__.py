# components/__init__.py

from .definitions import (
    FALLBACK_COLOR, ColorComponent, ComponentId, Level, PropComponent, RuleComponent
)
from .registry import BaseRegistry, ColorRegistry, PropRegistry, RuleRegistry

__all__ = [
    'FALLBACK_COLOR', 'ColorComponent', 'ComponentId', 'Level', 'PropComponent',
    'RuleComponent', 'BaseRegistry', 'ColorRegistry', 'PropRegistry', 'RuleRegistry'
]
