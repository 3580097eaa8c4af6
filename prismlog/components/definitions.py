# components/definitions.py

import re
import itertools
from enum import IntEnum
from dataclasses import dataclass, field
from typing import Callable, NewType, Tuple, Union

from ..colors import Color, ColorReference

ComponentId = NewType('ComponentId', int)

_ids = itertools.count(1)

def next_id() -> ComponentId:
    """Return a fresh, process-unique component identity."""
    return ComponentId(next(_ids))

class Level(IntEnum):
    """Severity of a log call. ALL is a wildcard matching every call."""
    ALL = 0
    INFO = 1
    WARN = 2
    ERROR = 3

@dataclass(frozen=True)
class ColorComponent:
    """A named color held in a ColorRegistry."""
    name: str
    color: ColorReference
    id: ComponentId = field(default_factory=next_id, init=False, compare=False)

@dataclass(frozen=True)
class RuleComponent:
    """
    Colors every span of text matching `pattern`.

    `color` is either a registered color name, a ColorComponent or a
    canonical Color. String patterns are compiled on construction.
    """
    pattern: re.Pattern
    color: Union[ColorComponent, Color, str]
    id: ComponentId = field(default_factory=next_id, init=False, compare=False)

    def __post_init__(self):
        if isinstance(self.pattern, str):
            object.__setattr__(self, 'pattern', re.compile(self.pattern))

@dataclass(frozen=True)
class PropComponent:
    """Header segment generator, shown for calls of its level (or every call for ALL)."""
    level: Level
    content: Callable[[], str]
    rules: Tuple[RuleComponent, ...] = ()
    id: ComponentId = field(default_factory=next_id, init=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'rules', tuple(self.rules))

# Returned by ColorRegistry.fetch on a miss
FALLBACK_COLOR = ColorComponent("", "white")
