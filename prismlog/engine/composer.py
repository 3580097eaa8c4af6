# engine/composer.py

from typing import Iterable

from ..components import Level, PropComponent, RuleComponent
from .rules import RuleEngine

class LineComposer:
    """Builds a full output line: level-filtered header props, then the rule-colored message."""

    def __init__(self, engine: RuleEngine):
        self.engine = engine

    def compose_header(self, level: Level, props: Iterable[PropComponent]) -> str:
        if level != Level.ALL:
            props = [p for p in props if p.level in (level, Level.ALL)]
        return "".join(
            f"{self.engine.apply_rules(prop.content(), prop.rules)} " for prop in props
        )

    def compose_line(self, level: Level, message: str,
                     rules: Iterable[RuleComponent],
                     props: Iterable[PropComponent]) -> str:
        return self.compose_header(level, props) + self.engine.apply_rules(message, rules)
