# engine/rules.py

from typing import Iterable, Union

from ..colors import Color, StyleFn, render, strip_styling
from ..components import ColorComponent, ColorRegistry, RuleComponent

class RuleEngine:
    """
    Rewrites text spans matched by coloring rules, resolving color names
    through the owning color registry.
    """
    def __init__(self, colors: ColorRegistry):
        self.colors = colors

    def resolve(self, reference: Union[ColorComponent, Color, str]) -> StyleFn:
        """Return the style function for a rule's color reference."""
        if isinstance(reference, str):
            reference = self.colors.fetch(reference)
        if isinstance(reference, ColorComponent):
            reference = reference.color
        return render(reference)

    def apply_rules(self, text: str, rules: Iterable[RuleComponent]) -> str:
        """
        Apply rules in order, each one over the output of the previous ones.

        Every match has its existing styling stripped before being wrapped,
        so overlapping rules never nest escape sequences.
        """
        for rule in rules:
            style = self.resolve(rule.color)
            text = rule.pattern.sub(lambda m: style(strip_styling(m.group(0))), text)
        return text
