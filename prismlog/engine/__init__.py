# engine/__init__.py

from .rules import RuleEngine
from .composer import LineComposer

__all__ = ['RuleEngine', 'LineComposer']
