# components/registry.py

from abc import ABC, abstractmethod
from typing import Callable, Dict, Generic, Iterator, Optional, Tuple, TypeVar, Union

from ..colors import Color, ColorReference
from .definitions import (
    FALLBACK_COLOR, ColorComponent, ComponentId, Level, PropComponent, RuleComponent
)

T = TypeVar('T')
I = TypeVar('I')

class BaseRegistry(ABC, Generic[T, I]):
    """
    Insertion-ordered store of components keyed by their generated identity.

    Iteration order is registration order; rule application and header
    concatenation both depend on it. Not safe for concurrent mutation.
    """
    def __init__(self):
        self._components: Dict[ComponentId, T] = {}

    @property
    def active(self) -> Tuple[T, ...]:
        """Snapshot of live components in registration order."""
        return tuple(self._components.values())

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[T]:
        return iter(self.active)

    def _insert(self, component) -> ComponentId:
        self._components[component.id] = component
        return component.id

    @abstractmethod
    def create(self, *args) -> ComponentId: ...

    @abstractmethod
    def fetch(self, identifier: I) -> Optional[T]: ...

    @abstractmethod
    def delete(self, identifier: I) -> bool: ...

class ColorRegistry(BaseRegistry[ColorComponent, str]):
    """Colors are looked up by their human-chosen name, never failing."""

    def create(self, name: str, color: ColorReference) -> ComponentId:
        return self._insert(ColorComponent(name, color))

    def fetch(self, name: str) -> ColorComponent:
        """Return the first color named `name`, or the white fallback."""
        component_id = self._find_id(name)
        if component_id is None:
            return FALLBACK_COLOR
        return self._components[component_id]

    def delete(self, name: str) -> bool:
        component_id = self._find_id(name)
        return component_id is not None and self._components.pop(component_id, None) is not None

    def __contains__(self, name: str) -> bool:
        return self._find_id(name) is not None

    def _find_id(self, name: str) -> Optional[ComponentId]:
        return next((cid for cid, c in self._components.items() if c.name == name), None)

class _IdentityRegistry(BaseRegistry[T, ComponentId]):
    def fetch(self, component_id: ComponentId) -> Optional[T]:
        return self._components.get(component_id)

    def delete(self, component_id: ComponentId) -> bool:
        return self._components.pop(component_id, None) is not None

    def __contains__(self, component_id: ComponentId) -> bool:
        return component_id in self._components

class RuleRegistry(_IdentityRegistry[RuleComponent]):
    def create(self, pattern, color: Union[ColorComponent, Color, str]) -> ComponentId:
        return self._insert(RuleComponent(pattern, color))

class PropRegistry(_IdentityRegistry[PropComponent]):
    def create(self, level: Level, content: Callable[[], str], *rules: RuleComponent) -> ComponentId:
        return self._insert(PropComponent(level, content, rules))
