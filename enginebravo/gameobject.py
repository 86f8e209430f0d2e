"""Game objects, their transforms and the components attached to them."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Callable, Iterator, TypeVar, Union

C = TypeVar("C", bound="Component")


@dataclass
class Vector2:
    """A mutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vector2, float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return Vector2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass
class Transform:
    """Position, rotation and scale of an object."""

    position: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))


class Component:
    """Something attached to a game object that gives it behaviour or data."""

    def __init__(self, tag: str = "") -> None:
        self.tag = tag
        self.game_object: GameObject | None = None

    def clone(self) -> Component:
        """Return a deep copy of this component, not attached to any object."""
        memo = {id(self.game_object): None}
        duplicate = copy.deepcopy(self, memo)
        duplicate.game_object = None
        return duplicate


class GameObject:
    """A node in the scene that holds components and may have a parent and children."""

    def __init__(self, name: str = "", tag: str = "", transform: Transform | None = None) -> None:
        self.id = -1
        self.name = name
        self.tag = tag
        self.active = True
        self.transform = transform if transform is not None else Transform()
        self.on_change: Callable[[GameObject], None] | None = None
        self._parent: GameObject | None = None
        self._children: list[GameObject] = []
        self._components: list[Component] = []

    def __repr__(self) -> str:
        return f"GameObject(id={self.id!r}, name={self.name!r}, tag={self.tag!r})"

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self)

    @property
    def components(self) -> list[Component]:
        return list(self._components)

    @property
    def children(self) -> list[GameObject]:
        return list(self._children)

    @property
    def parent(self) -> GameObject:
        """The parent object; raises LookupError if there is none."""
        if self._parent is None:
            raise LookupError("Parent is null")
        return self._parent

    @property
    def has_parent(self) -> bool:
        return self._parent is not None

    def add_component(self, component: Component) -> None:
        """Attach a component, taking ownership of it."""
        if component is None:
            raise ValueError("Component is null")
        component.game_object = self
        self._components.append(component)
        self._notify()

    def remove_component(self, component: Component) -> None:
        """Detach a component if it is attached to this object."""
        if component is None:
            raise ValueError("Component is null")
        remaining = [c for c in self._components if c is not component]
        if len(remaining) != len(self._components):
            self._components = remaining
            self._notify()

    def get_components(self, kind: type[C]) -> list[C]:
        """Return all attached components that are instances of ``kind``."""
        return [c for c in self._components if isinstance(c, kind)]

    def has_component(self, kind: type[Component]) -> bool:
        return any(isinstance(c, kind) for c in self._components)

    def components_with_tag(self, tag: str) -> list[Component]:
        return [c for c in self._components if c.tag == tag]

    def set_active(self, active: bool) -> None:
        """Set the active state of this object and all its descendants."""
        self.active = active
        for child in self._children:
            child.set_active(active)

    def world_transform(self) -> Transform:
        """Return the transform combined with those of all ancestors."""
        if self._parent is None:
            return copy.deepcopy(self.transform)
        base = self._parent.world_transform()
        return Transform(
            position=base.position + self.transform.position,
            rotation=base.rotation + self.transform.rotation,
            scale=base.scale * self.transform.scale,
        )

    def set_parent(self, parent: GameObject) -> None:
        """Move this object under ``parent``, leaving any previous parent."""
        if self._parent is not None:
            self._parent.remove_child(self)
        self._parent = parent
        parent.add_child(self)

    def remove_parent(self) -> None:
        self._parent = None

    def add_child(self, child: GameObject) -> None:
        self._children.append(child)

    def remove_child(self, child: GameObject) -> None:
        self._children = [c for c in self._children if c is not child]

    def copy(self) -> GameObject:
        """Return a copy with deep-copied components; children are not copied."""
        duplicate = GameObject(self.name, self.tag, copy.deepcopy(self.transform))
        duplicate.id = self.id
        duplicate.active = self.active
        duplicate.on_change = self.on_change
        duplicate._parent = self._parent
        for component in self._components:
            cloned = component.clone()
            cloned.game_object = duplicate
            duplicate._components.append(cloned)
        return duplicate

    def detach(self) -> None:
        """Leave the parent, orphan all children and drop all components."""
        if self._parent is not None:
            self._parent.remove_child(self)
            self._parent = None
        for child in self._children:
            child.remove_parent()
        self._children.clear()
        self._components.clear()