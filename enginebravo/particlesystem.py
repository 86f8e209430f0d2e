"""Driving the particle emitters attached to registered game objects."""

from __future__ import annotations

from enginebravo.gameobject import Component, GameObject


class ParticleSystem:
    """Updates every emitter component of the active objects it tracks."""

    def __init__(self, emitter_kind: type[Component]) -> None:
        self.emitter_kind = emitter_kind
        self._objects: list[GameObject] = []

    @property
    def objects(self) -> list[GameObject]:
        return list(self._objects)

    def update(self) -> None:
        """Call ``update()`` on each emitter of each active object."""
        for obj in self._objects:
            if obj.active:
                for emitter in obj.get_components(self.emitter_kind):
                    emitter.update()

    def add_object(self, obj: GameObject) -> None:
        """Track ``obj`` unless it is already tracked."""
        if not any(existing is obj for existing in self._objects):
            self._objects.append(obj)

    def remove_object(self, obj: GameObject) -> None:
        self._objects = [existing for existing in self._objects if existing is not obj]

    def clear_objects(self) -> None:
        self._objects.clear()