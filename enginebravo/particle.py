"""Single particles with motion, size and colour over their lifetime."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Sequence

from enginebravo.gameobject import Vector2


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255


class Particle:
    """A particle whose lifetimes are given in milliseconds."""

    def __init__(
        self,
        position: Vector2,
        velocity: Vector2,
        acceleration: float,
        life_time: int,
        max_life_time: int,
        size: Vector2,
        size_shift: Vector2,
        rotation: float,
        angular_velocity: float,
        angular_acceleration: float,
        color_gradient: Sequence[Color] = (),
    ) -> None:
        self.position = copy.copy(position)
        self.velocity = copy.copy(velocity)
        self.acceleration = acceleration
        self.max_life_time = max_life_time
        self.size = copy.copy(size)
        self.end_size = copy.copy(size_shift)
        self.start_size = copy.copy(size)
        self.rotation = rotation
        self.angular_velocity = angular_velocity
        self.angular_acceleration = angular_acceleration
        self.color_gradient = list(color_gradient)
        self.initial_life_time = life_time
        self.interpolate_color = True
        self.life_time = life_time / 1000

    def _progress(self) -> float:
        return self.max_life_time / 1000 - (
            self.life_time + (self.max_life_time - self.initial_life_time) / 1000
        )

    def update(self, delta_time: float) -> None:
        """Advance the particle by ``delta_time`` seconds."""
        self.position.x += self.velocity.x * delta_time
        self.position.y += self.velocity.y * delta_time

        self.velocity.x += self.acceleration * delta_time
        self.velocity.y += self.acceleration * delta_time
        self.life_time = max(self.life_time - delta_time, 0.0)

        progress = self._progress()
        self.size.x = self.start_size.x + (self.end_size.x - self.start_size.x) * progress
        self.size.y = self.start_size.y + (self.end_size.y - self.start_size.y) * progress

        if self.size.x < 0:
            self.size.x = 0.0
            self.life_time = 0.0
        if self.size.y < 0:
            self.size.y = 0.0
            self.life_time = 0.0

        self.rotation += self.angular_velocity * delta_time
        self.angular_velocity += self.angular_acceleration * delta_time

    def current_color(self) -> Color:
        """The colour for the particle's current point in its life."""
        if not self.color_gradient:
            return Color(255, 255, 255, 255)
        if len(self.color_gradient) == 1:
            return self.color_gradient[0]
        if self.interpolate_color:
            return self._interpolated_color()
        return self._nearest_color()

    def _interpolated_color(self) -> Color:
        gradient = self.color_gradient
        steps = len(gradient) - 1
        scaled = self._progress() * steps
        index = int(scaled)
        if index < 0 or index >= steps:
            return gradient[-1]
        start, end = gradient[index], gradient[index + 1]
        t = scaled - index
        return Color(
            int(start.r + t * (end.r - start.r)),
            int(start.g + t * (end.g - start.g)),
            int(start.b + t * (end.b - start.b)),
            int(start.a + t * (end.a - start.a)),
        )

    def _nearest_color(self) -> Color:
        gradient = self.color_gradient
        progress = self.max_life_time / 1000 - (
            self.life_time + (self.max_life_time - self.initial_life_time)
        )
        index = int(progress * (len(gradient) - 1))
        index = min(max(index, 0), len(gradient) - 1)
        return gradient[index]