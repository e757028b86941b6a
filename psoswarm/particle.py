"""A single particle of a swarm."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence

POSITION_RANGE = (-32.0, 32.0)
VELOCITY_RANGE = (-1.0, 1.0)


class Particle:
    """A particle with a position, a velocity and the best point it has visited."""

    __slots__ = ("position", "velocity", "best_position", "value", "best_value")

    def __init__(
        self,
        fun: Callable[[Sequence[float]], float],
        dimension: int,
        rng: random.Random | None = None,
    ) -> None:
        if dimension < 0:
            raise ValueError(f"dimension must be non-negative, got {dimension}")
        rng = rng if rng is not None else random.Random()
        self.position: list[float] = []
        self.velocity: list[float] = []
        for _ in range(dimension):
            self.position.append(rng.uniform(*POSITION_RANGE))
            self.velocity.append(rng.uniform(*VELOCITY_RANGE))
        self.best_position: list[float] = list(self.position)
        self.value: float = fun(self.position)
        self.best_value: float = self.value

    @property
    def dimension(self) -> int:
        return len(self.position)

    def describe(self) -> str:
        """Return a readable summary of the particle's state."""

        def row(values: Sequence[float]) -> str:
            return "".join(f"{v:g} " for v in values)

        return "\n".join(
            [
                f"Position     : {row(self.position)}",
                f"Velocity     : {row(self.velocity)}",
                f"Best Position: {row(self.best_position)}",
                f"Value       : {self.value:g}",
                f"Best Value  : {self.best_value:g}",
            ]
        )

    def __repr__(self) -> str:
        return (
            f"Particle(position={self.position!r}, velocity={self.velocity!r}, "
            f"best_value={self.best_value!r})"
        )