"""Particle swarm optimisation over a single swarm."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from psoswarm.particle import Particle

_EPS = sys.float_info.epsilon

_W_MAX = 0.9
_W_MIN = 0.1


@dataclass(frozen=True)
class SolveResult:
    """Outcome of a run of :meth:`Swarm.solve`."""

    swarm_id: int
    converged: bool
    iterations: int
    position: tuple[float, ...]
    error: float


class Swarm:
    """A swarm of particles minimising ``fun`` with an adaptive inertia weight."""

    def __init__(
        self,
        swarm_id: int,
        max_iter: int,
        tol: float,
        w: float,
        c1: float,
        c2: float,
        num_particles: int,
        fun: Callable[[Sequence[float]], float],
        dimension: int,
        exact_solution: Sequence[float],
        rng: random.Random | None = None,
    ) -> None:
        if max_iter < 1:
            raise ValueError(f"max_iter must be at least 1, got {max_iter}")
        if num_particles < 1:
            raise ValueError(f"num_particles must be at least 1, got {num_particles}")
        if dimension < 0:
            raise ValueError(f"dimension must be non-negative, got {dimension}")
        if len(exact_solution) != dimension:
            raise ValueError(
                f"exact_solution has {len(exact_solution)} components, expected {dimension}"
            )
        self.swarm_id = swarm_id
        self.max_iter = max_iter
        self.tol = tol
        self.w = w
        self.c1 = c1
        self.c2 = c2
        self.fun = fun
        self.dimension = dimension
        self.exact_solution: tuple[float, ...] = tuple(exact_solution)
        self.rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = [
            Particle(fun, dimension, self.rng) for _ in range(num_particles)
        ]
        self.global_best_position: list[float] = []

    @property
    def num_particles(self) -> int:
        return len(self.particles)

    def global_best(self) -> list[float]:
        """Return a copy of the best position found by any particle so far."""
        best = min(self.particles, key=lambda p: p.best_value)
        return list(best.best_position)

    def update_local_best(self, particle: Particle) -> None:
        """Evaluate the particle and record its position if it is a new personal best."""
        particle.value = self.fun(particle.position)
        if particle.value < particle.best_value:
            particle.best_position = list(particle.position)
            particle.best_value = particle.value

    def error_norm(self, vec: Sequence[float]) -> float:
        """Euclidean distance between ``vec`` and the exact solution."""
        return math.sqrt(sum((v - e) ** 2 for v, e in zip(vec, self.exact_solution)))

    def _move(self, particle: Particle, gbp: Sequence[float]) -> None:
        self.update_local_best(particle)
        r1 = [self.rng.random() for _ in range(self.dimension)]
        r2 = [self.rng.random() for _ in range(self.dimension)]
        particle.velocity = [
            self.w * v
            + self.c1 * a * (b - x)
            + self.c2 * c * (g - x)
            for v, a, b, x, c, g in zip(
                particle.velocity, r1, particle.best_position, particle.position, r2, gbp
            )
        ]
        particle.position = [x + v for x, v in zip(particle.position, particle.velocity)]
        self.update_local_best(particle)

    def _adapt_inertia(self, improved: bool) -> None:
        if improved:
            self.w = min(self.w * 1.2, _W_MAX)
            if abs(self.w - _W_MAX) < _EPS:
                self.w *= 0.95
        else:
            self.w = max(self.w * 0.9, _W_MIN)
            if abs(self.w - _W_MIN) < _EPS:
                self.w *= 2

    def solve(self) -> SolveResult:
        """Iterate until the global best is within ``tol`` of the solution or ``max_iter`` runs out."""
        gbp_new: list[float] = []
        for it in range(1, self.max_iter + 1):
            self.global_best_position = self.global_best()
            for particle in self.particles:
                self._move(particle, self.global_best_position)

            gbp_new = self.global_best()
            improved = self.fun(gbp_new) < self.fun(self.global_best_position)
            if improved:
                self.global_best_position = gbp_new
            self._adapt_inertia(improved)

            error = self.error_norm(self.global_best_position)
            if error < self.tol:
                return SolveResult(self.swarm_id, True, it, tuple(gbp_new), error)

        error = self.error_norm(self.global_best_position)
        return SolveResult(self.swarm_id, False, self.max_iter, tuple(gbp_new), error)

    def info(self, fun_name: str) -> str:
        """Return a summary of the swarm's settings."""
        rule = "============================================="
        return "\n".join(
            [
                "",
                rule,
                "               PSO algorithm                 ",
                rule,
                "",
                rule,
                f" Function            : {fun_name}",
                f" Problem Dimension   : {self.dimension}",
                f" Max Iter            : {self.max_iter}",
                f" Tolerance           : {self.tol:g}",
                f" Number of Particles : {self.num_particles}",
                f" Inertia Weight      : {self.w:g}",
                f" Cognitive Parameter : {self.c1:g}",
                f" Social Parameter    : {self.c2:g}",
                rule,
            ]
        )

    def __repr__(self) -> str:
        return (
            f"Swarm(id={self.swarm_id}, particles={self.num_particles}, "
            f"dimension={self.dimension}, w={self.w!r})"
        )