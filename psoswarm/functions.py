"""Benchmark objective functions and the problem catalogue offered by the CLI."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

ROSENBROCK_A = 1.0
ROSENBROCK_B = 100.0

ACKLEY_A = 20.0
ACKLEY_B = 0.2
ACKLEY_C = 2 * math.pi

Objective = Callable[[Sequence[float]], float]


def rosenbrock(x: Sequence[float]) -> float:
    """Rosenbrock valley; a flat region around the minimum at (1, ..., 1)."""
    return sum(
        (ROSENBROCK_A - xi) ** 2 + ROSENBROCK_B * (xn - xi * xi) ** 2
        for xi, xn in zip(x, x[1:])
    )


def sphere(x: Sequence[float]) -> float:
    """Sum of squares; convex with its minimum at the origin."""
    return sum(xi * xi for xi in x)


def ackley(x: Sequence[float]) -> float:
    """Ackley function; many local minima, global minimum 0 at the origin."""
    n = len(x)
    sum_sq = sum(xi * xi for xi in x)
    sum_cos = sum(math.cos(ACKLEY_C * xi) for xi in x)
    term1 = -ACKLEY_A * math.exp(-ACKLEY_B * math.sqrt(sum_sq / n))
    term2 = -math.exp(sum_cos / n)
    return term1 + term2 + ACKLEY_A + math.e


def griewank(x: Sequence[float]) -> float:
    """Griewank function; global minimum 0 at the origin."""
    total = sum(xi * xi / 4000.0 for xi in x)
    prod = math.prod(math.cos(xi / math.sqrt(i)) for i, xi in enumerate(x, start=1))
    return 1.0 + total - prod


def rastrigin(x: Sequence[float]) -> float:
    """Rastrigin function; global minimum 0 at the origin."""
    return sum(xi * xi - 10 * math.cos(2 * math.pi * xi) + 10 for xi in x)


def schaffer(x: Sequence[float]) -> float:
    """Schaffer function; global minimum 0 at the origin."""
    term = sum(xi * xi for xi in x)
    s = math.sin(math.sqrt(term))
    return 0.5 + (s * s - 0.5) / (1 + 0.001 * term) ** 2


@dataclass(frozen=True)
class Problem:
    """An objective together with its known minimiser."""

    name: str
    function: Objective
    exact_solution: tuple[float, ...]

    def __call__(self, x: Sequence[float]) -> float:
        return self.function(x)


_CATALOGUE: dict[str, tuple[str, Objective, float]] = {
    "1": ("Rosenbrock", rosenbrock, 1.0),
    "2": ("Sphere", sphere, 0.0),
    "3": ("Ackley", ackley, 0.0),
    "4": ("Griewank", griewank, 0.0),
    "5": ("Rastrigin", rastrigin, 0.0),
    "6": ("Schaffer", schaffer, 0.0),
}


def get_problem(choice: str | int, dimension: int) -> Problem:
    """Return the problem numbered ``choice`` ("1" to "6") in ``dimension`` dimensions."""
    key = str(choice).strip()
    try:
        name, function, optimum = _CATALOGUE[key]
    except KeyError:
        raise ValueError(f"Invalid function name: {choice!r}") from None
    if dimension < 0:
        raise ValueError(f"dimension must be non-negative, got {dimension}")
    return Problem(name, function, (optimum,) * dimension)