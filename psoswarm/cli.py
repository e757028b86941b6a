"""Command-line front end: run several independent swarms on a benchmark problem."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

from psoswarm.functions import Problem, get_problem
from psoswarm.swarm import Swarm

T = TypeVar("T")

_MENU = (
    "\nEnter the function name:\n"
    " 1-Rosenbrock (HARD, flat global minimun region) \n"
    " 2-Sphere (EASY) \n"
    " 3-Ackley (MEDIUM, many local minima)\n"
    " 4-Griewank (VERY HARD, many local minima) \n"
    " 5-Rastrigin (VERY HARD, many local minima)\n"
    " 6-Shaffer [Original-problem] (VERY VERY VERY HARD, many local minima)\n\n "
)

_INITIAL_W = 0.5
_INITIAL_C1 = 2.0
_INITIAL_C2 = 2.0


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


class _Prompter:
    """Reads whitespace-separated answers from standard input, prompting first."""

    def __init__(self) -> None:
        self._source: Iterator[str] | None = None

    def ask(self, prompt: str, convert: Callable[[str], T]) -> T:
        if self._source is None:
            self._source = _tokens()
        print(prompt, end="", flush=True)
        try:
            token = next(self._source)
        except StopIteration:
            raise EOFError("unexpected end of input") from None
        return convert(token)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="psoswarm",
        description="Minimise a benchmark function with independent particle swarms. "
        "Settings not given as options are read from standard input.",
    )
    parser.add_argument("--dimension", type=int, help="problem dimension")
    parser.add_argument("--function", help="function number, 1 to 6")
    parser.add_argument("--max-iter", type=int, help="maximum number of iterations")
    parser.add_argument("--tol", type=float, help="tolerance on the distance to the solution")
    parser.add_argument("--particles", type=int, help="number of particles per swarm")
    parser.add_argument("--swarms", type=int, help="number of sub-swarms")
    parser.add_argument("--seed", type=int, help="seed for reproducible runs")
    return parser


def _build_swarms(
    problem: Problem,
    dimension: int,
    max_iter: int,
    tol: float,
    num_particles: int,
    num_swarms: int,
    seed: int | None,
) -> list[Swarm]:
    if num_swarms < 1:
        raise ValueError(f"number of sub-swarms must be at least 1, got {num_swarms}")
    master = random.Random(seed)
    swarms = []
    for swarm_id in range(num_swarms):
        start = time.perf_counter()
        swarm = Swarm(
            swarm_id,
            max_iter,
            tol,
            _INITIAL_W,
            _INITIAL_C1,
            _INITIAL_C2,
            num_particles,
            problem.function,
            dimension,
            problem.exact_solution,
            random.Random(master.getrandbits(64)),
        )
        elapsed = int((time.perf_counter() - start) * 1000)
        print(f"{elapsed} ms for initialization \n")
        swarms.append(swarm)
    return swarms


def main(argv: Sequence[str] | None = None) -> int:
    """Run the optimiser; return the process exit status."""
    args = _build_parser().parse_args(argv)
    prompter = _Prompter()

    try:
        dimension = (
            args.dimension
            if args.dimension is not None
            else prompter.ask("\nEnter the problem dimension:\n\n ", int)
        )
        choice = args.function if args.function is not None else prompter.ask(_MENU, str)
    except (ValueError, EOFError) as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 1

    try:
        problem = get_problem(choice, dimension)
    except ValueError:
        print("Invalid function name. Exiting.", file=sys.stderr)
        return 1

    try:
        max_iter = (
            args.max_iter
            if args.max_iter is not None
            else prompter.ask("\nEnter the maximum number of iterations:\n\n ", int)
        )
        tol = args.tol if args.tol is not None else prompter.ask("\nEnter the tolerance: \n\n ", float)
        num_particles = (
            args.particles
            if args.particles is not None
            else prompter.ask("\nEnter the number of particles: \n\n ", int)
        )
        num_swarms = (
            args.swarms
            if args.swarms is not None
            else prompter.ask("\nEnter the number of sub-swarms: \n\n ", int)
        )
        swarms = _build_swarms(
            problem, dimension, max_iter, tol, num_particles, num_swarms, args.seed
        )
    except (ValueError, EOFError) as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 1

    print(swarms[0].info(problem.name))

    for swarm in swarms:
        start = time.perf_counter()
        result = swarm.solve()
        elapsed = int((time.perf_counter() - start) * 1000)
        if result.converged:
            print(
                f"\n Swarm {result.swarm_id} --> Convergence achieved in "
                f"{result.iterations} iterations"
            )
        else:
            print("\n Maximum number of iterations reached")
            print(f"\n Tolerance achieved: {result.error:g}")
        print(f"\nElapsed time : {elapsed} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())