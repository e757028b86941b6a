# psoswarm

Particle swarm optimisation (PSO) on a set of classic benchmark functions,
run as several independent sub-swarms.

Each swarm starts with particles placed at random in `[-32, 32]` in every
dimension and with velocities drawn at random from `[-1, 1]`. On each
iteration every particle moves towards its own best position and towards
the swarm's global best position. The inertia weight adapts as the search
goes: after an iteration that improves the global best it grows by a factor
of 1.2 (capped at 0.9, then eased back slightly); otherwise it shrinks by a
factor of 0.9 (floored at 0.1, then doubled). A swarm stops when its global
best is within the tolerance of the known minimum, or when it reaches the
iteration limit.

## Installation

```
pip install .
```

No third-party libraries are needed. To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
psoswarm
```

Any setting not given as an option is asked for on standard input, in this
order:

1. the problem dimension (`--dimension`);
2. the function, by number (`--function`):
   - `1` Rosenbrock (hard, with a flat region around the global minimum)
   - `2` Sphere (easy)
   - `3` Ackley (medium, many local minima)
   - `4` Griewank (very hard, many local minima)
   - `5` Rastrigin (very hard, many local minima)
   - `6` Schaffer (the hardest, many local minima)
3. the maximum number of iterations (`--max-iter`);
4. the tolerance (`--tol`);
5. the number of particles in each swarm (`--particles`);
6. the number of sub-swarms (`--swarms`).

`--seed` makes a run reproducible. Every swarm is started with inertia
weight 0.5 and cognitive and social parameters 2.0.

For example:

```
psoswarm --dimension 3 --function 2 --max-iter 1000 --tol 1e-6 --particles 30 --swarms 4 --seed 1
```

The program prints the time taken to set up each swarm and a summary of the
settings. It then runs every sub-swarm and reports, for each one, the
iteration at which it converged, or the error it reached when the iteration
limit stopped it, and the time it took. An unknown function number, input
that cannot be read as a number, or a setting out of range (for instance
fewer than one iteration, particle or sub-swarm) makes the program exit with
status 1.

## Library use

```python
import random

from psoswarm.functions import get_problem, rastrigin
from psoswarm.swarm import Swarm

problem = get_problem("5", 3)

swarm = Swarm(
    swarm_id=0,
    max_iter=1000,
    tol=1e-6,
    w=0.5,
    c1=2.0,
    c2=2.0,
    num_particles=50,
    fun=problem.function,
    dimension=3,
    exact_solution=problem.exact_solution,
    rng=random.Random(42),
)
print(swarm.info(problem.name))
result = swarm.solve()

print(result.converged, result.iterations, result.error)
best = swarm.global_best()
print(best, rastrigin(best), swarm.error_norm(best))
```

### `psoswarm.functions`

`rosenbrock`, `sphere`, `ackley`, `griewank`, `rastrigin` and `schaffer`
each take a sequence of floats and return a float.

`get_problem(choice, dimension)` takes a choice from `"1"` to `"6"` (a
string or an integer) and returns a `Problem`: a frozen dataclass with
`name`, `function` and `exact_solution` (a tuple of `dimension` floats).
A `Problem` can itself be called on a point. An unknown choice or a negative
dimension raises `ValueError`.

### `psoswarm.particle`

`Particle(fun, dimension, rng=None)` draws a random position and velocity
and evaluates `fun` there. It has the attributes `position`, `velocity`,
`best_position`, `value` and `best_value`, and the property `dimension`.
`describe()` returns its state as readable text.

### `psoswarm.swarm`

`Swarm(swarm_id, max_iter, tol, w, c1, c2, num_particles, fun, dimension,
exact_solution, rng=None)` creates `num_particles` particles. It raises
`ValueError` when `max_iter` or `num_particles` is below 1, when `dimension`
is negative, or when `exact_solution` does not have `dimension` components.

- `global_best()` returns a copy of the best position any particle has found.
- `update_local_best(particle)` evaluates a particle and updates its
  personal best.
- `error_norm(vec)` is the Euclidean distance from `vec` to the exact
  solution.
- `solve()` runs the search and returns a `SolveResult` with `swarm_id`,
  `converged`, `iterations`, `position` and `error`. It prints nothing.
- `info(fun_name)` returns a summary of the settings as text.

## What it does not do

The sub-swarms are independent and are run one after another in a single
process; they do not run in parallel and do not share information. Particle
positions are not bounded to the starting range during the search.