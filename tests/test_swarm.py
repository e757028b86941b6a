import random

import pytest

from psoswarm.functions import rastrigin, sphere
from psoswarm.swarm import SolveResult, Swarm


def make_swarm(**overrides):
    params = dict(
        swarm_id=0,
        max_iter=50,
        tol=1e-3,
        w=0.5,
        c1=2.0,
        c2=2.0,
        num_particles=15,
        fun=sphere,
        dimension=2,
        exact_solution=(0.0, 0.0),
        rng=random.Random(42),
    )
    params.update(overrides)
    return Swarm(**params)


def test_particles_created():
    swarm = make_swarm(num_particles=7, dimension=3, exact_solution=(0.0,) * 3)
    assert swarm.num_particles == 7
    assert all(len(p.position) == 3 for p in swarm.particles)


def test_global_best_is_minimum_best_value():
    swarm = make_swarm()
    best = swarm.global_best()
    lowest = min(p.best_value for p in swarm.particles)
    assert sphere(best) == lowest


def test_global_best_returns_copy():
    swarm = make_swarm()
    best = swarm.global_best()
    best[0] = 1e9
    assert swarm.global_best()[0] != 1e9
    assert sphere(swarm.global_best()) < 1e18


def test_update_local_best_records_improvement():
    swarm = make_swarm()
    particle = swarm.particles[0]
    particle.position = [0.0, 0.0]
    swarm.update_local_best(particle)
    assert particle.value == 0.0
    assert particle.best_value == 0.0
    assert particle.best_position == [0.0, 0.0]


def test_update_local_best_keeps_better_previous():
    swarm = make_swarm()
    particle = swarm.particles[0]
    particle.position = [0.0, 0.0]
    swarm.update_local_best(particle)
    particle.position = [10.0, 10.0]
    swarm.update_local_best(particle)
    assert particle.value == sphere([10.0, 10.0])
    assert particle.best_value == 0.0
    assert particle.best_position == [0.0, 0.0]


def test_error_norm_pythagorean():
    swarm = make_swarm()
    assert swarm.error_norm([3.0, 4.0]) == pytest.approx(5.0)


def test_error_norm_zero_at_solution():
    swarm = make_swarm(exact_solution=(1.0, 1.0))
    assert swarm.error_norm([1.0, 1.0]) == 0.0


def test_solve_converges_on_sphere():
    swarm = make_swarm(max_iter=500)
    result = swarm.solve()
    assert isinstance(result, SolveResult)
    assert result.converged
    assert result.error < swarm.tol
    assert 1 <= result.iterations <= 500
    assert len(result.position) == 2


def test_solve_reports_max_iterations_when_unreachable():
    swarm = make_swarm(tol=0.0, max_iter=4)
    result = swarm.solve()
    assert not result.converged
    assert result.iterations == 4
    assert result.error >= 0.0


def test_solve_never_worsens_best_value():
    swarm = make_swarm(fun=rastrigin, max_iter=20, tol=0.0)
    before = min(p.best_value for p in swarm.particles)
    swarm.solve()
    after = min(p.best_value for p in swarm.particles)
    assert after <= before


def test_inertia_weight_stays_in_bounds():
    swarm = make_swarm(fun=rastrigin, max_iter=60, tol=0.0)
    swarm.solve()
    assert 0.1 <= swarm.w <= 0.9


def test_solve_is_reproducible_with_seed():
    a = make_swarm(rng=random.Random(7)).solve()
    b = make_swarm(rng=random.Random(7)).solve()
    assert a == b


def test_swarm_id_carried_into_result():
    result = make_swarm(swarm_id=3, tol=1e6).solve()
    assert result.swarm_id == 3
    assert result.iterations == 1


def test_info_lists_settings():
    text = make_swarm().info("Sphere")
    assert "PSO algorithm" in text
    assert " Function            : Sphere" in text
    assert " Problem Dimension   : 2" in text
    assert " Tolerance           : 0.001" in text
    assert " Number of Particles : 15" in text


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_iter": 0},
        {"num_particles": 0},
        {"dimension": 3},
        {"exact_solution": (0.0,)},
    ],
)
def test_invalid_settings_raise(overrides):
    with pytest.raises(ValueError):
        make_swarm(**overrides)