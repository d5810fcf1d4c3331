import pytest

from electrontemperature.analysis.ratio import RatioFunction
from electrontemperature.config import AnalysisConfig, MACHINE_EPSILON
from electrontemperature.model.cross_sections import CrossSectionTable
from electrontemperature.solvers.newton import NewtonSolver, NewtonState, SolveStatus


@pytest.fixture
def loose_solver_factory():
    def make(rhs: float, max_iterations: int = 100) -> NewtonSolver:
        return NewtonSolver(RatioFunction(rhs=rhs), eps=1e-9, step=1e-7, max_iterations=max_iterations)
    return make


def test_default_configuration_couples_step_and_tolerance():
    config = AnalysisConfig()
    solver = NewtonSolver.from_config(RatioFunction(rhs=config.rhs), config)

    assert solver.eps == solver.step_size == 10.0 * MACHINE_EPSILON
    assert solver.max_iterations == 10000
    assert solver.initial_temperature == 1.0


def test_step_reports_pre_step_residual(low_table, high_table):
    ratio = RatioFunction(rhs=1.1)
    solver = NewtonSolver(ratio, eps=1e-9, step=1e-6)

    state = solver.step(NewtonState(temperature=1.0), high_table, low_table)

    d0 = ratio.residual(1.0, high_table, low_table)
    d1 = ratio.residual(1.0 + 1e-6, high_table, low_table)
    assert state.residual == d0
    assert state.temperature == pytest.approx(1.0 - 1e-6 / (d1 / d0 - 1.0))
    assert state.iteration == 1


def test_step_keeps_exact_root(flat_table):
    solver = NewtonSolver(RatioFunction(rhs=1.0), eps=1e-9, step=1e-7)

    state = solver.step(NewtonState(temperature=3.0, iteration=4), flat_table, flat_table)

    assert state == NewtonState(temperature=3.0, residual=0.0, iteration=5)


def test_converges_to_known_temperature(low_table, high_table, loose_solver_factory):
    target = RatioFunction(rhs=0.0).intensity_ratio(2.0, high_table, low_table)
    solver = loose_solver_factory(rhs=target)

    result = solver.solve(high_table, low_table)

    assert result.converged
    assert result.status is SolveStatus.CONVERGED
    assert abs(result.residual) <= 1e-9
    assert result.temperature == pytest.approx(2.0, abs=1e-6)
    assert 0 < result.iterations < 100


def test_identical_tables_converge_when_rhs_is_one(flat_table):
    solver = NewtonSolver(RatioFunction(rhs=1.0), eps=10.0 * MACHINE_EPSILON, step=10.0 * MACHINE_EPSILON)

    result = solver.solve(flat_table, flat_table)

    assert result.converged
    assert result.temperature == 1.0
    assert result.residual == 0.0
    assert result.iterations == 1


def test_identical_tables_fail_after_exactly_max_iterations(flat_table):
    config = AnalysisConfig()
    solver = NewtonSolver.from_config(RatioFunction(rhs=config.rhs), config)

    result = solver.solve(flat_table, flat_table)

    assert result.status is SolveStatus.FAILED
    assert not result.converged
    assert result.iterations == config.max_iterations
    assert result.residual == pytest.approx(1.0 - config.rhs)


def test_zero_iteration_budget_fails_immediately(low_table, high_table):
    solver = NewtonSolver(RatioFunction(rhs=1.0), eps=1e-9, step=1e-7, max_iterations=0)

    result = solver.solve(high_table, low_table)

    assert result.status is SolveStatus.FAILED
    assert result.iterations == 0
    assert result.temperature == 1.0
    assert result.residual == 1.0


def test_empty_denominator_is_degenerate(flat_table, loose_solver_factory):
    solver = loose_solver_factory(rhs=1.0)

    result = solver.solve(flat_table, flat_table.truncate(0.5))

    assert result.status is SolveStatus.DEGENERATE
    assert result.iterations == 0
    assert result.temperature == 1.0


def test_empty_numerator_fails_without_raising(flat_table, loose_solver_factory):
    solver = loose_solver_factory(rhs=1.0, max_iterations=25)

    result = solver.solve(flat_table.truncate(0.5), flat_table)

    assert result.status is SolveStatus.FAILED
    assert result.iterations == 25


def test_solving_twice_is_bit_identical(reference_provider):
    config = AnalysisConfig(max_iterations=500)
    solver = NewtonSolver.from_config(RatioFunction(rhs=config.rhs), config)
    left = reference_provider[1].truncate(50.0)
    right = reference_provider[2].truncate(50.0)

    first = solver.solve(left, right)
    second = solver.solve(left, right)

    assert first.temperature.hex() == second.temperature.hex()
    assert first.residual.hex() == second.residual.hex()
    assert first.status is second.status
    assert first.iterations == second.iterations


def test_separate_step_changes_iteration_path(low_table, high_table):
    target = RatioFunction(rhs=0.0).intensity_ratio(2.0, high_table, low_table)
    coarse = NewtonSolver(RatioFunction(rhs=target), eps=1e-9, step=1e-3)
    fine = NewtonSolver(RatioFunction(rhs=target), eps=1e-9, step=1e-7)

    first_coarse = coarse.step(NewtonState(temperature=1.0), high_table, low_table)
    first_fine = fine.step(NewtonState(temperature=1.0), high_table, low_table)

    assert first_coarse.residual == first_fine.residual
    assert first_coarse.temperature != first_fine.temperature
