import pytest

from conftest import load_example
from tableau_simplex.lp.solver import simplex_solve, solve
from tableau_simplex.schemas import Constraint, LPProblem, SolveOptions


def test_simplex_solves_textbook_lp(textbook_problem):
    solution = simplex_solve(textbook_problem, SolveOptions())

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(33.0, abs=1e-6)
    assert solution.x is not None
    assert solution.x["x1"] == pytest.approx(3.0, abs=1e-6)
    assert solution.x["x2"] == pytest.approx(12.0, abs=1e-6)
    assert solution.iterations == 3
    assert solution.basis == {"row1": "x2", "row2": "s3", "row3": "x1"}


def test_single_variable_single_constraint():
    solution = solve([1.0], [([1.0], "<=", 5.0)], mode="maximize")

    assert solution.status == "optimal"
    assert solution.x == {"x1": pytest.approx(5.0)}
    assert solution.objective_value == pytest.approx(5.0)


def test_minimize_negative_costs():
    problem = load_example("min_negative_costs.json")
    solution = simplex_solve(problem)

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(-9.0, abs=1e-6)
    assert solution.x["x1"] == pytest.approx(3.0, abs=1e-6)
    assert solution.x["x2"] == pytest.approx(1.0, abs=1e-6)


def test_minimize_positive_costs_stays_at_origin(textbook_constraints):
    problem = LPProblem(mode="minimize", objective=[3.0, 2.0], constraints=textbook_constraints)
    solution = simplex_solve(problem)

    assert solution.status == "optimal"
    assert solution.iterations == 0
    assert solution.objective_value == 0.0
    assert solution.x == {"x1": 0.0, "x2": 0.0}


def test_more_constraints_than_variables():
    solution = solve(
        [1.0],
        [
            {"coefficients": [1.0], "relation": "<=", "bound": 7.0},
            {"coefficients": [2.0], "relation": "<=", "bound": 10.0},
            {"coefficients": [1.0], "relation": "<=", "bound": 6.0},
        ],
    )

    assert solution.status == "optimal"
    assert solution.x == {"x1": pytest.approx(5.0)}


def test_shape_mismatch_status():
    solution = solve([1.0, 1.0], [([1.0, 2.0, 3.0], "<=", 4.0)])

    assert solution.status == "shape_mismatch"
    assert solution.x is None
    assert solution.objective_value is None
    assert solution.iterations == 0
    assert "3 coefficients" in solution.message


def test_invalid_relation_status():
    problem = LPProblem(
        objective=[1.0],
        constraints=[Constraint(coefficients=[1.0], relation="==", bound=4.0)],
    )
    solution = simplex_solve(problem)

    assert solution.status == "invalid_relation"
    assert solution.x is None
    assert "'=='" in solution.message


def test_unbounded_status():
    solution = solve([1.0], [([-1.0], ">=", -5.0)], mode="maximize")

    assert solution.status == "unbounded"
    assert solution.x is None
    assert solution.objective_value is None
    assert solution.basis is None


def test_unbounded_without_constraints():
    solution = solve([2.0, 1.0], [])

    assert solution.status == "unbounded"


def test_iteration_limit_status(textbook_problem):
    solution = simplex_solve(textbook_problem, SolveOptions(max_iters=2))

    assert solution.status == "iteration_limit"
    assert solution.iterations == 2
    assert solution.x is None


def test_bland_rule_reaches_same_optimum(textbook_problem):
    solution = simplex_solve(textbook_problem, SolveOptions(pivot_rule="bland"))

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(33.0, abs=1e-6)
    assert solution.x["x1"] == pytest.approx(3.0, abs=1e-6)
    assert solution.x["x2"] == pytest.approx(12.0, abs=1e-6)


def test_solution_serializes(textbook_problem):
    payload = simplex_solve(textbook_problem).model_dump()

    assert payload["status"] == "optimal"
    assert set(payload) == {"status", "objective_value", "x", "basis", "iterations", "message"}


def test_tiny_coefficient_still_binds():
    solution = solve([1.0], [([1e-10], "<=", 1.0)])

    assert solution.status == "optimal"
    assert solution.x["x1"] == pytest.approx(1e10, rel=1e-9)
    assert solution.objective_value == pytest.approx(1e10, rel=1e-9)


@pytest.mark.parametrize(
    "factors",
    [
        (1e-10, 1e-10, 1e-10),
        (1e-10, 1e4, 1e-3),
    ],
)
def test_row_scaling_keeps_optimum(textbook_constraints, factors):
    scaled = [
        Constraint(
            coefficients=[coef * factor for coef in cons.coefficients],
            relation=cons.relation,
            bound=cons.bound * factor,
        )
        for cons, factor in zip(textbook_constraints, factors)
    ]
    solution = simplex_solve(LPProblem(objective=[3.0, 2.0], constraints=scaled))

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(33.0, rel=1e-6)
    assert solution.x["x1"] == pytest.approx(3.0, rel=1e-6)
    assert solution.x["x2"] == pytest.approx(12.0, rel=1e-6)
