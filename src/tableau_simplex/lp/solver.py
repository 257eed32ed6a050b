import logging
from typing import Any, Optional, Sequence

from .simplex import solve_tableau
from .solution import basis_labels, extract_solution, objective_value
from .table import build_table
from ..exceptions import (
    InvalidRelationError,
    IterationLimitError,
    ShapeMismatchError,
    UnboundedError,
)
from ..schemas import Constraint, LPProblem, Mode, SolveOptions, Status, TableauSolution

logger = logging.getLogger(__name__)


def simplex_solve(problem: LPProblem, options: Optional[SolveOptions] = None) -> TableauSolution:
    """
    Build, pivot and read back one problem.

    Failures come back as a status-tagged solution rather than an exception.
    """

    opts = options or SolveOptions()

    try:
        tableau = build_table(problem.objective, problem.constraints)
    except ShapeMismatchError as exc:
        return _failure("shape_mismatch", 0, str(exc))
    except InvalidRelationError as exc:
        return _failure("invalid_relation", 0, str(exc))

    logger.info(
        "Solving %r: %d variables, %d constraints (%s)",
        problem.name,
        tableau.num_variables,
        tableau.num_constraints,
        problem.mode,
    )

    try:
        solve_tableau(tableau, problem.mode, opts)
    except UnboundedError as exc:
        return _failure("unbounded", tableau.iterations, str(exc))
    except IterationLimitError as exc:
        return _failure("iteration_limit", exc.iterations, str(exc))

    return TableauSolution(
        status="optimal",
        objective_value=objective_value(tableau),
        x=extract_solution(tableau),
        basis=basis_labels(tableau),
        iterations=tableau.iterations,
        message="",
    )


def solve(
    objective: Sequence[float],
    constraints: Sequence[Any],
    mode: Mode = "maximize",
    options: Optional[SolveOptions] = None,
) -> TableauSolution:
    """Convenience entry point taking plain sequences instead of an ``LPProblem``."""

    problem = LPProblem(
        mode=mode,
        objective=list(objective),
        constraints=[_as_constraint(item) for item in constraints],
    )
    return simplex_solve(problem, options)


def _as_constraint(item: Any) -> Constraint:
    if isinstance(item, Constraint):
        return item
    if isinstance(item, dict):
        return Constraint.model_validate(item)
    coefficients, relation, bound = item
    return Constraint(coefficients=list(coefficients), relation=relation, bound=bound)


def _failure(status: Status, iterations: int, message: str) -> TableauSolution:
    return TableauSolution(
        status=status,
        objective_value=None,
        x=None,
        basis=None,
        iterations=iterations,
        message=message,
    )
