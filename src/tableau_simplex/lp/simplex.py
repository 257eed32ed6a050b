import logging
from typing import Optional

import numpy as np

from .table import Tableau
from .utils import column, objective_row, rhs_column
from ..exceptions import IterationLimitError, UnboundedError
from ..schemas import Mode, PivotRule, SolveOptions

logger = logging.getLogger(__name__)


def solve_tableau(tableau: Tableau, mode: Mode, options: Optional[SolveOptions] = None) -> Tableau:
    """
    Pivot ``tableau`` in place until the objective row passes the optimality test.

    Returns the same table. Raises ``UnboundedError`` when the entering column
    has no positive entry and ``IterationLimitError`` when the configured pivot
    budget runs out first.
    """

    opts = options or SolveOptions()
    limit = opts.iteration_limit(tableau.num_variables, tableau.num_constraints)
    iterations = 0

    while not is_optimal(tableau, mode, opts.tol):
        if iterations >= limit:
            logger.warning("Stopping after %d pivots without reaching optimality", iterations)
            raise IterationLimitError(iterations)

        pivot_col = find_pivot_column(tableau, mode, opts.pivot_rule, opts.tol)
        try:
            pivot_row = find_pivot_row(tableau, pivot_col, opts.pivot_rule, opts.tol)
        except UnboundedError:
            logger.warning("Unbounded direction in column %s", tableau.column_label(pivot_col))
            raise

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Pivot %d: %s enters at row %d replacing %s (pivot %.6g)",
                iterations + 1,
                tableau.column_label(pivot_col),
                pivot_row,
                tableau.column_label(tableau.basis[pivot_row]),
                tableau.matrix[pivot_row, pivot_col],
            )

        perform_pivot(tableau, pivot_row, pivot_col, opts.tol)
        _snap_to_zero(objective_row(tableau.matrix), opts.tol)
        iterations += 1
        tableau.iterations += 1

    logger.info(
        "Optimal table after %d pivots, objective %.6g",
        iterations,
        tableau.matrix[-1, -1],
    )
    return tableau


def is_optimal(tableau: Tableau, mode: Mode, tol: float = 0.0) -> bool:
    row = objective_row(tableau.matrix)
    if mode == "maximize":
        return bool(np.all(row >= -tol))
    return bool(np.all(row <= tol))


def find_pivot_column(
    tableau: Tableau, mode: Mode, pivot_rule: PivotRule = "dantzig", tol: float = 0.0
) -> int:
    row = objective_row(tableau.matrix)
    if pivot_rule == "bland":
        # Lowest-index improving column.
        improving = np.flatnonzero(row < -tol) if mode == "maximize" else np.flatnonzero(row > tol)
        if improving.size:
            return int(improving[0])

    # argmin/argmax return the first occurrence on ties.
    if mode == "maximize":
        return int(np.argmin(row))
    return int(np.argmax(row))


def find_pivot_row(
    tableau: Tableau, pivot_col: int, pivot_rule: PivotRule = "dantzig", tol: float = 0.0
) -> int:
    entries = column(tableau.matrix, pivot_col)
    admissible = entries > 0.0
    if not np.any(admissible):
        raise UnboundedError(pivot_col)

    ratios = np.full(entries.shape, np.inf)
    ratios[admissible] = rhs_column(tableau.matrix)[admissible] / entries[admissible]

    if pivot_rule == "bland":
        theta = ratios.min()
        tied = np.flatnonzero(ratios <= theta + tol * max(1.0, abs(theta)))
        return int(min(tied, key=lambda idx: tableau.basis[idx]))
    return int(np.argmin(ratios))


def perform_pivot(tableau: Tableau, pivot_row: int, pivot_col: int, tol: float = 0.0) -> None:
    """
    Gauss-Jordan step around ``(pivot_row, pivot_col)``, in place.

    With ``tol > 0`` a cell whose new value is below ``tol`` times the amount
    subtracted from it is treated as cancelled and set to zero.
    """

    matrix = tableau.matrix
    pivot_value = matrix[pivot_row, pivot_col]
    if pivot_value == 0:
        raise ValueError(f"Zero pivot at row {pivot_row}, column {pivot_col}.")

    matrix[pivot_row, :] /= pivot_value
    factors = matrix[:, pivot_col].copy()
    factors[pivot_row] = 0.0
    update = np.outer(factors, matrix[pivot_row, :])
    result = matrix - update
    if tol > 0:
        result[np.abs(result) <= tol * np.abs(update)] = 0.0
    matrix[:, :] = result
    tableau.basis[pivot_row] = pivot_col


def _snap_to_zero(values: np.ndarray, tol: float) -> None:
    values[np.abs(values) < tol] = 0.0
