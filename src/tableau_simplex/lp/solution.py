from typing import Dict

from .table import Tableau
from .utils import clean, rhs_column


def extract_solution(tableau: Tableau) -> Dict[str, float]:
    """
    Map ``x1 .. xn`` to their values in the final table.

    A decision variable takes the right-hand side of the row it is basic in,
    following the tracked basis rather than row position; non-basic variables
    are zero.
    """

    rhs = rhs_column(tableau.matrix)
    values = {f"x{j + 1}": 0.0 for j in range(tableau.num_variables)}
    for row, col in enumerate(tableau.basis):
        if col < tableau.num_variables:
            values[f"x{col + 1}"] = clean(rhs[row])
    return values


def extract_row_values(tableau: Tableau) -> Dict[str, float]:
    """Row-position reading: ``x{i+1}`` is the right-hand side of row ``i``."""

    rhs = rhs_column(tableau.matrix)
    return {f"x{i + 1}": clean(value) for i, value in enumerate(rhs)}


def objective_value(tableau: Tableau) -> float:
    return clean(tableau.matrix[-1, -1])


def basis_labels(tableau: Tableau) -> Dict[str, str]:
    return {f"row{row + 1}": tableau.column_label(col) for row, col in enumerate(tableau.basis)}
