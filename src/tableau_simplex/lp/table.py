from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np

from ..exceptions import InvalidRelationError, ShapeMismatchError
from ..schemas import Constraint

SLACK = 1.0
SURPLUS = -1.0
_AUX_SIGN = {"<=": SLACK, ">=": SURPLUS}


@dataclass
class Tableau:
    """
    Canonical-form simplex table.

    ``matrix`` has ``num_constraints + 1`` rows and
    ``num_variables + num_constraints + 1`` columns: decision columns, one
    auxiliary column per constraint, then the right-hand side. The last row is
    the objective row. ``basis[i]`` is the column currently basic in row ``i``.
    """

    matrix: np.ndarray
    basis: List[int]
    num_variables: int
    num_constraints: int
    iterations: int = field(default=0)

    @property
    def shape(self):
        return self.matrix.shape

    @property
    def rhs_index(self) -> int:
        return self.num_variables + self.num_constraints

    def copy(self) -> "Tableau":
        return Tableau(
            matrix=self.matrix.copy(),
            basis=list(self.basis),
            num_variables=self.num_variables,
            num_constraints=self.num_constraints,
            iterations=self.iterations,
        )

    def column_label(self, col: int) -> str:
        if col < self.num_variables:
            return f"x{col + 1}"
        return f"s{col - self.num_variables + 1}"


def build_table(objective: Sequence[float], constraints: Sequence[Constraint]) -> Tableau:
    """
    Build the canonical table for ``objective`` subject to ``constraints``.

    The objective row stores ``z - c.x = 0``, i.e. the negated coefficients,
    whatever the optimisation mode; the mode only matters to the engine.
    """

    n = len(objective)
    m = len(constraints)

    # Validate everything before allocating anything.
    for i, cons in enumerate(constraints):
        if len(cons.coefficients) != n:
            raise ShapeMismatchError(i, n, len(cons.coefficients))
        if cons.relation not in _AUX_SIGN:
            raise InvalidRelationError(i, cons.relation)

    matrix = np.zeros((m + 1, n + m + 1), dtype=float)
    for i, cons in enumerate(constraints):
        matrix[i, :n] = cons.coefficients
        matrix[i, n + i] = _AUX_SIGN[cons.relation]
        matrix[i, -1] = cons.bound

    matrix[m, :n] = [-float(coef) for coef in objective]
    matrix[m, -1] = 0.0

    return Tableau(
        matrix=matrix,
        basis=[n + i for i in range(m)],
        num_variables=n,
        num_constraints=m,
    )
