import numpy as np


def objective_row(matrix: np.ndarray) -> np.ndarray:
    """Objective row without its right-hand-side cell (a view)."""
    return matrix[-1, :-1]


def rhs_column(matrix: np.ndarray) -> np.ndarray:
    """Right-hand-side values of the constraint rows (a view)."""
    return matrix[:-1, -1]


def column(matrix: np.ndarray, col: int) -> np.ndarray:
    """Entries of ``col`` over the constraint rows (a view)."""
    return matrix[:-1, col]


def clean(value: float, eps: float = 1e-12) -> float:
    value = float(value)
    if abs(value) < eps:
        return 0.0
    return value
