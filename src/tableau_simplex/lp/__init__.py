"""Tableau simplex core: table construction, pivoting and solution read-back."""

from .table import Tableau, build_table
from .simplex import solve_tableau, is_optimal, find_pivot_column, find_pivot_row, perform_pivot
from .solution import extract_solution, extract_row_values, objective_value, basis_labels
from .solver import simplex_solve, solve
from .parser import parse_problem_text

__all__ = [
    "Tableau",
    "build_table",
    "solve_tableau",
    "is_optimal",
    "find_pivot_column",
    "find_pivot_row",
    "perform_pivot",
    "extract_solution",
    "extract_row_values",
    "objective_value",
    "basis_labels",
    "simplex_solve",
    "solve",
    "parse_problem_text",
]
