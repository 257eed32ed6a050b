"""Linear programming with the tabular simplex method."""

from .schemas import Constraint, LPProblem, SolveOptions, TableauSolution
from .lp import simplex_solve, solve, parse_problem_text

__all__ = [
    "Constraint",
    "LPProblem",
    "SolveOptions",
    "TableauSolution",
    "simplex_solve",
    "solve",
    "parse_problem_text",
]
