"""Errors raised by the tableau simplex core."""


class TableauError(Exception):
    """Base class for every failure of a single solve."""


class ShapeMismatchError(TableauError, ValueError):
    def __init__(self, index: int, expected: int, actual: int) -> None:
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Constraint {index + 1} has {actual} coefficients; the objective has {expected}."
        )


class InvalidRelationError(TableauError, ValueError):
    def __init__(self, index: int, relation: str) -> None:
        self.index = index
        self.relation = relation
        super().__init__(
            f"Constraint {index + 1} uses relation {relation!r}; expected '<=' or '>='."
        )


class UnboundedError(TableauError):
    def __init__(self, column: int) -> None:
        self.column = column
        super().__init__(
            f"Pivot column {column} has no positive entry; the objective is unbounded."
        )


class IterationLimitError(TableauError):
    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        super().__init__(f"No optimal table reached after {iterations} pivots.")
