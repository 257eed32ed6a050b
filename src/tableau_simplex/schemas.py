from pydantic import BaseModel, Field
from typing import Literal, List, Dict, Optional

Mode = Literal["maximize", "minimize"]
PivotRule = Literal["dantzig", "bland"]
Status = Literal["optimal", "unbounded", "iteration_limit", "shape_mismatch", "invalid_relation"]


class Constraint(BaseModel):
    coefficients: List[float]
    # Validated by the table builder, not here, so bad input surfaces as InvalidRelationError.
    relation: str
    bound: float


class LPProblem(BaseModel):
    name: str = "problem"
    mode: Mode = "maximize"
    objective: List[float]
    constraints: List[Constraint] = Field(default_factory=list)

    @property
    def num_variables(self) -> int:
        return len(self.objective)

    @property
    def num_constraints(self) -> int:
        return len(self.constraints)


class SolveOptions(BaseModel):
    max_iters: Optional[int] = None
    iteration_factor: int = 10
    tol: float = 1e-9
    pivot_rule: PivotRule = "dantzig"

    def iteration_limit(self, num_variables: int, num_constraints: int) -> int:
        if self.max_iters is not None:
            return max(self.max_iters, 0)
        return max(self.iteration_factor * (num_variables + num_constraints), 1)


class TableauSolution(BaseModel):
    status: Status
    objective_value: Optional[float]
    x: Dict[str, float] | None
    basis: Dict[str, str] | None
    iterations: int
    message: str = ""
