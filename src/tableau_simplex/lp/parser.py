import re
from typing import List

from ..schemas import Constraint, LPProblem, Mode

_NUMBER_SPLIT = re.compile(r"[,\s]+")
_RELATION = re.compile(r"(<=|>=|=<|=>|==|<|>|=)")


def parse_problem_text(
    objective_text: str,
    constraints_text: str,
    mode: Mode = "maximize",
    name: str = "parsed",
) -> LPProblem:
    """
    Parse the form layout used by the web front end:
      objective:   "3, 2"
      constraints: "2,1 <= 18" one per line
    Only numbers are converted here; relation and shape checks belong to the table builder.
    """

    if not objective_text or not objective_text.strip():
        raise ValueError("Objective is empty.")

    objective = _parse_numbers(objective_text, "objective")

    constraints: List[Constraint] = []
    for line_no, raw_line in enumerate((constraints_text or "").splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        match = _RELATION.search(line)
        if not match:
            raise ValueError(f"Line {line_no}: no relation found in '{line}'.")
        lhs = line[: match.start()].strip()
        rhs = line[match.end() :].strip()
        if not lhs or not rhs:
            raise ValueError(f"Line {line_no}: incomplete constraint '{line}'.")
        bound = _parse_numbers(rhs, f"line {line_no} bound")
        if len(bound) != 1:
            raise ValueError(f"Line {line_no}: expected a single bound, got '{rhs}'.")
        constraints.append(
            Constraint(
                coefficients=_parse_numbers(lhs, f"line {line_no}"),
                relation=match.group(1),
                bound=bound[0],
            )
        )

    return LPProblem(name=name, mode=mode, objective=objective, constraints=constraints)


def _parse_numbers(text: str, where: str) -> List[float]:
    tokens = [tok for tok in _NUMBER_SPLIT.split(text.strip()) if tok]
    values: List[float] = []
    for tok in tokens:
        try:
            values.append(float(tok))
        except ValueError as exc:
            raise ValueError(f"{where}: '{tok}' is not a number.") from exc
    return values
