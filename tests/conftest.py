import json
from pathlib import Path

import pytest

from tableau_simplex.schemas import Constraint, LPProblem


def load_example(name: str) -> LPProblem:
    data = json.loads(Path(__file__).parent.parent.joinpath("examples", name).read_text())
    return LPProblem.model_validate(data)


@pytest.fixture
def textbook_problem() -> LPProblem:
    return load_example("textbook_lp.json")


@pytest.fixture
def textbook_constraints():
    return [
        Constraint(coefficients=[2.0, 1.0], relation="<=", bound=18.0),
        Constraint(coefficients=[2.0, 3.0], relation="<=", bound=42.0),
        Constraint(coefficients=[3.0, 1.0], relation="<=", bound=24.0),
    ]
