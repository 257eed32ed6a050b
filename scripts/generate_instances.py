#!/usr/bin/env python3
import argparse
import json
import random
from pathlib import Path
from typing import List, Optional

from tableau_simplex.schemas import LPProblem, Constraint


def generate_random_problem(
    num_vars: int,
    num_constraints: int,
    seed: Optional[int] = None,
    scale_exponent: int = 0,
) -> LPProblem:
    """
    Random maximisation over `<=` rows with positive data, so the origin is
    feasible and every direction is blocked.

    With ``scale_exponent > 0`` each row (coefficients and bound) is multiplied
    by ``10**k`` for a random ``k`` in ``[-scale_exponent, scale_exponent]``.
    The scale factors are drawn after the data, so the same seed gives the same
    feasible set and optimum at every exponent.
    """
    rng = random.Random(seed)
    rows = [
        ([rng.uniform(0.5, 5.0) for _ in range(num_vars)], rng.uniform(2.0, 20.0))
        for _ in range(num_constraints)
    ]
    objective = [rng.uniform(1.0, 4.0) for _ in range(num_vars)]

    constraints: List[Constraint] = []
    for coefficients, bound in rows:
        factor = 10.0 ** rng.randint(-scale_exponent, scale_exponent) if scale_exponent else 1.0
        constraints.append(
            Constraint(
                coefficients=[coef * factor for coef in coefficients],
                relation="<=",
                bound=bound * factor,
            )
        )
    return LPProblem(
        name=f"random-{num_vars}x{num_constraints}-{seed}",
        mode="maximize",
        objective=objective,
        constraints=constraints,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Emit random bounded LP problems as JSON lines.")
    parser.add_argument("num_vars", type=int)
    parser.add_argument("num_constraints", type=int)
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first problem")
    parser.add_argument("--count", type=int, default=1)
    parser.add_argument("--scale", type=int, default=0, help="Max power of ten applied per row")
    parser.add_argument("--out", type=Path, default=None)
    args = parser.parse_args()

    lines = [
        json.dumps(
            generate_random_problem(
                args.num_vars, args.num_constraints, args.seed + offset, args.scale
            ).model_dump()
        )
        for offset in range(args.count)
    ]
    text = "\n".join(lines) + "\n"
    if args.out:
        args.out.write_text(text)
    else:
        print(text, end="")


if __name__ == "__main__":
    main()
