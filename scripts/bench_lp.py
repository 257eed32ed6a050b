#!/usr/bin/env python3
"""Compare the Dantzig and Bland pivot rules on random problems of growing size."""
import argparse
import time
from statistics import mean

from tableau_simplex.lp.solver import simplex_solve
from tableau_simplex.schemas import SolveOptions
from scripts.generate_instances import generate_random_problem

SIZES = [(2, 2), (3, 5), (5, 5), (5, 10), (10, 5), (10, 10), (20, 20)]
RULES = ("dantzig", "bland")


def run(trials: int, scale: int) -> None:
    print("n,m,rule,solved,mean_iterations,max_iterations,mean_ms")
    for n, m in SIZES:
        problems = [generate_random_problem(n, m, seed, scale) for seed in range(trials)]
        for rule in RULES:
            opts = SolveOptions(pivot_rule=rule)
            iterations = []
            elapsed = []
            solved = 0
            for problem in problems:
                start = time.perf_counter()
                solution = simplex_solve(problem, opts)
                elapsed.append((time.perf_counter() - start) * 1000)
                iterations.append(solution.iterations)
                solved += solution.status == "optimal"
            print(
                f"{n},{m},{rule},{solved}/{trials},{mean(iterations):.2f},"
                f"{max(iterations)},{mean(elapsed):.3f}"
            )


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--trials", type=int, default=20, help="Problems per size")
    parser.add_argument("--scale", type=int, default=0, help="Row scaling exponent")
    args = parser.parse_args()
    run(args.trials, args.scale)


if __name__ == "__main__":
    main()
