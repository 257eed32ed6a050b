from __future__ import annotations

import logging
import os

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from .schemas import LPProblem, Mode, SolveOptions
from .lp.solver import simplex_solve
from .lp.parser import parse_problem_text

app = FastMCP("Tableau Simplex")


@app.tool()
def solve_linear_program(problem: LPProblem, options: SolveOptions | None = None) -> dict:
    """Solve a linear program with the tableau simplex method and return the solution as JSON."""
    opts = options or SolveOptions()
    return simplex_solve(problem, opts).model_dump()


@app.tool()
def parse_problem(objective: str, constraints: str, mode: Mode = "maximize") -> dict:
    """
    Parse comma-separated form input into structured LPProblem JSON.

    Args:
        objective: Objective coefficients, e.g. "3,2".
        constraints: One constraint per line, e.g. "2,1 <= 18".
        mode: "maximize" or "minimize".
    """
    return parse_problem_text(objective, constraints, mode=mode).model_dump()


@app.tool()
def solve_problem_text(
    objective: str,
    constraints: str,
    mode: Mode = "maximize",
    options: SolveOptions | None = None,
) -> dict:
    """
    Parse comma-separated form input and solve it in one call.

    Returns:
        Dictionary containing:
        - 'problem': The parsed problem (None if parsing failed)
        - 'solution': The status-tagged solution (None if parsing failed)
        - 'error': Present only when the input could not be parsed
    """
    try:
        problem = parse_problem_text(objective, constraints, mode=mode)
    except ValueError as e:
        return {
            "error": f"Failed to parse problem: {str(e)}",
            "problem": None,
            "solution": None,
        }

    solution = simplex_solve(problem, options or SolveOptions())
    return {
        "problem": problem.model_dump(),
        "solution": solution.model_dump(),
    }


def main() -> None:
    import sys

    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    # stdio for desktop clients, streamable HTTP otherwise
    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "stdio" or "--stdio" in sys.argv:
        app.run(transport="stdio")
    else:
        port = int(os.environ.get("PORT", "8081"))
        app.settings.host = "0.0.0.0"
        app.settings.port = port
        app.settings.streamable_http_path = "/mcp"
        app.settings.transport_security = TransportSecuritySettings(
            enable_dns_rebinding_protection=False,
            allowed_hosts=["*"],
            allowed_origins=["*"],
        )
        app.run(transport="streamable-http")


if __name__ == "__main__":
    main()
