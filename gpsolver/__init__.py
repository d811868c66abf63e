"""
gpsolver: the General Problem Solver, in its simplest means-ends form.

Given a state (facts that hold), goals, and operators with preconditions,
add lists and delete lists, achieve each goal by backward chaining:
a goal that holds is free; otherwise apply the first operator that adds
it, after recursively achieving that operator's preconditions.

Usage:
    python -m gpsolver --domain school
    python -m gpsolver --domain school_no_phone_book
    python -m gpsolver --domain monkey
    python -m gpsolver --domain loop --prevent-loops
    python -m gpsolver --problem my_problem.json --goal some-fact
"""

from .core.sets import contains, union, difference, find_all, complement
from .core.state import Op, GPSState, Problem, Outcome, ProblemError
from .core.engine import (
    appropriate_p, find_candidates, achieve, apply_op, gps, solve, run_gps,
)
from .visualization import print_state, print_trace, print_outcome, export_dot

__all__ = [
    "contains", "union", "difference", "find_all", "complement",
    "Op", "GPSState", "Problem", "Outcome", "ProblemError",
    "appropriate_p", "find_candidates", "achieve", "apply_op",
    "gps", "solve", "run_gps",
    "print_state", "print_trace", "print_outcome", "export_dot",
]
