from .sets import contains, union, difference, find_all, complement
from .state import Op, GPSState, Problem, Outcome, ProblemError
from .engine import appropriate_p, find_candidates, achieve, apply_op, gps, solve, run_gps

__all__ = [
    "contains", "union", "difference", "find_all", "complement",
    "Op", "GPSState", "Problem", "Outcome", "ProblemError",
    "appropriate_p", "find_candidates", "achieve", "apply_op",
    "gps", "solve", "run_gps",
]
