"""
Domain: circular preconditions.

Each operator needs the fact only the other one produces, and neither
holds at the start. Plain GPS recurses until the interpreter gives up
with RecursionError; with prevent_loops the cycle is cut and the goal
simply fails.
"""

from ..core.state import Op, Problem


LOOP_OPS = (
    Op("make-key-from-mold", preconds=("have-mold",), add_list=("have-key",)),
    Op("make-mold-from-key", preconds=("have-key",), add_list=("have-mold",)),
)


def make_loop_problem() -> Problem:
    return Problem(
        state=[],
        goals=["have-key"],
        ops=LOOP_OPS,
        description="Key needs a mold, mold needs a key",
    )
