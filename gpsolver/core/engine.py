"""
The GPS main loop: means-ends analysis by backward chaining.

To achieve a goal: if it already holds, done. Otherwise find the operators
whose add list contains it, and apply the first one whose preconditions
can all be achieved in turn. Applying an operator rewrites the shared
state: delete its del_list, then add its add_list.

There is no backtracking. Once an operator has executed, its effects stay,
even if the chain it was serving fails further up. There is also no cycle
detection unless prevent_loops is set: a catalog whose preconditions chain
back to the goal being pursued recurses until Python raises RecursionError,
and that error reaches the caller as-is.
"""

from typing import Callable, Optional

from .sets import contains, union, difference, find_all
from .state import Op, GPSState, Outcome


def appropriate_p(goal, op: Op) -> bool:
    """An op is appropriate for a goal if the goal is in its add list."""
    return contains(op.add_list, goal)


def find_candidates(goal, ops) -> list:
    """Operators that could achieve goal, in catalog order."""
    return find_all(goal, ops, appropriate_p)


def achieve(
    state: GPSState,
    goal,
    verbose: bool = True,
    prevent_loops: bool = False,
    on_execute: Optional[Callable] = None,
) -> bool:
    """
    Make goal hold in state, if some chain of operators can.

    Args:
        state:          shared search state; state.facts is mutated in place
        goal:           the fact to achieve
        verbose:        print each goal and each executed action
        prevent_loops:  fail a goal that is already being pursued further up
                        the recursion instead of recursing forever
        on_execute:     on_execute(op) called once per executed operator
    """
    if contains(state.facts, goal):
        return True

    if prevent_loops and contains(state.goal_stack, goal):
        if verbose:
            print(f"{'  ' * len(state.goal_stack)}Goal: {goal} [loop]")
        return False

    if verbose:
        print(f"{'  ' * len(state.goal_stack)}Goal: {goal}")

    state.goal_stack.append(goal)
    try:
        for op in find_candidates(goal, state.ops):
            if apply_op(state, op, verbose=verbose,
                        prevent_loops=prevent_loops, on_execute=on_execute):
                return True
        return False
    finally:
        state.goal_stack.pop()


def apply_op(
    state: GPSState,
    op: Op,
    verbose: bool = True,
    prevent_loops: bool = False,
    on_execute: Optional[Callable] = None,
) -> bool:
    """
    Achieve every precondition of op, then execute it.

    Preconditions are tried in order and the first failure stops the rest.
    Anything executed while achieving the earlier ones is not undone.
    """
    for precond in op.preconds:
        if not achieve(state, precond, verbose=verbose,
                       prevent_loops=prevent_loops, on_execute=on_execute):
            return False

    if verbose:
        print(f"{'  ' * len(state.goal_stack)}Executing {op.action}")
    state.trace.append(op.action)
    if on_execute:
        on_execute(op)

    state.facts[:] = union(difference(state.facts, op.del_list), op.add_list)
    return True


def gps(state: GPSState, goals, **kwargs) -> Outcome:
    """
    Achieve each goal in order, stopping at the first that cannot be.

    The state is left as the search left it, solved or not.
    kwargs are passed through to achieve.
    """
    for goal in goals:
        if not achieve(state, goal, **kwargs):
            return Outcome.FAILED
    return Outcome.SOLVED


def solve(initial_state, goals, ops, **kwargs) -> Outcome:
    """
    Solve from scratch. initial_state becomes the live state: pass a list
    and it holds the final facts when this returns.
    """
    return gps(GPSState(facts=initial_state, ops=ops), goals, **kwargs)


def run_gps(state: GPSState, goals, **kwargs) -> GPSState:
    """Run gps and record the outcome on the state, for drivers and saving."""
    state.outcome = gps(state, goals, **kwargs)
    return state
