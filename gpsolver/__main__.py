"""
CLI entry point. Run as: python -m gpsolver --domain <name>
"""

import argparse
import sys

from .core.state import Problem, ProblemError, Outcome
from .core.engine import run_gps
from .visualization import print_state, print_trace, print_outcome, export_dot
from .domains import DOMAINS


def main(argv=None):
    parser = argparse.ArgumentParser(description="GPS means-ends analysis")
    parser.add_argument(
        "--domain",
        choices=list(DOMAINS.keys()),
        default="school",
        help="Which bundled problem to solve",
    )
    parser.add_argument("--problem", type=str, default=None,
                        help="Load the problem from a JSON file instead")
    parser.add_argument("--goal", action="append", default=None,
                        help="Goal to achieve (repeatable; replaces the problem's goals)")
    parser.add_argument("--prevent-loops", action="store_true",
                        help="Fail goals already being pursued instead of recursing forever")
    parser.add_argument("--save",  type=str, default=None, help="Save final state to file")
    parser.add_argument("--dot",   type=str, default=None, help="Export DOT graph to file")
    parser.add_argument("--quiet", action="store_true",    help="Less output")
    parser.add_argument("--list",  action="store_true",    help="List domains and exit")
    args = parser.parse_args(argv)

    if args.list:
        for name, domain in DOMAINS.items():
            print(f"  {name:22} {domain['description']}")
        return 0

    # --- Load or build the problem ---
    if args.problem:
        try:
            problem = Problem.load(args.problem)
        except (OSError, ValueError) as e:
            print(f"Cannot load problem {args.problem}: {e}", file=sys.stderr)
            return 1
        print(f"Loaded problem from {args.problem}")
    else:
        problem = DOMAINS[args.domain]["make_problem"]()
        print(f"Domain: {args.domain}")
    if problem.description:
        print(problem.description)

    goals = args.goal if args.goal else problem.goals
    state = problem.make_state()
    print(f"Goals: {', '.join(str(g) for g in goals)}")
    print_state(state, title="Initial state")

    # --- Run ---
    try:
        state = run_gps(state, goals,
                        verbose=not args.quiet,
                        prevent_loops=args.prevent_loops)
    except RecursionError:
        print("\nRecursion limit reached: the operators' preconditions form a cycle. "
              "Try --prevent-loops.", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 1

    print_trace(state)
    print_outcome(state.outcome)
    print_state(state, title="Final state")

    if args.dot:
        export_dot(state, args.dot)

    if args.save:
        state.save(args.save)
        print(f"State saved to {args.save}")

    return 0 if state.outcome == Outcome.SOLVED else 2


if __name__ == "__main__":
    sys.exit(main())
