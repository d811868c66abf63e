"""
Visualization and reporting utilities.
"""

from .core.state import GPSState, Outcome


def print_state(state: GPSState, title="State"):
    """Print the facts currently true."""
    print(f"\n{'='*60}")
    print(f"{title} ({len(state.facts)} facts):")
    for fact in state.facts:
        print(f"  {fact}")
    print(f"{'='*60}")


def print_trace(state: GPSState):
    """Print the executed actions in order."""
    print(f"\n{'='*60}")
    print("Executed operators:")
    print(f"{'='*60}")
    if not state.trace:
        print("  (nothing executed)")
    for i, action in enumerate(state.trace):
        print(f"  {i+1}. {action}")


def print_outcome(outcome: Outcome):
    print(f"\n{outcome.value}.")


def export_dot(state: GPSState, path="gps_graph.dot"):
    """
    Export the operator catalog as a DOT graph for Graphviz.

    Facts are ellipses, operators are boxes. Preconditions point into an
    operator, add-list facts point out of it, and deletions are dashed red.
    Facts true in the state are filled; executed operators are highlighted.
    """
    def q(s):
        return '"' + str(s).replace('"', '\\"') + '"'

    with open(path, "w") as f:
        f.write("digraph gps {\n")
        f.write("  rankdir=BT;\n")
        f.write("  node [shape=ellipse];\n")

        facts = []
        for op in state.ops:
            for fact in op.preconds + op.add_list + op.del_list:
                if fact not in facts:
                    facts.append(fact)
        for fact in state.facts:
            if fact not in facts:
                facts.append(fact)
        for fact in facts:
            style = ", style=filled, fillcolor=lightblue" if fact in state.facts else ""
            f.write(f"  {q(fact)} [label={q(fact)}{style}];\n")

        for op in state.ops:
            node = q(f"op:{op.action}")
            color = "lightgray" if op.action in state.trace else "white"
            f.write(f"  {node} [label={q(op.action)}, shape=box, style=\"rounded,filled\", "
                    f"fillcolor={color}];\n")
            for fact in op.preconds:
                f.write(f"  {q(fact)} -> {node};\n")
            for fact in op.add_list:
                f.write(f"  {node} -> {q(fact)};\n")
            for fact in op.del_list:
                f.write(f"  {node} -> {q(fact)} [style=dashed, color=red];\n")
        f.write("}\n")
    print(f"Graph exported to {path}")
