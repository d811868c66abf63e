"""
Core data structures: Op, GPSState, Problem.

Nothing in here knows how goals are achieved; the engine does that.

    Facts:  opaque hashable tokens, compared only for equality.
            Every bundled domain uses strings -- "son-at-home", "car-works".

    Op:     a named action with preconditions, an add list and a delete list.
            Frozen: the catalog never changes during a search.

    GPSState:  the one mutable fact list shared by a whole search, plus the
               catalog it searches, the trace of executed actions, and the
               stack of goals currently being pursued.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import json

from .sets import union


class ProblemError(ValueError):
    """A problem or state file is missing a key or has a malformed field."""


class Outcome(str, Enum):
    """Result of a whole solve. A str, so it serialises as its name."""
    SOLVED = "SOLVED"
    FAILED = "FAILED"


def _fact_list(data, key, required=True) -> list:
    if key not in data:
        if required:
            raise ProblemError(f"missing key {key!r}")
        return []
    value = data[key]
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise ProblemError(f"{key!r} must be a list of facts, got {type(value).__name__}")
    return list(value)


@dataclass(frozen=True)
class Op:
    """
    An operator: if every precondition holds, executing `action` deletes
    del_list from the state and then adds add_list.

    Only add_list decides which goals the operator can be chosen for.
    An operator with an empty add_list is never chosen.
    """
    action: str
    preconds: tuple = ()
    add_list: tuple = ()
    del_list: tuple = ()

    def __post_init__(self):
        for name in ("preconds", "add_list", "del_list"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @property
    def name(self):
        return self.action

    def to_dict(self):
        return {
            "action": self.action,
            "preconds": list(self.preconds),
            "add_list": list(self.add_list),
            "del_list": list(self.del_list),
        }

    @classmethod
    def from_dict(cls, d):
        if not isinstance(d, dict) or "action" not in d:
            raise ProblemError(f"operator without an action: {d!r}")
        return cls(
            d["action"],
            _fact_list(d, "preconds", required=False),
            _fact_list(d, "add_list", required=False),
            _fact_list(d, "del_list", required=False),
        )

    def __repr__(self):
        return f"Op({self.action!r})"


@dataclass
class GPSState:
    """
    Everything one search shares.

    facts:       the current state. Mutated in place, so a list handed in
                 by the caller is the live state and shows the final result.
    ops:         the operator catalog, in tie-break order
    trace:       actions executed so far, in execution order
    goal_stack:  goals currently being pursued, outermost first
    outcome:     an Outcome once run_gps has finished, else None
    """
    facts: list = field(default_factory=list)
    ops: tuple = ()
    trace: list = field(default_factory=list)
    goal_stack: list = field(default_factory=list)
    outcome: Optional[Outcome] = None

    def __post_init__(self):
        if not isinstance(self.facts, list):
            self.facts = list(self.facts)
        self.facts[:] = union([], self.facts)
        self.ops = tuple(self.ops)

    def to_dict(self):
        return {
            "facts": list(self.facts),
            "ops": [op.to_dict() for op in self.ops],
            "trace": list(self.trace),
            "outcome": self.outcome.value if self.outcome else None,
        }

    @classmethod
    def from_dict(cls, d):
        state = cls(
            facts=_fact_list(d, "facts"),
            ops=[Op.from_dict(o) for o in d.get("ops", [])],
        )
        state.trace = _fact_list(d, "trace", required=False)
        if d.get("outcome") is not None:
            state.outcome = Outcome(d["outcome"])
        return state

    def save(self, path="gps_state.json"):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path="gps_state.json"):
        with open(path) as f:
            return cls.from_dict(json.load(f))


@dataclass
class Problem:
    """
    A complete input for one solve: initial state, goals, catalog.

    make_state() copies the initial facts, so running a problem never
    changes the problem itself.
    """
    state: list
    goals: list
    ops: tuple
    description: str = ""

    def make_state(self) -> GPSState:
        return GPSState(facts=list(self.state), ops=self.ops)

    def to_dict(self):
        return {
            "description": self.description,
            "state": list(self.state),
            "goals": list(self.goals),
            "ops": [op.to_dict() for op in self.ops],
        }

    @classmethod
    def from_dict(cls, d):
        if not isinstance(d, dict):
            raise ProblemError(f"a problem must be a JSON object, got {type(d).__name__}")
        ops = d.get("ops")
        if not isinstance(ops, list):
            raise ProblemError("'ops' must be a list of operators")
        return cls(
            state=_fact_list(d, "state"),
            goals=_fact_list(d, "goals"),
            ops=tuple(Op.from_dict(o) for o in ops),
            description=d.get("description", ""),
        )

    def save(self, path="gps_problem.json"):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path="gps_problem.json"):
        with open(path) as f:
            return cls.from_dict(json.load(f))
