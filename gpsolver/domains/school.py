"""
Domain: driving the son to school.

The classic GPS demo. The car's battery is dead; getting the son to school
means getting the shop to install a new one, which means telling the shop
the problem and paying it, which means phoning it, which means looking up
the number.
"""

from ..core.state import Op, Problem


SCHOOL_OPS = (
    Op("drive-son-to-school",
       preconds=("son-at-home", "car-works"),
       add_list=("son-at-school",),
       del_list=("son-at-home",)),
    Op("shop-installs-battery",
       preconds=("car-needs-battery", "shop-knows-problem", "shop-has-money"),
       add_list=("car-works",)),
    Op("tell-shop-problem",
       preconds=("in-communication-with-shop",),
       add_list=("shop-knows-problem",)),
    Op("telephone-shop",
       preconds=("know-phone-number",),
       add_list=("in-communication-with-shop",)),
    Op("look-up-number",
       preconds=("have-phone-book",),
       add_list=("know-phone-number",)),
    Op("give-shop-money",
       preconds=("have-money",),
       add_list=("shop-has-money",),
       del_list=("have-money",)),
)

SCHOOL_GOALS = ["son-at-school"]

# Initial states, from fully equipped to hopeless.
SCHOOL_SCENARIOS = {
    "dead-battery": ["son-at-home", "car-needs-battery", "have-money", "have-phone-book"],
    "car-works":    ["son-at-home", "car-works"],
    "stranded":     ["son-at-home"],
    "no-phone-book": ["son-at-home", "car-needs-battery", "have-money"],
}


def make_school_problem(scenario: str = "dead-battery") -> Problem:
    return Problem(
        state=list(SCHOOL_SCENARIOS[scenario]),
        goals=list(SCHOOL_GOALS),
        ops=SCHOOL_OPS,
        description=f"Get the son to school ({scenario})",
    )
