"""
Domain: monkey and bananas.

A hungry monkey stands at the door holding a ball. Bananas hang out of
reach in the middle of the room; a chair stands by the door. The only
way to stop being hungry is to push the chair over, climb it, drop the
ball to free a hand, grab the bananas and eat them.
"""

from ..core.state import Op, Problem


MONKEY_OPS = (
    Op("climb-on-chair",
       preconds=("chair-at-middle-room", "at-middle-room", "on-floor"),
       add_list=("at-bananas", "on-chair"),
       del_list=("at-middle-room", "on-floor")),
    Op("push-chair-from-door-to-middle-room",
       preconds=("chair-at-door", "at-door"),
       add_list=("chair-at-middle-room", "at-middle-room"),
       del_list=("chair-at-door", "at-door")),
    Op("walk-from-door-to-middle-room",
       preconds=("at-door", "on-floor"),
       add_list=("at-middle-room",),
       del_list=("at-door",)),
    Op("grasp-bananas",
       preconds=("at-bananas", "empty-handed"),
       add_list=("has-bananas",),
       del_list=("empty-handed",)),
    Op("drop-ball",
       preconds=("has-ball",),
       add_list=("empty-handed",),
       del_list=("has-ball",)),
    Op("eat-bananas",
       preconds=("has-bananas",),
       add_list=("empty-handed", "not-hungry"),
       del_list=("has-bananas", "hungry")),
)


def make_monkey_problem() -> Problem:
    return Problem(
        state=["at-door", "on-floor", "has-ball", "hungry", "chair-at-door"],
        goals=["not-hungry"],
        ops=MONKEY_OPS,
        description="Monkey and bananas: stop being hungry",
    )
