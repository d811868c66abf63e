"""
Domain registry.

Each domain is a dict describing one problem to hand to GPS:
    make_problem:  () -> Problem
    description:   str
"""

from functools import partial

from .school import make_school_problem
from .monkey import make_monkey_problem
from .loop import make_loop_problem


DOMAINS = {
    "school": {
        "make_problem": make_school_problem,
        "description":  "Dead battery: phone the shop, pay it, drive the son to school",
    },
    "school_car_works": {
        "make_problem": partial(make_school_problem, "car-works"),
        "description":  "The car already works: one drive and done",
    },
    "school_stranded": {
        "make_problem": partial(make_school_problem, "stranded"),
        "description":  "No car facts at all: nothing can make the car work",
    },
    "school_no_phone_book": {
        "make_problem": partial(make_school_problem, "no-phone-book"),
        "description":  "No phone book: the shop can never be reached",
    },
    "monkey": {
        "make_problem": make_monkey_problem,
        "description":  "Monkey and bananas: push, climb, drop, grasp, eat",
    },
    "loop": {
        "make_problem": make_loop_problem,
        "description":  "Circular preconditions: runs out of stack without --prevent-loops",
    },
}
