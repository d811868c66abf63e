"""
Set algebra over fact collections.

Facts are opaque tokens compared only for equality, so these work on any
iterable of them. Results are lists in insertion order; callers should
rely on set semantics only.
"""

from typing import Callable
import operator


def contains(collection, fact) -> bool:
    """Is an equal fact in the collection?"""
    return any(x == fact for x in collection)


def union(a, b) -> list:
    """All of a, then each member of b not already present. No duplicates."""
    result = []
    for x in list(a) + list(b):
        if not contains(result, x):
            result.append(x)
    return result


def difference(a, b) -> list:
    """Members of a that do not equal any member of b."""
    b = list(b)
    return [x for x in a if not contains(b, x)]


def find_all(item, sequence, test: Callable = operator.eq) -> list:
    """
    Every element x of sequence, in order, for which test(item, x) holds.

    The test is a plain function value: find_all(goal, ops, appropriate_p)
    picks the operators that can achieve goal.
    """
    return [x for x in sequence if test(item, x)]


def complement(fn: Callable) -> Callable:
    """A predicate that is true exactly where fn is false."""
    def negated(*args, **kwargs):
        return not fn(*args, **kwargs)
    return negated
