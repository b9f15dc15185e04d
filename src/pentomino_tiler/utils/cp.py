"""
`cpmpy` aggregates that also accept empty iterables, typed for `Expression`s.
"""

import cpmpy as cp
from cpmpy.expressions.core import Expression, BoolVal
from typing import Iterable

zero = cp.intvar(0, 0)
true = BoolVal(True)

def sum(xs: Iterable[Expression]) -> Expression:
    xs = list(xs)
    return cp.sum(xs) if xs else zero

def all(xs: Iterable[Expression]) -> Expression:
    xs = list(xs)
    return cp.all(xs) if xs else true

def exactly_one(xs: Iterable[Expression]) -> Expression:
    return sum(xs) == 1
