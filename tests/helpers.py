import random
from typing import List

import numpy as np

from cofactortrace.steps import Calc2x2Step, ExpandStep, FinalSumStep, StartStep


def make_random_rows(n: int, low: int = -5, high: int = 5,
                     zero_prob: float = 0.0) -> List[List[int]]:
    """Random integer rows; entries are zeroed with probability ``zero_prob``."""
    return [
        [0 if random.random() < zero_prob else random.randint(low, high)
         for _ in range(n)]
        for _ in range(n)
    ]


def transpose(rows):
    return [list(col) for col in zip(*rows)]


def swap_rows(rows, i, j):
    out = [row[:] for row in rows]
    out[i], out[j] = out[j], out[i]
    return out


def scale_row(rows, i, c):
    out = [row[:] for row in rows]
    out[i] = [c * x for x in out[i]]
    return out


def numpy_det(rows) -> float:
    return float(np.linalg.det(np.array(rows, dtype=float)))


def step_types(steps) -> List[str]:
    return [s.type for s in steps]


def verify_trace_structure(steps) -> bool:
    """
    Check the pre-order shape of a trace:
    - ``start`` appears only first.
    - every ``final_sum`` closes the most recent unclosed ``expand`` and has
      the same number of terms, with matching values and signs.
    - nothing is left open at the end.
    """
    open_expands = []
    for i, step in enumerate(steps):
        if isinstance(step, StartStep):
            if i != 0:
                return False
        elif isinstance(step, ExpandStep):
            open_expands.append(step)
        elif isinstance(step, FinalSumStep):
            if not open_expands:
                return False
            expand = open_expands.pop()
            if len(expand.terms) != len(step.terms):
                return False
            for e, s in zip(expand.terms, step.terms):
                if (e.value, e.sign) != (s.value, s.sign):
                    return False
        elif not isinstance(step, Calc2x2Step):
            return False
    return not open_expands
