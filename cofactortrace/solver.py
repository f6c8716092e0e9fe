"""Recursive cofactor expansion with memoization and step tracing.

``CofactorSolver`` is built fresh for every top-level computation: it owns
the memo table and knows the root size, which together with the depth
decides whether a level is traced. Each call to ``solve`` returns the
determinant together with the steps it produced; callers concatenate these
lists, so the trace comes out in pre-order without any shared buffer.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .config import DEFAULT_CONFIG, SolverConfig
from .expansion import select_expansion
from .matrix import Matrix, MatrixKey
from .steps import Calc2x2Step, ExpandStep, ExpansionTerm, FinalSumStep, Step, SumTerm

logger = logging.getLogger(__name__)


class CofactorSolver:
    def __init__(self, root_size: int, config: Optional[SolverConfig] = None):
        self.root_size = root_size
        self.config = config or DEFAULT_CONFIG
        self.memo: Dict[MatrixKey, float] = {}
        self.cache_hits = 0

        if not self.config.records(root_size, 1):
            logger.info(
                "%dx%d input exceeds the traced size %d; recording the root "
                "expansion only",
                root_size, root_size, self.config.max_traced_size,
            )

    def records(self, depth: int) -> bool:
        return self.config.records(self.root_size, depth)

    def solve(self, matrix: Matrix, depth: int = 0) -> Tuple[float, List[Step]]:
        """Return ``(det(matrix), steps)`` for one level of the recursion."""
        n = matrix.size
        m = matrix.rows

        if n == 1:
            return m[0][0], []

        record = self.records(depth)

        if n == 2:
            result = m[0][0] * m[1][1] - m[0][1] * m[1][0]
            steps: List[Step] = [Calc2x2Step(matrix, result)] if record else []
            return result, steps

        key = matrix.key() if self.config.memoize else None
        if key is not None and key in self.memo:
            # Hits replay nothing into the trace.
            self.cache_hits += 1
            logger.debug("memo hit for %dx%d minor at depth %d", n, n, depth)
            return self.memo[key], []

        line = select_expansion(matrix)
        logger.debug("depth %d: expanding %dx%d along %s %d",
                     depth, n, n, line.kind.value, line.index)

        terms = []
        for r, c in line.positions(n):
            # Minors are extracted even for zero coefficients so the
            # expand step always lists a full line.
            terms.append(ExpansionTerm((-1) ** (r + c), m[r][c], matrix.minor(r, c)))

        steps = []
        if record:
            steps.append(ExpandStep(matrix, line.kind, line.index, tuple(terms)))

        det = 0
        sum_terms = []
        for term in terms:
            if term.value == 0:
                minor_det = 0
            else:
                minor_det, sub_steps = self.solve(term.minor, depth + 1)
                steps.extend(sub_steps)
            det += term.sign * term.value * minor_det
            sum_terms.append(SumTerm(term.value, term.sign, minor_det))

        if record:
            steps.append(FinalSumStep(tuple(sum_terms), det))

        if key is not None:
            self.memo[key] = det
        return det, steps
