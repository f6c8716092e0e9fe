import logging
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Optional, Tuple

from .config import SolverConfig, DEFAULT_CONFIG
from .matrix import as_matrix
from .solver import CofactorSolver
from .steps import StartStep, Step

SINGULAR_MESSAGE = "Note: This matrix does not have an inverse."
NON_SINGULAR_MESSAGE = "Matrix has an inverse."

logger = logging.getLogger(__name__)


class Classification(str, Enum):
    SINGULAR = "SINGULAR"
    NON_SINGULAR = "NON-SINGULAR"


@dataclass(frozen=True)
class MatrixAnalysis:
    determinant: Real
    steps: Tuple[Step, ...]
    is_singular: bool
    classification: Classification
    message: str

    def to_dict(self) -> dict:
        return {
            "determinant": self.determinant,
            "steps": [s.to_dict() for s in self.steps],
            "isSingular": self.is_singular,
            "classification": self.classification.value,
            "message": self.message,
        }


def analyze(matrix: Any, config: Optional[SolverConfig] = None) -> MatrixAnalysis:
    """
    Compute the determinant of ``matrix`` by cofactor expansion and return
    it together with the step trace.

    Raises ``MatrixValidationError`` before doing any work when the input is
    empty, ragged, non-square or not numeric.

    Singularity is an exact ``== 0`` test. Floating-point cancellation can
    leave a tiny non-zero residue for a theoretically singular matrix; no
    tolerance is applied.
    """
    A = as_matrix(matrix)
    config = config or DEFAULT_CONFIG
    solver = CofactorSolver(A.size, config)

    steps = []
    if solver.records(0):
        steps.append(StartStep(A))

    det, solve_steps = solver.solve(A, 0)
    steps.extend(solve_steps)

    is_singular = det == 0
    logger.debug("det = %r over %dx%d, %d steps, %d memo hits",
                 det, A.size, A.size, len(steps), solver.cache_hits)
    return MatrixAnalysis(
        determinant=det,
        steps=tuple(steps),
        is_singular=is_singular,
        classification=(
            Classification.SINGULAR if is_singular else Classification.NON_SINGULAR
        ),
        message=SINGULAR_MESSAGE if is_singular else NON_SINGULAR_MESSAGE,
    )


def determinant(matrix: Any, config: Optional[SolverConfig] = None) -> Real:
    return analyze(matrix, config).determinant
