"""Trace records emitted while a determinant is expanded.

Each step type carries a ``type`` tag matching the plain-dict form returned
by ``to_dict``, so renderers can dispatch either on the class or on the tag.
Steps appear in execution order: the ``expand`` step for a matrix always
precedes the steps produced for its terms, and the ``final_sum`` step lists
its terms in the same order as the matching ``expand`` step.
"""

from dataclasses import dataclass
from numbers import Real
from typing import ClassVar, Tuple, Union

from .expansion import LineKind
from .matrix import Matrix


@dataclass(frozen=True)
class ExpansionTerm:
    sign: int
    value: Real
    minor: Matrix

    def to_dict(self) -> dict:
        return {"sign": self.sign, "value": self.value, "minor": self.minor.tolist()}


@dataclass(frozen=True)
class SumTerm:
    """An expansion term with the determinant of its minor filled in.

    The term's contribution is ``value * sign * det``; it is left to the
    consumer to multiply.
    """

    value: Real
    sign: int
    det: Real

    def to_dict(self) -> dict:
        return {"value": self.value, "sign": self.sign, "det": self.det}


@dataclass(frozen=True)
class StartStep:
    type: ClassVar[str] = "start"
    matrix: Matrix

    def to_dict(self) -> dict:
        return {"type": self.type, "matrix": self.matrix.tolist()}


@dataclass(frozen=True)
class ExpandStep:
    type: ClassVar[str] = "expand"
    matrix: Matrix
    source: LineKind
    index: int
    terms: Tuple[ExpansionTerm, ...]

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "matrix": self.matrix.tolist(),
            "source": self.source.value,
            "index": self.index,
            "terms": [t.to_dict() for t in self.terms],
        }


@dataclass(frozen=True)
class Calc2x2Step:
    type: ClassVar[str] = "calc_2x2"
    matrix: Matrix
    result: Real

    def to_dict(self) -> dict:
        return {"type": self.type, "matrix": self.matrix.tolist(), "result": self.result}


@dataclass(frozen=True)
class SubCalculationStep:
    # Reserved; the solver never emits it.
    type: ClassVar[str] = "sub_calculation"
    for_value: Real
    result: Real

    def to_dict(self) -> dict:
        return {"type": self.type, "for": self.for_value, "result": self.result}


@dataclass(frozen=True)
class FinalSumStep:
    type: ClassVar[str] = "final_sum"
    terms: Tuple[SumTerm, ...]
    result: Real

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "terms": [t.to_dict() for t in self.terms],
            "result": self.result,
        }


Step = Union[StartStep, ExpandStep, Calc2x2Step, SubCalculationStep, FinalSumStep]

STEP_TYPES = (StartStep, ExpandStep, Calc2x2Step, SubCalculationStep, FinalSumStep)
