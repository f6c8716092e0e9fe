"""Plain-text rendering of a step trace.

Everything here is derived from the step records alone; the renderer never
recomputes a determinant.
"""

from numbers import Real
from typing import Iterable, List, Tuple

from .analysis import MatrixAnalysis
from .expansion import LineKind
from .matrix import Matrix
from .steps import (
    Calc2x2Step,
    ExpandStep,
    FinalSumStep,
    STEP_TYPES,
    StartStep,
    Step,
)


def ordinal(n: int) -> str:
    if n % 10 == 1 and n % 100 != 11:
        return f"{n}st"
    if n % 10 == 2 and n % 100 != 12:
        return f"{n}nd"
    if n % 10 == 3 and n % 100 != 13:
        return f"{n}rd"
    return f"{n}th"


def format_number(x: Real) -> str:
    """``3.0`` -> ``"3"``; other values use ``repr``-style ``str``."""
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x)


def join_signed(terms: Iterable[Tuple[Real, str]]) -> str:
    """Join ``(coefficient, suffix)`` pairs as ``a - b + c``.

    The operator in front of each term comes from the sign of its
    coefficient, so negatives never print as ``+ -2`` or ``--2``.
    """
    out = ""
    for i, (coef, suffix) in enumerate(terms):
        body = format_number(abs(coef)) + suffix
        if i == 0:
            out = ("-" if coef < 0 else "") + body
        else:
            out += (" - " if coef < 0 else " + ") + body
    return out


def format_matrix(m: Matrix, indent: str = "  ") -> List[str]:
    cells = [[format_number(x) for x in row] for row in m.rows]
    width = max(len(c) for row in cells for c in row)
    return [indent + "[ " + "  ".join(c.rjust(width) for c in row) + " ]"
            for row in cells]


def _render_start(step: StartStep) -> List[str]:
    return ["Calculation Setup", "Finding determinant of:", *format_matrix(step.matrix)]


def _render_expand(step: ExpandStep) -> List[str]:
    what = "Row" if step.source is LineKind.ROW else "Column"
    lines = [
        "Cofactor Expansion Process",
        f"We selected the {ordinal(step.index + 1)} {what}.",
        *format_matrix(step.matrix),
        "Sign pattern (-1)^(i+j):",
    ]
    for t in step.terms:
        sign = "+ (Positive)" if t.sign > 0 else "- (Negative)"
        lines.append(f"  {format_number(t.value)} -> {sign}")
    lines.append("Minors:")
    for t in step.terms:
        lines.append(f"  Minor for {format_number(t.value)}:")
        lines.extend(format_matrix(t.minor, indent="    "))
    formula = join_signed((t.sign * t.value, " x det(M)") for t in step.terms)
    lines.append(f"det(A) = {formula}")
    return lines


def _render_calc_2x2(step: Calc2x2Step) -> List[str]:
    (a, b), (c, d) = step.matrix.rows
    f = format_number
    return [
        "  Sub-step: determinant of 2x2 minor:",
        *format_matrix(step.matrix, indent="    "),
        f"    = ({f(a)} x {f(d)}) - ({f(b)} x {f(c)}) = {f(step.result)}",
    ]


def _render_final_sum(step: FinalSumStep) -> List[str]:
    f = format_number
    lines = ["Multiply and Sum the Results"]
    totals = []
    for t in step.terms:
        total = t.value * t.sign * t.det
        totals.append((total, ""))
        lines.append(
            f"  {f(t.value)} x {'+1' if t.sign > 0 else '-1'} x {f(t.det)} = {f(total)}"
        )
    lines.append(f"Total: {join_signed(totals)} = {f(step.result)}")
    return lines


def render_step(step: Step) -> List[str]:
    if not isinstance(step, STEP_TYPES):
        raise TypeError(f"Unknown step type: {type(step).__name__}")
    if isinstance(step, StartStep):
        return _render_start(step)
    if isinstance(step, ExpandStep):
        return _render_expand(step)
    if isinstance(step, Calc2x2Step):
        return _render_calc_2x2(step)
    if isinstance(step, FinalSumStep):
        return _render_final_sum(step)
    # SubCalculationStep is reserved and has no text.
    return []


def render_steps(steps: Iterable[Step]) -> str:
    blocks = ["\n".join(lines) for lines in map(render_step, steps) if lines]
    return "\n\n".join(blocks)


def render_analysis(analysis: MatrixAnalysis) -> str:
    parts = []
    body = render_steps(analysis.steps)
    if body:
        parts.append(body)
    parts.append(
        f"Determinant: {format_number(analysis.determinant)}\n"
        f"{analysis.classification.value}: {analysis.message}"
    )
    return "\n\n".join(parts)
