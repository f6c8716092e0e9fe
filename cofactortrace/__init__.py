from .analysis import Classification, MatrixAnalysis, analyze, determinant
from .config import SolverConfig
from .matrix import Matrix, MatrixValidationError
from .render import render_analysis

__all__ = [
    "Classification",
    "Matrix",
    "MatrixAnalysis",
    "MatrixValidationError",
    "SolverConfig",
    "analyze",
    "determinant",
    "render_analysis",
]
