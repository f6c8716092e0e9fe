"""Solver settings."""

from dataclasses import dataclass

# Largest input size for which every recursion level is traced. Bigger
# inputs only record the root expansion.
DEFAULT_MAX_TRACED_SIZE = 5


@dataclass(frozen=True)
class SolverConfig:
    max_traced_size: int = DEFAULT_MAX_TRACED_SIZE
    memoize: bool = True

    def __post_init__(self):
        if self.max_traced_size < 0:
            raise ValueError(
                f"max_traced_size must be non-negative, got {self.max_traced_size}"
            )

    def records(self, root_size: int, depth: int) -> bool:
        """Whether steps at ``depth`` are traced for an input of ``root_size``."""
        return root_size <= self.max_traced_size or depth == 0


DEFAULT_CONFIG = SolverConfig()
