"""Shared fixtures for the cofactortrace test suite."""

import random

import pytest


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "perf: wall-clock bounds for 8x8 to 10x10 expansions "
        "(deselect with -m 'not perf')",
    )


@pytest.fixture
def seeded_rng(request: pytest.FixtureRequest) -> int:
    """Seed ``random`` before ``tests.helpers.make_random_rows`` is called.

    Parametrize indirectly to pick the seed; the default is 42. The seed is
    returned so it shows up in failure output.
    """
    seed = getattr(request, "param", 42)
    random.seed(seed)
    return seed


@pytest.fixture
def worked_matrix():
    """3x3 input whose expansion takes row 1 and needs a single 2x2 minor.

    det = -1 * 3 * det([[0, 1], [1, 1]]) = 3
    """
    return [[2, 0, 1], [3, 0, 0], [5, 1, 1]]
