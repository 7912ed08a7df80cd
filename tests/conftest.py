"""Shared pytest configuration and fixtures."""

import logging
import random

import pytest


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scenario_matrices():
    """(input, expected) pairs from the worked examples."""
    return [
        (
            [[1, 2, 3, 4], [5, 6, 7, 0], [9, 2, 0, 4]],
            [[1, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
        ),
        (
            [[1, 0, 3], [4, 5, 6]],
            [[0, 0, 0], [4, 0, 6]],
        ),
        (
            [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
            [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
        ),
        (
            [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5]],
            [[0, 0, 0, 0], [0, 4, 5, 0], [0, 3, 1, 0]],
        ),
    ]


@pytest.fixture
def make_matrix(rng):
    """Random rows x cols matrix with small values, so zeros are common."""
    def _make(rows, cols, high=3):
        return [[rng.randint(0, high) for _ in range(cols)] for _ in range(rows)]
    return _make


@pytest.fixture
def reset_algokit_logger():
    yield
    logger = logging.getLogger("algokit")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
