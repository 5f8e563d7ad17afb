"""Shared fixtures for the SciDist test suite."""

from __future__ import annotations

import numpy as np
import pytest


class CountingRandomSource:
    """Random source that counts how many uniforms have been drawn."""

    def __init__(self, seed: int = 0):
        self._rng = np.random.default_rng(seed)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return float(self._rng.random())


class ScriptedRandomSource:
    """Random source replaying a fixed list of uniforms.

    Drawing past the end of the script fails the test, so tests can assert the
    exact number of uniforms an algorithm consumes.
    """

    def __init__(self, values):
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        if self.calls >= len(self._values):
            raise AssertionError(
                f"Random source exhausted after {len(self._values)} draws."
            )
        value = self._values[self.calls]
        self.calls += 1
        return value

    @property
    def exhausted(self) -> bool:
        return self.calls == len(self._values)


# Uniform pairs giving a Box-Muller normal of (almost exactly) zero and of 2.0
ZERO_NORMAL = (0.5, 0.25)
TWO_NORMAL = (1.0 - np.exp(-2.0), 0.0)


@pytest.fixture
def counting_source():
    """A seeded random source that records its number of draws."""
    return CountingRandomSource(seed=1234)


@pytest.fixture
def rng():
    """A seeded NumPy generator."""
    return np.random.default_rng(42)
