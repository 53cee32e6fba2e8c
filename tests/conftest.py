"""Shared test fixtures."""
from __future__ import annotations

import numpy as np
import pytest


class CountingAccessor:
    """Accessor that records how many times it was called."""

    def __init__(self, key: str = "count") -> None:
        self.key = key
        self.calls = 0

    def __call__(self, item):
        self.calls += 1
        return item[self.key]


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def counting_accessor():
    return CountingAccessor()


@pytest.fixture
def nine_sample():
    return (13, 18, 13, 14, 13, 16, 14, 21, 13)


@pytest.fixture
def twenty_sample():
    return (13, 18, 13, 14, 13, 16, 14, 21, 13, 11, 19, 19, 17, 16, 13, 12, 12, 12, 20, 11)


@pytest.fixture
def twenty_sorted():
    return (11, 11, 12, 12, 12, 13, 13, 13, 13, 13, 14, 14, 16, 16, 17, 18, 19, 19, 20, 21)


@pytest.fixture
def no_sort(monkeypatch):
    """Fail the test if any numpy sort is attempted."""
    def _boom(*args, **kwargs):
        raise AssertionError("sample was sorted")

    monkeypatch.setattr(np, "sort", _boom)
    return _boom
