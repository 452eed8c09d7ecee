"""
Tests for the Result[P] envelope and Timer.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pypatterns.core.compute.timing import Timer, timed
from pypatterns.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "test"},
            timing={"total_seconds": 0.01},
            backend_name="cpu",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "test"
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("k=5 outside [1, 2] for d=3; clamped to 2",),
        )
        assert result.has_warning("clamped")
        assert not result.has_warning("singular")


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('a'):
            pass
        with timer.section('a'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'a'}
        assert result['a'] >= 0.0

    def test_result_before_stop(self):
        with pytest.raises(RuntimeError):
            Timer().result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_timed_context(self):
        with timed() as timer:
            sum(range(100))
        assert timer.result()['total_seconds'] >= 0.0
