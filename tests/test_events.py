"""
Tests for deferring events across several sources.
"""

from contextlib import contextmanager

import pytest

from dmcommon.events import MultipleDeferEvents


class RecordingSource:
    def __init__(self, name, log, fail=False):
        self.name = name
        self.log = log
        self.fail = fail

    @contextmanager
    def defer_events(self):
        if self.fail:
            raise RuntimeError(f"{self.name} cannot defer")
        self.log.append(f"defer {self.name}")
        try:
            yield
        finally:
            self.log.append(f"release {self.name}")


@pytest.mark.short
class TestMultipleDeferEvents:
    def test_released_in_reverse_order(self):
        log = []
        sources = [RecordingSource(n, log) for n in ("a", "b", "c")]

        with MultipleDeferEvents(sources):
            log.append("body")

        assert log == [
            "defer a",
            "defer b",
            "defer c",
            "body",
            "release c",
            "release b",
            "release a",
        ]

    def test_released_on_error(self):
        log = []
        sources = [RecordingSource(n, log) for n in ("a", "b")]

        with pytest.raises(ValueError):
            with MultipleDeferEvents(sources):
                raise ValueError("boom")

        assert log[-2:] == ["release b", "release a"]

    def test_failing_source_releases_earlier_ones(self):
        log = []
        sources = [RecordingSource("a", log), RecordingSource("b", log, fail=True)]

        with pytest.raises(RuntimeError):
            with MultipleDeferEvents(sources):
                log.append("body")

        assert log == ["defer a", "release a"]

    def test_no_sources(self):
        with MultipleDeferEvents([]) as deferral:
            assert isinstance(deferral, MultipleDeferEvents)
