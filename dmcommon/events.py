"""Deferral of events across several event sources."""

from contextlib import ExitStack
from typing import ContextManager, Iterable, Protocol


class DeferEvents(Protocol):
    """An event source that can hold off raising events."""

    def defer_events(self) -> ContextManager:
        """Return a context manager; events are held until it exits."""
        ...


class MultipleDeferEvents:
    """
    Defer events on several sources as one.

    Deferrals are entered in the given order and released in reverse order.

    Usage:
        with MultipleDeferEvents([model_a, model_b]):
            ...  # no events until the block exits
    """

    def __init__(self, deferrables: Iterable[DeferEvents]):
        self._deferrables = list(deferrables)
        self._stack = ExitStack()

    def __enter__(self):
        with ExitStack() as stack:
            for deferrable in self._deferrables:
                stack.enter_context(deferrable.defer_events())
            self._stack = stack.pop_all()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        return self._stack.__exit__(exc_type, exc_value, traceback)
