"""Dependency-tracked reactive cells.

A ``Signal`` holds a value and is read by calling it. A ``Computed`` wraps a
pure function; while the function runs every cell it reads is recorded as a
source. Writing a signal marks all transitive dependants dirty before ``set``
returns, and a dirty computed re-evaluates on its next read, so a read after
a write always observes the new value. Sources are always brought up to date
before the computed that reads them, which gives children-before-parents
ordering in composite field state.

Example:
    ```python
    count = Signal(1)
    double = Computed(lambda: count() * 2)
    count.set(4)
    assert double() == 8
    ```
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_UNSET: Any = object()

# Computed cells currently evaluating, innermost last
_active: list["Computed[Any]"] = []


class _Node:
    """Shared bookkeeping for anything that can be observed."""

    def __init__(self):
        self._observers: set[Computed[Any]] = set()

    def _track(self) -> None:
        if _active:
            observer = _active[-1]
            self._observers.add(observer)
            observer._sources.add(self)

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer._invalidate()


class Signal(_Node, Generic[T]):
    """Writable reactive cell."""

    def __init__(self, value: T):
        super().__init__()
        self._value = value

    def __call__(self) -> T:
        self._track()
        return self._value

    def peek(self) -> T:
        """Read the value without registering a dependency."""
        return self._value

    def set(self, value: T) -> None:
        if value is self._value:
            return
        self._value = value
        self._notify()

    def update(self, fn: Callable[[T], T]) -> None:
        self.set(fn(self._value))

    def __repr__(self) -> str:
        return f"Signal({self._value!r})"


class Computed(_Node, Generic[T]):
    """Read-only cell derived from other cells."""

    def __init__(self, fn: Callable[[], T]):
        super().__init__()
        self._fn = fn
        self._value: T = _UNSET
        self._dirty = True
        self._sources: set[_Node] = set()

    def __call__(self) -> T:
        self._track()
        if self._dirty:
            self._recompute()
        return self._value

    def peek(self) -> T:
        if self._dirty:
            self._recompute()
        return self._value

    def _recompute(self) -> None:
        for source in self._sources:
            source._observers.discard(self)
        self._sources = set()
        _active.append(self)
        try:
            self._value = self._fn()
        finally:
            _active.pop()
        self._dirty = False

    def _invalidate(self) -> None:
        if self._dirty:
            return
        self._dirty = True
        self._notify()

    def __repr__(self) -> str:
        state = "dirty" if self._dirty else repr(self._value)
        return f"Computed({state})"


class WritableComputed(Computed[T]):
    """Computed cell whose writes are routed to a setter.

    Composite fields expose their aggregated value this way: reading projects
    the children, writing fans the new value out to them.
    """

    def __init__(self, fn: Callable[[], T], setter: Callable[[T], None]):
        super().__init__(fn)
        self._setter = setter

    def set(self, value: T) -> None:
        self._setter(value)

    def update(self, fn: Callable[[T], T]) -> None:
        self.set(fn(self.peek()))


def signal(value: T) -> Signal[T]:
    """Create a writable cell."""
    return Signal(value)


def computed(fn: Callable[[], T]) -> Computed[T]:
    """Create a derived cell."""
    return Computed(fn)
