"""Behavior protocol and adapters.

A behavior is one unit of action taking a payload, e.g. sending a
notification. Its side effect is its own business; chains only decide when
it runs.

Example:
    >>> from structspine.chain.behavior import Behavior, FunctionBehavior
    >>> seen = []
    >>> b = FunctionBehavior(seen.append, name="record")
    >>> isinstance(b, Behavior)
    True
    >>> b.invoke("hi")
    >>> seen
    ['hi']
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Behavior(Protocol):
    """Behavior protocol."""

    def invoke(self, payload: Any) -> None:
        """Perform the action for ``payload``."""
        ...


@dataclass(frozen=True)
class FunctionBehavior:
    """Adapt a plain callable to ``Behavior``."""

    func: Callable[[Any], object]
    name: str = field(default="")

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", getattr(self.func, "__name__", type(self.func).__name__))

    def invoke(self, payload: Any) -> None:
        self.func(payload)


def as_behavior(obj: Behavior | Callable[[Any], object]) -> Behavior:
    """Return ``obj`` as a ``Behavior``, wrapping bare callables.

    Raises:
        TypeError: ``obj`` is neither a behavior nor callable.

    Example:
        >>> from structspine.chain.behavior import as_behavior
        >>> as_behavior(print).name
        'print'
        >>> as_behavior(42)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        TypeError: 42 is not a behavior
    """
    if isinstance(obj, Behavior):
        return obj
    if callable(obj):
        return FunctionBehavior(obj)
    raise TypeError(f"{obj!r} is not a behavior")


def behavior_name(behavior: Behavior) -> str:
    """Human-readable name used in logs."""
    return getattr(behavior, "name", "") or type(behavior).__name__
