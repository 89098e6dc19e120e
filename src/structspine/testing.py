"""Testing utilities.

Example:
    >>> from structspine.chain import BehaviorChain
    >>> from structspine.testing import CallLog
    >>> log = CallLog()
    >>> BehaviorChain.of(log.behavior("A"), log.behavior("B")).invoke("m")
    >>> log.calls
    [('A', 'm'), ('B', 'm')]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CallLog:
    """Shared, ordered record of behavior invocations."""

    calls: list[tuple[str, Any]] = field(default_factory=list)

    def behavior(self, name: str) -> RecordingBehavior:
        """New behavior writing to this log."""
        return RecordingBehavior(name, self)

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def clear(self) -> None:
        self.calls.clear()


@dataclass(eq=False)
class RecordingBehavior:
    """Behavior that records ``(name, payload)`` instead of acting."""

    name: str
    log: CallLog = field(default_factory=CallLog)

    def invoke(self, payload: Any) -> None:
        self.log.calls.append((self.name, payload))
