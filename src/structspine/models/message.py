"""Message payload passed along behavior chains.

Example:
    >>> from structspine.models.message import Message, Severity
    >>> m = Message(text="Hello, User!", severity=Severity.WARNING)
    >>> m.severity.value
    'warning'
"""

from __future__ import annotations

from enum import Enum

from pydantic import ConfigDict, Field

from structspine.models.base import StructSpineModel


class Severity(str, Enum):
    """Message severity level.

    Example:
        >>> from structspine.models.message import Severity
        >>> Severity.INFO.value
        'info'
        >>> Severity.ERROR.rank > Severity.WARNING.rank
        True
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        """Position in the ordering, DEBUG lowest."""
        return list(Severity).index(self)


class Message(StructSpineModel):
    """A message to deliver.

    Messages are frozen so every behavior in a chain sees the same payload.

    Example:
        >>> from structspine.models.message import Message
        >>> m = Message(text="Deploy finished", tags=["ops"])
        >>> m.tags
        ['ops']
        >>> str(m)
        'Deploy finished'
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, description="Message body")
    severity: Severity = Field(default=Severity.INFO, description="Delivery priority")
    tags: list[str] = Field(default_factory=list, description="Free-form labels")

    def __str__(self) -> str:
        return self.text
