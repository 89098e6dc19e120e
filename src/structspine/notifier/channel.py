"""Channel notifiers.

Each notifier is a ``Behavior`` that announces a message on one channel by
writing a line to a text stream. Chain them to notify on several channels
without a dedicated type for every combination.

Example:
    >>> import io
    >>> from structspine.notifier.channel import build_notification_chain
    >>> out = io.StringIO()
    >>> chain = build_notification_chain(["email", "sms", "slack"], stream=out)
    >>> chain.invoke("Hello, User!")
    >>> print(out.getvalue(), end="")
    Sending email notification: Hello, User!
    Sending SMS notification: Hello, User!
    Sending Slack notification: Hello, User!
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import ClassVar, TextIO

from structspine.chain.chain import BehaviorChain
from structspine.core.exceptions import NotFoundError
from structspine.models.message import Message, Severity

logger = logging.getLogger(__name__)


class ChannelNotifier:
    """Base class for single-channel notifiers.

    Subclasses set ``channel``; the label appears in the output line.

    Args:
        stream: Output stream (default sys.stdout at send time).
        min_severity: Messages below this severity are skipped.
    """

    channel: ClassVar[str] = "generic"

    def __init__(self, stream: TextIO | None = None, min_severity: Severity = Severity.DEBUG) -> None:
        self._stream = stream
        self._min_severity = min_severity
        self.sent = 0

    @property
    def name(self) -> str:
        return self.channel.lower()

    def invoke(self, payload: Message | str) -> None:
        """Send ``payload`` on this channel."""
        message = payload if isinstance(payload, Message) else Message(text=str(payload))
        if message.severity.rank < self._min_severity.rank:
            logger.debug("%s: skipping %s message", self.name, message.severity.value)
            return

        stream = self._stream or sys.stdout
        stream.write(self.format(message) + "\n")
        stream.flush()
        self.sent += 1

    def format(self, message: Message) -> str:
        """Output line for ``message``.

        Example:
            >>> from structspine.models.message import Message
            >>> from structspine.notifier.channel import SlackNotifier
            >>> SlackNotifier().format(Message(text="Build green", tags=["ci"]))
            'Sending Slack notification: Build green (#ci)'
        """
        line = f"Sending {self.channel} notification: {message.text}"
        if message.tags:
            line += " (" + " ".join(f"#{tag}" for tag in message.tags) + ")"
        return line

    def __repr__(self) -> str:
        return f"{type(self).__name__}(min_severity={self._min_severity.value!r})"


class EmailNotifier(ChannelNotifier):
    channel = "email"


class SMSNotifier(ChannelNotifier):
    channel = "SMS"


class SlackNotifier(ChannelNotifier):
    channel = "Slack"


NOTIFIERS: dict[str, type[ChannelNotifier]] = {
    "email": EmailNotifier,
    "sms": SMSNotifier,
    "slack": SlackNotifier,
}


def get_notifier(
    name: str,
    stream: TextIO | None = None,
    min_severity: Severity = Severity.DEBUG,
) -> ChannelNotifier:
    """Instantiate the notifier registered under ``name`` (case-insensitive).

    Raises:
        NotFoundError: No notifier has that name.
    """
    try:
        notifier_class = NOTIFIERS[name.lower()]
    except KeyError:
        raise NotFoundError(
            f"unknown channel {name!r} (available: {', '.join(sorted(NOTIFIERS))})"
        ) from None
    return notifier_class(stream=stream, min_severity=min_severity)


def build_notification_chain(
    names: Sequence[str],
    stream: TextIO | None = None,
    min_severity: Severity = Severity.DEBUG,
) -> BehaviorChain:
    """Chain notifiers that fire in the order ``names`` lists them.

    Raises:
        ValueError: ``names`` is empty.
        NotFoundError: A name is not a registered channel.
    """
    if not names:
        raise ValueError("at least one channel is required")
    return BehaviorChain.of(*(get_notifier(name, stream, min_severity) for name in names))
