"""Channel notifiers."""

from structspine.notifier.channel import (
    NOTIFIERS,
    ChannelNotifier,
    EmailNotifier,
    SlackNotifier,
    SMSNotifier,
    build_notification_chain,
    get_notifier,
)

__all__ = [
    "ChannelNotifier",
    "EmailNotifier",
    "SMSNotifier",
    "SlackNotifier",
    "NOTIFIERS",
    "get_notifier",
    "build_notification_chain",
]
