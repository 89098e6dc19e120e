#!/usr/bin/env python3
"""
StructSpine Notification Chain Example

Combine channels by decoration instead of writing a class per combination.
Behaviors fire in the order they were added.

Usage:
    python examples/02_notification_chain.py
"""

from structspine import EmailNotifier, Message, Severity, SlackNotifier, SMSNotifier, new_chain


def main() -> None:
    """Send one message on three channels, then on a branch."""
    base = new_chain(EmailNotifier()).decorate(SMSNotifier())
    everything = base.decorate(SlackNotifier(min_severity=Severity.WARNING))

    print("All channels:")
    everything.invoke(Message(text="Hello, User!", severity=Severity.WARNING))

    # base is unchanged by the decoration above
    print("\nEmail and SMS only:")
    base.invoke("Hello again!")


if __name__ == "__main__":
    main()
