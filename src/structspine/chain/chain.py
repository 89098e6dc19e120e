"""Behavior chains.

A chain is an immutable, singly-linked sequence of behaviors. Invoking it
runs each link's behavior with the same payload, head to tail, in the order
the behaviors were supplied: the first behavior added fires first.

``decorate`` never touches the chain it is given. It copies the links and
appends the new behavior at the tail, so the input chain stays usable on its
own and no link is ever shared between two chains.

Example:
    >>> from structspine.chain.chain import decorate, new_chain
    >>> calls = []
    >>> chain = new_chain(lambda m: calls.append(("email", m)))
    >>> chain = decorate(chain, lambda m: calls.append(("sms", m)))
    >>> chain = decorate(chain, lambda m: calls.append(("slack", m)))
    >>> chain.invoke("Hello, User!")
    >>> [channel for channel, _ in calls]
    ['email', 'sms', 'slack']
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from structspine.chain.behavior import Behavior, as_behavior, behavior_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class BehaviorChain:
    """One link: its own behavior plus the rest of the chain.

    Build chains with ``new_chain``/``decorate`` or ``BehaviorChain.of``
    rather than by hand.

    Attributes:
        behavior: Action performed by this link.
        forward: Next link, or None at the tail.
    """

    behavior: Behavior
    forward: BehaviorChain | None = None

    @classmethod
    def of(cls, *behaviors: Behavior | Callable[[Any], object]) -> BehaviorChain:
        """Build a chain firing ``behaviors`` in the given order.

        Raises:
            ValueError: No behaviors given.

        Example:
            >>> from structspine.chain.chain import BehaviorChain
            >>> len(BehaviorChain.of(print, print))
            2
        """
        if not behaviors:
            raise ValueError("a chain needs at least one behavior")
        return _link([as_behavior(b) for b in behaviors])

    def __iter__(self) -> Iterator[BehaviorChain]:
        link: BehaviorChain | None = self
        while link is not None:
            yield link
            link = link.forward

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"BehaviorChain({' -> '.join(behavior_name(b) for b in self.behaviors)})"

    @property
    def behaviors(self) -> tuple[Behavior, ...]:
        """Behaviors in execution order."""
        return tuple(link.behavior for link in self)

    def decorate(self, behavior: Behavior | Callable[[Any], object]) -> BehaviorChain:
        """Return a new chain that also runs ``behavior``, after all current ones."""
        return _link([*self.behaviors, as_behavior(behavior)])

    def invoke(self, payload: Any) -> None:
        """Run every behavior with ``payload``, head to tail.

        Exceptions raised by a behavior propagate unchanged; later behaviors
        do not run.
        """
        for link in self:
            logger.debug("Invoking %s", behavior_name(link.behavior))
            link.behavior.invoke(payload)


def _link(behaviors: list[Behavior]) -> BehaviorChain:
    chain = BehaviorChain(behaviors[-1])
    for behavior in reversed(behaviors[:-1]):
        chain = BehaviorChain(behavior, chain)
    return chain


def new_chain(initial: Behavior | Callable[[Any], object]) -> BehaviorChain:
    """Chain of length one with ``initial`` at its head."""
    return BehaviorChain(as_behavior(initial))


def decorate(chain: BehaviorChain, behavior: Behavior | Callable[[Any], object]) -> BehaviorChain:
    """Return ``chain`` extended with ``behavior``; ``chain`` is left unchanged."""
    return chain.decorate(behavior)
