"""Behavior chains."""

from structspine.chain.behavior import Behavior, FunctionBehavior, as_behavior
from structspine.chain.chain import BehaviorChain, decorate, new_chain

__all__ = [
    "Behavior",
    "FunctionBehavior",
    "as_behavior",
    "BehaviorChain",
    "new_chain",
    "decorate",
]
