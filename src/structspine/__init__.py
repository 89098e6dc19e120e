"""
StructSpine - Composite hierarchies and behavior chains.

Two small, immutable building blocks that client code composes freely:

- Hierarchies: leaves with an intrinsic cost and containers whose cost is the
  sum of their children, evaluated on demand to any depth.
- Behavior chains: ordered sequences of actions invoked with one payload,
  extended by decoration without mutating the original chain.

Quick Start:
    >>> from structspine import Container, Leaf, new_chain
    >>> Container([Leaf("pen", 3), Container([Leaf("ink", 2)])]).cost()
    5
    >>> chain = new_chain(print).decorate(print)
    >>> chain.invoke("twice")
    twice
    twice
"""

# Hierarchies
from structspine.hierarchy import (
    Container,
    HierarchyNode,
    Leaf,
    build_tree,
    check_tree,
    count_leaves,
    iter_leaves,
    iter_nodes,
    load_tree,
    new_container,
    new_leaf,
    render_tree,
)

# Behavior chains
from structspine.chain import Behavior, BehaviorChain, FunctionBehavior, decorate, new_chain

# Notifiers
from structspine.notifier import (
    ChannelNotifier,
    EmailNotifier,
    SlackNotifier,
    SMSNotifier,
    build_notification_chain,
    get_notifier,
)

# Models
from structspine.models import Message, NodeSpec, Severity

# Configuration and errors
from structspine.core import (
    AliasingError,
    ConfigurationError,
    CycleError,
    NotFoundError,
    Settings,
    StructSpineError,
    StructureError,
    ValidationError,
    configure_logging,
    get_settings,
)

__version__ = "0.1.0"

__all__ = [
    # Hierarchies
    "HierarchyNode",
    "Leaf",
    "Container",
    "new_leaf",
    "new_container",
    "iter_nodes",
    "iter_leaves",
    "count_leaves",
    "check_tree",
    "build_tree",
    "load_tree",
    "render_tree",
    # Behavior chains
    "Behavior",
    "FunctionBehavior",
    "BehaviorChain",
    "new_chain",
    "decorate",
    # Notifiers
    "ChannelNotifier",
    "EmailNotifier",
    "SMSNotifier",
    "SlackNotifier",
    "get_notifier",
    "build_notification_chain",
    # Models
    "Message",
    "Severity",
    "NodeSpec",
    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",
    # Errors
    "StructSpineError",
    "StructureError",
    "CycleError",
    "AliasingError",
    "ValidationError",
    "ConfigurationError",
    "NotFoundError",
    # Version
    "__version__",
]
