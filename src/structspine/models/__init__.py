"""Data models."""

from structspine.models.base import StructSpineModel
from structspine.models.message import Message, Severity
from structspine.models.node_spec import NodeSpec

__all__ = [
    "StructSpineModel",
    "Message",
    "Severity",
    "NodeSpec",
]
