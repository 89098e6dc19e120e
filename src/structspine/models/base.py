"""Base models and shared types.

Example:
    >>> from structspine.models.base import StructSpineModel
    >>> class Point(StructSpineModel):
    ...     x: int
    >>> Point(x=1).x
    1
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StructSpineModel(BaseModel):
    """Base model with standard configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )
