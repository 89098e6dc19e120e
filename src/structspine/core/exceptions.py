"""Custom exceptions.

StructSpine uses a hierarchy of exceptions to provide clear error handling:

Example:
    >>> from structspine.core.exceptions import CycleError, StructSpineError
    >>> isinstance(CycleError("box contains itself"), StructSpineError)
    True
    >>> try:
    ...     raise NotFoundError("channel 'fax'")
    ... except StructSpineError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: NotFoundError
"""

from __future__ import annotations


class StructSpineError(Exception):
    """Base exception for StructSpine.

    Example:
        >>> from structspine.core.exceptions import StructSpineError
        >>> e = StructSpineError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class StructureError(StructSpineError):
    """A hierarchy violates the tree contract.

    Raised only by explicit audits (see ``structspine.hierarchy.check_tree``);
    cost evaluation itself never checks structure.

    Example:
        >>> from structspine.core.exceptions import StructureError
        >>> raise StructureError("not a tree")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        StructureError: not a tree
    """


class CycleError(StructureError):
    """A container is its own ancestor.

    Example:
        >>> from structspine.core.exceptions import CycleError
        >>> raise CycleError("cycle at 'box'")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        CycleError: cycle at 'box'
    """


class AliasingError(StructureError):
    """The same node object is reachable through two parents.

    Its cost would be counted once per parent.

    Example:
        >>> from structspine.core.exceptions import AliasingError
        >>> raise AliasingError("'pen' appears twice")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        AliasingError: 'pen' appears twice
    """


class ValidationError(StructSpineError):
    """Input data validation failed.

    Example:
        >>> from structspine.core.exceptions import ValidationError
        >>> raise ValidationError("invalid tree")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ValidationError: invalid tree
    """


class ConfigurationError(StructSpineError):
    """Configuration is invalid.

    Example:
        >>> from structspine.core.exceptions import ConfigurationError
        >>> raise ConfigurationError("bad log level")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ConfigurationError: bad log level
    """


class NotFoundError(StructSpineError):
    """Requested resource not found.

    Example:
        >>> from structspine.core.exceptions import NotFoundError
        >>> raise NotFoundError("channel fax")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        NotFoundError: channel fax
    """
