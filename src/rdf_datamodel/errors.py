"""
Error taxonomy for term and quad construction.

All errors are raised synchronously by the constructor or factory call that
detects them. Equality checks never raise.
"""
from __future__ import annotations

from typing import FrozenSet, Optional


class DataModelError(Exception):
    """Base class for data model errors."""
    pass


class InvalidArgumentError(DataModelError, ValueError):
    """Malformed or mutually exclusive construction arguments."""
    pass


class UnsupportedOperationError(DataModelError, NotImplementedError):
    """An optional factory capability was invoked but is not available."""
    pass


class ConfigValidationError(DataModelError):
    """Factory configuration error."""
    pass


class RoleViolationError(DataModelError, TypeError):
    """
    A term is not permitted in a quad position under the active dialect.

    Attributes:
        position: Quad position name ("subject", "predicate", "object", "graph")
        term_type: Term type found, or None if the argument was not a term
        permitted: Term types the role set allows in that position
        dialect: Name of the role set that rejected the term
    """

    def __init__(
        self,
        position: str,
        term_type: Optional[str],
        permitted: FrozenSet[str],
        dialect: str = "",
    ):
        self.position = position
        self.term_type = term_type
        self.permitted = permitted
        self.dialect = dialect
        found = term_type if term_type is not None else "non-term value"
        allowed = ", ".join(sorted(str(t) for t in permitted))
        message = f"{found} is not permitted as {position}; expected one of: {allowed}"
        if dialect:
            message = f"{message} ({dialect})"
        super().__init__(message)
