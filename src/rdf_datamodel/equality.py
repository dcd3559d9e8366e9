"""
Structural equality for RDF terms and quads.

Every term variant delegates ``equals``, ``__eq__`` and ``__hash__`` here so
that comparison behaves the same whichever side starts it. The algorithm
dispatches on the discriminant pair and recurses into literal datatypes and
quad positions.

Comparison works on term *shapes*, not on concrete classes: any object that
exposes ``term_type`` (or the RDF/JS ``termType``) plus the variant's fields
takes part, so terms built by another implementation compare by value.
"""
from typing import Any, Hashable, Optional

from rdf_datamodel.vocab import TermType


QUAD_POSITIONS = ("subject", "predicate", "object", "graph")

_MISSING = object()


def term_type_of(term: Any) -> Optional[TermType]:
    """Return the TermType of a term-shaped object, or None."""
    if term is None:
        return None
    raw = getattr(term, "term_type", None)
    if raw is None:
        raw = getattr(term, "termType", None)
    if raw is None:
        return None
    try:
        return TermType(raw)
    except ValueError:
        return None


def terms_equal(left: Any, right: Any) -> bool:
    """
    Compare two terms by value.

    Returns False when either side is None or not a term, and when the
    discriminants differ. Never raises.
    """
    left_type = term_type_of(left)
    if left_type is None:
        return False
    right_type = term_type_of(right)
    if right_type is not left_type:
        return False

    if left_type is TermType.DEFAULT_GRAPH:
        return True

    if left_type is TermType.QUAD:
        for position in QUAD_POSITIONS:
            if not terms_equal(
                getattr(left, position, None),
                getattr(right, position, None),
            ):
                return False
        return True

    if getattr(left, "value", _MISSING) != getattr(right, "value", _MISSING):
        return False

    if left_type is TermType.LITERAL:
        return (
            getattr(left, "language", "") == getattr(right, "language", "")
            and terms_equal(
                getattr(left, "datatype", None),
                getattr(right, "datatype", None),
            )
        )

    return True


def term_key(term: Any) -> Hashable:
    """
    Build a hashable key consistent with terms_equal.

    Two terms that compare equal always produce equal keys.
    """
    term_type = term_type_of(term)
    if term_type is None:
        return (None,)
    if term_type is TermType.DEFAULT_GRAPH:
        return (term_type.value,)
    if term_type is TermType.QUAD:
        return (term_type.value,) + tuple(
            term_key(getattr(term, position, None))
            for position in QUAD_POSITIONS
        )
    if term_type is TermType.LITERAL:
        return (
            term_type.value,
            term.value,
            getattr(term, "language", ""),
            term_key(getattr(term, "datatype", None)),
        )
    return (term_type.value, term.value)
