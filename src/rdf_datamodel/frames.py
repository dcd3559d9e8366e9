"""
Columnar view of quads as Polars DataFrames.

Each quad position is spread over four Utf8 columns:

    {position}_type      term type ("NamedNode", "Literal", ...)
    {position}_value     term value
    {position}_language  literal language ("" if none), null otherwise
    {position}_datatype  literal datatype IRI, null otherwise

The layout is flat, so quads nested inside other quads cannot be
represented. Rows are turned back into quads through a DataFactory, which
re-applies canonicalization and role checks.
"""

import logging
from typing import Any, Iterable, List, Optional

import polars as pl

from rdf_datamodel.equality import QUAD_POSITIONS, term_type_of
from rdf_datamodel.errors import InvalidArgumentError
from rdf_datamodel.factory import DataFactory, get_default_factory
from rdf_datamodel.terms import Quad
from rdf_datamodel.vocab import TermType

logger = logging.getLogger(__name__)

TERM_FIELDS = ("type", "value", "language", "datatype")

FRAME_SCHEMA = {
    f"{position}_{name}": pl.Utf8
    for position in QUAD_POSITIONS
    for name in TERM_FIELDS
}


def quads_to_frame(quads: Iterable[Any]) -> pl.DataFrame:
    """
    Convert quads to a DataFrame with one row per quad.

    Raises:
        InvalidArgumentError: A value is not a quad, or holds a nested quad
    """
    columns: dict[str, list] = {name: [] for name in FRAME_SCHEMA}

    for quad in quads:
        if term_type_of(quad) is not TermType.QUAD:
            raise InvalidArgumentError(f"Not a quad: {quad!r}")
        for position in QUAD_POSITIONS:
            term = getattr(quad, position, None)
            term_type = term_type_of(term)
            if term_type is None:
                raise InvalidArgumentError(f"Quad {position} is not a term: {term!r}")
            if term_type is TermType.QUAD:
                raise InvalidArgumentError(
                    f"Nested quad in {position} cannot be stored in a flat frame"
                )

            columns[f"{position}_type"].append(term_type.value)
            columns[f"{position}_value"].append(term.value)
            if term_type is TermType.LITERAL:
                columns[f"{position}_language"].append(term.language)
                columns[f"{position}_datatype"].append(term.datatype.value)
            else:
                columns[f"{position}_language"].append(None)
                columns[f"{position}_datatype"].append(None)

    return pl.DataFrame(columns, schema=FRAME_SCHEMA)


def frame_to_quads(
    df: pl.DataFrame,
    factory: Optional[DataFactory] = None,
) -> List[Quad]:
    """
    Rebuild quads from a DataFrame produced by quads_to_frame.

    Args:
        df: Frame with the columns of FRAME_SCHEMA
        factory: Factory used to build terms (defaults to the shared factory)

    Raises:
        InvalidArgumentError: Missing columns or unknown term types
        RoleViolationError: A row breaks the factory's role set
    """
    factory = factory or get_default_factory()

    missing = [name for name in FRAME_SCHEMA if name not in df.columns]
    if missing:
        raise InvalidArgumentError(f"Frame is missing columns: {', '.join(missing)}")

    quads = []
    for row in df.iter_rows(named=True):
        subject, predicate, obj, graph = (
            _row_term(factory, row, position) for position in QUAD_POSITIONS
        )
        quads.append(factory.quad(subject, predicate, obj, graph))

    logger.debug(f"Rebuilt {len(quads)} quads from frame")
    return quads


def _row_term(factory: DataFactory, row: dict, position: str):
    """Build the term stored in one position of a frame row."""
    term_type = row[f"{position}_type"]
    value = row[f"{position}_value"]

    if term_type == TermType.NAMED_NODE:
        return factory.named_node(value)
    if term_type == TermType.BLANK_NODE:
        return factory.blank_node(value)
    if term_type == TermType.LITERAL:
        language = row[f"{position}_language"] or ""
        if language:
            return factory.literal(value, language)
        datatype = row[f"{position}_datatype"]
        return factory.literal(value, factory.named_node(datatype) if datatype else None)
    if term_type == TermType.VARIABLE:
        return factory.variable(value)
    if term_type == TermType.DEFAULT_GRAPH:
        return factory.default_graph()

    raise InvalidArgumentError(f"Unknown term type in {position}_type: {term_type!r}")
