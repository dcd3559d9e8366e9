"""
Role sets: which term variants are legal in each quad position.

A role set is a small immutable lookup table consulted by DataFactory.quad.
Two dialects are defined:

- plain RDF 1.1 (``RDF11``)
- RDF-star (``RDF_STAR``), which also allows a quad as subject or object

Each dialect has a pattern variant that additionally accepts Variables in
every position, for building query patterns.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Union

from rdf_datamodel.errors import InvalidArgumentError
from rdf_datamodel.vocab import TermType


class Dialect(Enum):
    """RDF dialect a factory enforces."""
    PLAIN = "plain"  # RDF 1.1
    STAR = "star"    # RDF-star


class Position(Enum):
    """Quad positions. Values match the Quad attribute names."""
    SUBJECT = "subject"
    PREDICATE = "predicate"
    OBJECT = "object"
    GRAPH = "graph"


@dataclass(frozen=True)
class RoleSet:
    """Permitted term types per quad position for one dialect."""
    name: str
    dialect: Dialect
    subject: FrozenSet[TermType]
    predicate: FrozenSet[TermType]
    object: FrozenSet[TermType]
    graph: FrozenSet[TermType]

    @property
    def allows_variables(self) -> bool:
        return all(
            TermType.VARIABLE in self.permitted(position) for position in Position
        )

    def permitted(self, position: Union[Position, str]) -> FrozenSet[TermType]:
        """Return the term types allowed in a position."""
        return getattr(self, Position(position).value)

    def permits(self, position: Union[Position, str], term_type: TermType) -> bool:
        """Check whether a term type is allowed in a position."""
        return term_type in self.permitted(position)

    def with_variables(self, name: str) -> "RoleSet":
        """Return a copy of this role set that also admits Variables."""
        var = frozenset({TermType.VARIABLE})
        return RoleSet(
            name=name,
            dialect=self.dialect,
            subject=self.subject | var,
            predicate=self.predicate | var,
            object=self.object | var,
            graph=self.graph | var,
        )


RDF11 = RoleSet(
    name="Rdf11",
    dialect=Dialect.PLAIN,
    subject=frozenset({TermType.NAMED_NODE, TermType.BLANK_NODE}),
    predicate=frozenset({TermType.NAMED_NODE}),
    object=frozenset({TermType.NAMED_NODE, TermType.BLANK_NODE, TermType.LITERAL}),
    graph=frozenset({TermType.DEFAULT_GRAPH, TermType.NAMED_NODE, TermType.BLANK_NODE}),
)

RDF_STAR = RoleSet(
    name="RdfStar",
    dialect=Dialect.STAR,
    subject=RDF11.subject | {TermType.QUAD},
    predicate=RDF11.predicate,
    object=RDF11.object | {TermType.QUAD},
    graph=RDF11.graph,
)

RDF11_PATTERN = RDF11.with_variables("Rdf11Pattern")
RDF_STAR_PATTERN = RDF_STAR.with_variables("RdfStarPattern")

_ROLE_SETS = {
    (Dialect.PLAIN, False): RDF11,
    (Dialect.STAR, False): RDF_STAR,
    (Dialect.PLAIN, True): RDF11_PATTERN,
    (Dialect.STAR, True): RDF_STAR_PATTERN,
}


def get_role_set(dialect: Union[Dialect, str], patterns: bool = False) -> RoleSet:
    """
    Look up the role set for a dialect.

    Args:
        dialect: Dialect or its string value ("plain" or "star")
        patterns: Also admit Variables in every position

    Raises:
        InvalidArgumentError: Unknown dialect
    """
    try:
        dialect = Dialect(dialect)
    except ValueError:
        raise InvalidArgumentError(f"Unknown dialect: {dialect!r}") from None
    return _ROLE_SETS[(dialect, bool(patterns))]
