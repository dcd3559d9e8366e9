"""
RDF term variants and quads.

Implements the RDF/JS term model as immutable value objects:

- NamedNode: an IRI
- BlankNode: a locally scoped identifier
- Literal: lexical value with language tag and datatype
- Variable: a query variable name
- DefaultGraph: the default graph marker
- Quad: subject/predicate/object/graph, itself a term so RDF-star
  statements can nest

Equality and hashing are value based (see rdf_datamodel.equality), so terms
are safe as dict keys and set members regardless of where they came from.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Union

from rdf_datamodel.equality import term_key, term_type_of, terms_equal
from rdf_datamodel.errors import InvalidArgumentError
from rdf_datamodel.vocab import RDF_LANGSTRING, XSD_STRING, TermType


class BaseTerm:
    """Shared equality behaviour for all term variants."""
    __slots__ = ()

    term_type: ClassVar[TermType]

    def equals(self, other: Any) -> bool:
        """
        Return True if other is a term of the same type with equal fields.

        None and non-term values are never equal and never raise.
        """
        return terms_equal(self, other)

    def __eq__(self, other: Any) -> bool:
        return terms_equal(self, other)

    def __hash__(self) -> int:
        return hash(term_key(self))


# =============================================================================
# Atomic Terms
# =============================================================================

@dataclass(frozen=True, slots=True, eq=False)
class NamedNode(BaseTerm):
    """An IRI. The string is kept exactly as given."""
    value: str
    term_type: ClassVar[TermType] = TermType.NAMED_NODE

    def __str__(self) -> str:
        return f"<{self.value}>"


@dataclass(frozen=True, slots=True, eq=False)
class BlankNode(BaseTerm):
    """
    A blank node.

    The value carries no serialization prefix: a Turtle label ``_:b3`` is
    stored as ``b3``.
    """
    value: str
    term_type: ClassVar[TermType] = TermType.BLANK_NODE

    def __str__(self) -> str:
        return f"_:{self.value}"


@dataclass(frozen=True, slots=True, eq=False)
class Literal(BaseTerm):
    """
    An RDF literal.

    Attributes:
        value: Unescaped lexical form
        language: Lowercase BCP47 tag, or "" for no language
        datatype: Datatype IRI; rdf:langString when a language is set,
            xsd:string when left unspecified
    """
    value: str
    language: str = ""
    datatype: Optional[NamedNode] = None
    term_type: ClassVar[TermType] = TermType.LITERAL

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise InvalidArgumentError(
                f"Literal value must be a string, got {type(self.value).__name__}"
            )
        if self.language is None:
            object.__setattr__(self, "language", "")
        elif not isinstance(self.language, str):
            raise InvalidArgumentError(
                f"Literal language must be a string, got {type(self.language).__name__}"
            )
        else:
            object.__setattr__(self, "language", self.language.lower())

        datatype = self.datatype
        if datatype is None:
            datatype = NamedNode(RDF_LANGSTRING if self.language else XSD_STRING)
            object.__setattr__(self, "datatype", datatype)
        elif term_type_of(datatype) is not TermType.NAMED_NODE:
            raise InvalidArgumentError(
                f"Literal datatype must be a NamedNode, got {datatype!r}"
            )
        elif not datatype.value:
            raise InvalidArgumentError("Literal datatype IRI must not be empty")

        if self.language and datatype.value != RDF_LANGSTRING:
            raise InvalidArgumentError(
                f"Literal with language '{self.language}' cannot have datatype <{datatype.value}>"
            )
        if not self.language and datatype.value == RDF_LANGSTRING:
            raise InvalidArgumentError(
                "Literal with datatype rdf:langString requires a language"
            )

    def __str__(self) -> str:
        escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
        base = f'"{escaped}"'
        if self.language:
            return f"{base}@{self.language}"
        if self.datatype.value != XSD_STRING:
            return f"{base}^^<{self.datatype.value}>"
        return base


@dataclass(frozen=True, slots=True, eq=False)
class Variable(BaseTerm):
    """A query variable, named without the leading ``?``."""
    value: str
    term_type: ClassVar[TermType] = TermType.VARIABLE

    def __str__(self) -> str:
        return f"?{self.value}"


@dataclass(frozen=True, slots=True, eq=False)
class DefaultGraph(BaseTerm):
    """The default graph. All instances are equal."""
    value: ClassVar[str] = ""
    term_type: ClassVar[TermType] = TermType.DEFAULT_GRAPH

    def __str__(self) -> str:
        return "DEFAULT"


# =============================================================================
# Quads
# =============================================================================

@dataclass(frozen=True, slots=True, eq=False)
class Quad(BaseTerm):
    """
    A subject/predicate/object/graph statement.

    Quad is a term variant itself (``value`` is always ""), which lets an
    RDF-star quad appear as the subject or object of another quad. Direct
    construction does not check roles; use DataFactory.quad for that.
    """
    subject: "Term"
    predicate: "Term"
    object: "Term"
    graph: "Term" = field(default_factory=DefaultGraph)
    value: ClassVar[str] = ""
    term_type: ClassVar[TermType] = TermType.QUAD

    def __str__(self) -> str:
        inner = f"{self.subject} {self.predicate} {self.object}"
        if term_type_of(self.graph) is TermType.DEFAULT_GRAPH:
            return f"<< {inner} >>"
        return f"<< {inner} {self.graph} >>"


# =============================================================================
# Type Aliases
# =============================================================================

Term = Union[NamedNode, BlankNode, Literal, Variable, DefaultGraph, Quad]

# Plain RDF 1.1 roles
Rdf11Subject = Union[NamedNode, BlankNode]
Rdf11Predicate = NamedNode
Rdf11Object = Union[NamedNode, BlankNode, Literal]
Rdf11Graph = Union[DefaultGraph, NamedNode, BlankNode]

# RDF-star roles (predicate and graph as in RDF 1.1)
StarSubject = Union[NamedNode, BlankNode, Quad]
StarObject = Union[NamedNode, BlankNode, Literal, Quad]

# Unioned with a role type to form the matching pattern type
TermPattern = Optional[Variable]
