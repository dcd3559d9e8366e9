"""
Data factory: the construction surface for terms and quads.

The factory applies canonicalization (language tag lowercasing, literal
datatype defaulting, blank node identifier generation) and enforces the
role set of its dialect whenever a quad is built. Producers such as parsers
build terms bottom-up through it and never need to know which dialect is
active.

Thread-safety: all operations are pure except blank_node() without an
argument, whose counter is guarded by a per-factory lock.
"""

import dataclasses
import logging
import re
import threading
from decimal import Decimal
from typing import Any, Optional, Union

from rdf_datamodel.config import ConfigValidator, FactoryConfig
from rdf_datamodel.equality import QUAD_POSITIONS, term_type_of
from rdf_datamodel.errors import (
    ConfigValidationError,
    InvalidArgumentError,
    RoleViolationError,
    UnsupportedOperationError,
)
from rdf_datamodel.roles import Dialect, Position, RoleSet, get_role_set
from rdf_datamodel.terms import (
    BlankNode,
    DefaultGraph,
    Literal,
    NamedNode,
    Quad,
    Variable,
)
from rdf_datamodel.vocab import (
    RDF_LANGSTRING,
    XSD_BOOLEAN,
    XSD_DECIMAL,
    XSD_DOUBLE,
    XSD_INTEGER,
    TermType,
)

logger = logging.getLogger(__name__)

# BCP47 shape: primary subtag plus optional alphanumeric subtags
LANGUAGE_TAG_PATTERN = re.compile(r"[a-zA-Z]{1,8}(-[a-zA-Z0-9]{1,8})*")

_DEFAULT_GRAPH = DefaultGraph()


def _lexical_form(value: Any) -> tuple[str, Optional[str]]:
    """Return (lexical form, inferred datatype IRI) for a literal value."""
    if isinstance(value, str):
        return value, None
    if isinstance(value, bool):
        return ("true" if value else "false"), XSD_BOOLEAN
    if isinstance(value, int):
        return str(value), XSD_INTEGER
    if isinstance(value, float):
        if value != value:
            return "NaN", XSD_DOUBLE
        if value in (float("inf"), float("-inf")):
            return ("INF" if value > 0 else "-INF"), XSD_DOUBLE
        return repr(value), XSD_DOUBLE
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidArgumentError(f"Decimal literal must be finite, got {value}")
        return format(value, "f"), XSD_DECIMAL
    raise InvalidArgumentError(
        f"Cannot build a literal from {type(value).__name__}"
    )


class DataFactory:
    """
    Factory for RDF terms and quads.

    Example:
        factory = DataFactory(dialect="plain")
        q = factory.quad(
            factory.named_node("http://example.org/alice"),
            factory.named_node("http://xmlns.com/foaf/0.1/name"),
            factory.literal("Alice", "en"),
        )
    """

    def __init__(self, config: Optional[FactoryConfig] = None, **overrides):
        """
        Initialize the factory.

        Args:
            config: Factory configuration (defaults to FactoryConfig())
            **overrides: Individual FactoryConfig fields to override

        Raises:
            ConfigValidationError: Invalid configuration
        """
        config = config or FactoryConfig()
        if overrides:
            try:
                config = dataclasses.replace(config, **overrides)
            except TypeError as e:
                raise ConfigValidationError(str(e)) from e
        if isinstance(config.dialect, str):
            try:
                config = dataclasses.replace(config, dialect=Dialect(config.dialect))
            except ValueError:
                raise ConfigValidationError(f"Invalid dialect: {config.dialect!r}") from None
        ConfigValidator.validate_or_raise(config)

        self._config = config
        self._role_set = get_role_set(config.dialect, patterns=config.patterns)

        # Blank node generation state
        self._bnode_lock = threading.Lock()
        self._next_bnode = 1

        logger.debug(f"Created DataFactory with role set {self._role_set.name}")

    @property
    def config(self) -> FactoryConfig:
        return self._config

    @property
    def dialect(self) -> Dialect:
        return self._config.dialect

    @property
    def role_set(self) -> RoleSet:
        return self._role_set

    @property
    def supports_variables(self) -> bool:
        """Whether variable() is available on this factory."""
        return self._config.variables

    # =========================================================================
    # Terms
    # =========================================================================

    def named_node(self, iri: str) -> NamedNode:
        """Create a NamedNode. The IRI is not normalized or validated."""
        if not isinstance(iri, str):
            raise InvalidArgumentError(
                f"IRI must be a string, got {type(iri).__name__}"
            )
        return NamedNode(iri)

    def blank_node(self, value: Optional[str] = None) -> BlankNode:
        """
        Create a BlankNode.

        If value is omitted a fresh identifier is generated, unique among
        all identifiers this factory has generated.
        """
        if value is None:
            with self._bnode_lock:
                n = self._next_bnode
                self._next_bnode = n + 1
            return BlankNode(f"{self._config.blank_node_prefix}{n}")
        if not isinstance(value, str) or not value:
            raise InvalidArgumentError(
                f"Blank node identifier must be a non-empty string, got {value!r}"
            )
        return BlankNode(value)

    def literal(
        self,
        value: Any,
        language_or_datatype: Union[str, NamedNode, None] = None,
    ) -> Literal:
        """
        Create a Literal.

        Args:
            value: Lexical form. bool, int, float and Decimal values are
                converted and, without an explicit datatype, typed as
                xsd:boolean, xsd:integer, xsd:double and xsd:decimal.
            language_or_datatype: A NamedNode is used as the datatype; a
                string is used as the language tag (lowercased). Omitted
                means xsd:string.

        Raises:
            InvalidArgumentError: Conflicting or malformed arguments
        """
        lex, inferred = _lexical_form(value)

        if language_or_datatype is None or language_or_datatype == "":
            if inferred is not None:
                return Literal(lex, datatype=NamedNode(inferred))
            return Literal(lex)

        if isinstance(language_or_datatype, str):
            if inferred is not None:
                raise InvalidArgumentError(
                    f"Language tag given for non-string value {value!r}"
                )
            language = language_or_datatype
            if self._config.validate_language_tags and not LANGUAGE_TAG_PATTERN.fullmatch(language):
                raise InvalidArgumentError(f"Malformed language tag: {language!r}")
            return Literal(lex, language=language.lower(), datatype=NamedNode(RDF_LANGSTRING))

        if term_type_of(language_or_datatype) is TermType.NAMED_NODE:
            datatype_iri = language_or_datatype.value
            if not datatype_iri:
                raise InvalidArgumentError("Literal datatype IRI must not be empty")
            if datatype_iri == RDF_LANGSTRING:
                raise InvalidArgumentError(
                    "rdf:langString datatype requires a language tag; pass the tag instead"
                )
            return Literal(lex, datatype=NamedNode(datatype_iri))

        raise InvalidArgumentError(
            f"Expected a language tag or NamedNode datatype, got {language_or_datatype!r}"
        )

    def variable(self, name: str) -> Variable:
        """
        Create a Variable.

        Raises:
            UnsupportedOperationError: Variables are disabled for this factory
        """
        if not self._config.variables:
            raise UnsupportedOperationError("This factory does not support variables")
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError(
                f"Variable name must be a non-empty string, got {name!r}"
            )
        return Variable(name)

    def default_graph(self) -> DefaultGraph:
        """Return the default graph."""
        return _DEFAULT_GRAPH

    # =========================================================================
    # Quads
    # =========================================================================

    def quad(self, subject, predicate, object, graph=None) -> Quad:
        """
        Create a Quad after checking every position against the role set.

        Args:
            subject: Subject term
            predicate: Predicate term
            object: Object term
            graph: Graph term; None means the default graph

        Raises:
            RoleViolationError: A term is not allowed in its position
        """
        if graph is None:
            graph = _DEFAULT_GRAPH
        self._check_role(Position.SUBJECT, subject)
        self._check_role(Position.PREDICATE, predicate)
        self._check_role(Position.OBJECT, object)
        self._check_role(Position.GRAPH, graph)
        return Quad(subject, predicate, object, graph)

    def triple(self, subject, predicate, object) -> Quad:
        """Create a quad in the default graph."""
        return self.quad(subject, predicate, object)

    def _check_role(self, position: Position, term: Any) -> None:
        term_type = term_type_of(term)
        permitted = self._role_set.permitted(position)
        if term_type is None or term_type not in permitted:
            logger.debug(
                f"Rejected {term_type or type(term).__name__} as {position.value} "
                f"under {self._role_set.name}"
            )
            raise RoleViolationError(
                position.value, term_type, permitted, self._role_set.name
            )
        if term_type is TermType.QUAD:
            # Nested quads may come from elsewhere, so check them too
            for nested in Position:
                self._check_role(nested, getattr(term, nested.value, None))

    # =========================================================================
    # Conversion
    # =========================================================================

    def from_term(self, term: Any):
        """
        Rebuild a term through this factory.

        Accepts any term-shaped object, including terms from other
        implementations. The result equals the input.
        """
        term_type = term_type_of(term)
        if term_type is TermType.NAMED_NODE:
            return self.named_node(term.value)
        if term_type is TermType.BLANK_NODE:
            return self.blank_node(term.value)
        if term_type is TermType.LITERAL:
            language = getattr(term, "language", "") or ""
            if language:
                return self.literal(term.value, language)
            datatype = getattr(term, "datatype", None)
            if datatype is not None:
                datatype = self.from_term(datatype)
            return self.literal(term.value, datatype)
        if term_type is TermType.VARIABLE:
            return self.variable(term.value)
        if term_type is TermType.DEFAULT_GRAPH:
            return self.default_graph()
        if term_type is TermType.QUAD:
            return self.from_quad(term)
        raise InvalidArgumentError(f"Not an RDF term: {term!r}")

    def from_quad(self, quad: Any) -> Quad:
        """Rebuild a quad, and any nested quads, through this factory."""
        if term_type_of(quad) is not TermType.QUAD:
            raise InvalidArgumentError(f"Not a quad: {quad!r}")
        subject, predicate, obj = (
            self.from_term(getattr(quad, position, None)) for position in QUAD_POSITIONS[:3]
        )
        graph = getattr(quad, "graph", None)
        if graph is not None:
            graph = self.from_term(graph)
        return self.quad(subject, predicate, obj, graph)


DEFAULT_FACTORY = DataFactory()


def get_default_factory() -> DataFactory:
    """Return the shared RDF-star factory."""
    return DEFAULT_FACTORY
