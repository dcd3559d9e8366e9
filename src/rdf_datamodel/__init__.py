"""
rdf-datamodel: an interoperable in-memory RDF and RDF-star term model.

Immutable terms and quads with value-based equality, dialect role sets,
and a canonicalizing data factory.
"""

__version__ = "0.1.0"

from rdf_datamodel.vocab import TermType
from rdf_datamodel.terms import (
    BaseTerm,
    NamedNode,
    BlankNode,
    Literal,
    Variable,
    DefaultGraph,
    Quad,
    Term,
    TermPattern,
)
from rdf_datamodel.equality import terms_equal, term_key, term_type_of
from rdf_datamodel.roles import (
    Dialect,
    Position,
    RoleSet,
    RDF11,
    RDF_STAR,
    RDF11_PATTERN,
    RDF_STAR_PATTERN,
    get_role_set,
)
from rdf_datamodel.config import FactoryConfig, ConfigValidator
from rdf_datamodel.factory import DataFactory, DEFAULT_FACTORY, get_default_factory
from rdf_datamodel.errors import (
    DataModelError,
    InvalidArgumentError,
    RoleViolationError,
    UnsupportedOperationError,
    ConfigValidationError,
)

__all__ = [
    "TermType",
    # Terms
    "BaseTerm",
    "NamedNode",
    "BlankNode",
    "Literal",
    "Variable",
    "DefaultGraph",
    "Quad",
    "Term",
    "TermPattern",
    # Equality
    "terms_equal",
    "term_key",
    "term_type_of",
    # Roles
    "Dialect",
    "Position",
    "RoleSet",
    "RDF11",
    "RDF_STAR",
    "RDF11_PATTERN",
    "RDF_STAR_PATTERN",
    "get_role_set",
    # Factory
    "FactoryConfig",
    "ConfigValidator",
    "DataFactory",
    "DEFAULT_FACTORY",
    "get_default_factory",
    # Errors
    "DataModelError",
    "InvalidArgumentError",
    "RoleViolationError",
    "UnsupportedOperationError",
    "ConfigValidationError",
    # Polars bridge (lazy)
    "quads_to_frame",
    "frame_to_quads",
]


# Lazy import for the Polars frame bridge
def __getattr__(name):
    if name in ("quads_to_frame", "frame_to_quads"):
        from rdf_datamodel.frames import quads_to_frame, frame_to_quads
        return {
            "quads_to_frame": quads_to_frame,
            "frame_to_quads": frame_to_quads,
        }[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
