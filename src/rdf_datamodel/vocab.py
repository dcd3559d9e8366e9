"""
Term discriminants and well-known IRIs.
"""
from enum import Enum


class TermType(str, Enum):
    """
    RDF term discriminant.

    Values match the RDF/JS ``termType`` strings, so a TermType compares
    equal to the plain string ("NamedNode" == TermType.NAMED_NODE).
    """
    NAMED_NODE = "NamedNode"
    BLANK_NODE = "BlankNode"
    LITERAL = "Literal"
    VARIABLE = "Variable"
    DEFAULT_GRAPH = "DefaultGraph"
    QUAD = "Quad"

    def __str__(self) -> str:
        return self.value


XSD = "http://www.w3.org/2001/XMLSchema#"
RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"

XSD_STRING = XSD + "string"
XSD_BOOLEAN = XSD + "boolean"
XSD_INTEGER = XSD + "integer"
XSD_DECIMAL = XSD + "decimal"
XSD_DOUBLE = XSD + "double"
RDF_LANGSTRING = RDF + "langString"
