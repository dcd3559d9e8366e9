"""Tests for RDF term variants and quads."""
import dataclasses

import pytest

from rdf_datamodel.terms import (
    NamedNode,
    BlankNode,
    Literal,
    Variable,
    DefaultGraph,
    Quad,
)
from rdf_datamodel.errors import InvalidArgumentError
from rdf_datamodel.vocab import TermType, XSD_STRING, XSD_INTEGER, RDF_LANGSTRING


EX = "http://example.org/"


# ========== Discriminant Tests ==========

class TestTermType:
    def test_values_match_rdfjs_names(self):
        assert TermType.NAMED_NODE == "NamedNode"
        assert TermType.BLANK_NODE == "BlankNode"
        assert TermType.LITERAL == "Literal"
        assert TermType.VARIABLE == "Variable"
        assert TermType.DEFAULT_GRAPH == "DefaultGraph"
        assert TermType.QUAD == "Quad"

    def test_each_variant_carries_discriminant(self):
        assert NamedNode(EX).term_type is TermType.NAMED_NODE
        assert BlankNode("b1").term_type is TermType.BLANK_NODE
        assert Literal("x").term_type is TermType.LITERAL
        assert Variable("v").term_type is TermType.VARIABLE
        assert DefaultGraph().term_type is TermType.DEFAULT_GRAPH
        q = Quad(NamedNode(EX + "s"), NamedNode(EX + "p"), NamedNode(EX + "o"))
        assert q.term_type is TermType.QUAD

    def test_str(self):
        assert str(TermType.LITERAL) == "Literal"


# ========== NamedNode / BlankNode / Variable Tests ==========

class TestAtomicTerms:
    def test_named_node_value(self):
        assert NamedNode(EX + "alice").value == EX + "alice"

    def test_blank_node_value(self):
        assert BlankNode("b3").value == "b3"

    def test_variable_value(self):
        assert Variable("name").value == "name"

    def test_immutable(self):
        node = NamedNode(EX)
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.value = "other"

    def test_str(self):
        assert str(NamedNode(EX)) == f"<{EX}>"
        assert str(BlankNode("b1")) == "_:b1"
        assert str(Variable("x")) == "?x"


# ========== Literal Tests ==========

class TestLiteral:
    def test_defaults_to_xsd_string(self):
        lit = Literal("hello")
        assert lit.language == ""
        assert lit.datatype == NamedNode(XSD_STRING)

    def test_language_defaults_datatype_to_langstring(self):
        lit = Literal("hello", language="en")
        assert lit.datatype.value == RDF_LANGSTRING

    def test_language_lowercased(self):
        lit = Literal("colour", language="EN-GB")
        assert lit.language == "en-gb"
        assert lit.equals(Literal("colour", language="en-gb"))

    def test_explicit_datatype(self):
        lit = Literal("42", datatype=NamedNode(XSD_INTEGER))
        assert lit.datatype.value == XSD_INTEGER
        assert lit.language == ""

    def test_language_with_other_datatype_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Literal("42", language="en", datatype=NamedNode(XSD_INTEGER))

    def test_langstring_without_language_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Literal("hello", datatype=NamedNode(RDF_LANGSTRING))

    def test_empty_datatype_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Literal("hello", datatype=NamedNode(""))

    def test_non_named_node_datatype_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Literal("hello", datatype=BlankNode("dt"))

    def test_non_string_value_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Literal(42)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            Literal("x", datatype=NamedNode(""))

    def test_str(self):
        assert str(Literal("hi")) == '"hi"'
        assert str(Literal("hi", language="en")) == '"hi"@en'
        assert str(Literal("1", datatype=NamedNode(XSD_INTEGER))) == f'"1"^^<{XSD_INTEGER}>'
        assert str(Literal('say "hi"')) == '"say \\"hi\\""'


# ========== DefaultGraph Tests ==========

class TestDefaultGraph:
    def test_value_is_empty(self):
        assert DefaultGraph().value == ""

    def test_distinct_instances_equal(self):
        assert DefaultGraph() is not DefaultGraph()
        assert DefaultGraph() == DefaultGraph()
        assert hash(DefaultGraph()) == hash(DefaultGraph())


# ========== Quad Tests ==========

class TestQuad:
    def test_fields(self):
        s, p, o, g = NamedNode(EX + "s"), NamedNode(EX + "p"), Literal("o"), NamedNode(EX + "g")
        q = Quad(s, p, o, g)
        assert q.subject == s
        assert q.predicate == p
        assert q.object == o
        assert q.graph == g

    def test_value_is_empty(self):
        q = Quad(NamedNode(EX + "s"), NamedNode(EX + "p"), NamedNode(EX + "o"))
        assert q.value == ""

    def test_graph_defaults_to_default_graph(self):
        q = Quad(NamedNode(EX + "s"), NamedNode(EX + "p"), NamedNode(EX + "o"))
        assert q.graph.term_type is TermType.DEFAULT_GRAPH

    def test_nested_quad_as_subject(self):
        inner = Quad(NamedNode(EX + "s"), NamedNode(EX + "p"), NamedNode(EX + "o"))
        outer = Quad(inner, NamedNode(EX + "certainty"), Literal("0.9"))
        assert outer.subject.term_type is TermType.QUAD

    def test_str(self):
        q = Quad(NamedNode(EX + "s"), NamedNode(EX + "p"), Literal("o"))
        assert str(q) == f'<< <{EX}s> <{EX}p> "o" >>'

    def test_str_named_graph(self):
        q = Quad(NamedNode(EX + "s"), NamedNode(EX + "p"), Literal("o"), NamedNode(EX + "g"))
        assert str(q) == f'<< <{EX}s> <{EX}p> "o" <{EX}g> >>'

    def test_usable_as_dict_key(self):
        q1 = Quad(NamedNode(EX + "s"), NamedNode(EX + "p"), Literal("o"))
        q2 = Quad(NamedNode(EX + "s"), NamedNode(EX + "p"), Literal("o"))
        counts = {q1: 1}
        counts[q2] = counts.get(q2, 0) + 1
        assert counts == {q1: 2}
