"""
Tests for the Graphviz export of the chains
"""

from io import StringIO

import pytest

from fomarkov.fixed_order_markov import NONWORD, Fixed_order_Markov, InvalidTarget
from fomarkov.markov_graph import save_graph, to_dot


@pytest.fixture
def markov():
    markov = Fixed_order_Markov(2)
    markov.learn("one two FOO one two BAR one two BAZ one two BOO".split())
    return markov


class TestGraph:
    def test_digraph_structure(self, markov):
        dot = to_dot(markov)
        assert dot.startswith("digraph markov {\n")
        assert "\tordering = out;\n" in dot
        assert dot.rstrip().endswith("}")

    def test_nodes(self, markov):
        dot = to_dot(markov)
        assert f'\tnode_1 [label="{NONWORD}"];' in dot
        assert '\tnode_4 [label="one::two"];' in dot
        assert dot.count("[label=") == markov.nb_contexts() + 1

    def test_one_edge_per_transition(self, markov):
        dot = to_dot(markov)
        assert dot.count(" -> ") == markov.nb_transitions()
        # (one, two) -> FOO leads to (two, FOO)
        assert "\tnode_4 -> node_5;" in dot
        # (two, BOO) terminates
        assert "\tnode_11 -> node_1;" in dot

    def test_save_graph_to_stream(self, markov):
        stream = StringIO()
        save_graph(markov, stream)
        assert stream.getvalue() == to_dot(markov)

    def test_quotes_are_escaped(self):
        markov = Fixed_order_Markov(1)
        markov.learn(['say', '"hi"'])
        assert 'label="\\"hi\\""' in to_dot(markov)

    def test_invalid_target(self):
        markov = Fixed_order_Markov(2)
        markov.observe(("a", "b"), "c")
        with pytest.raises(InvalidTarget):
            to_dot(markov)
