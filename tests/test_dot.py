from grammar import Grammar, Symbol
from utils.dot import graph_epilogue, graph_prologue, leftmost_graph, yield_edges
from utils.grammars import GRAMMAR_INDIRECT


def test_yield_edges():
    grammar = Grammar.from_str(
        """
        <A> := <B> x | <B> y | z
        <B> := b
        """
    )
    assert list(yield_edges(grammar)) == [
        (Symbol("<A>"), Symbol("<B>")),
        (Symbol("<A>"), Symbol("z")),
        (Symbol("<B>"), Symbol("b")),
    ]


def test_leftmost_graph():
    graph = leftmost_graph(Grammar.from_str(GRAMMAR_INDIRECT))
    assert graph[0] == graph_prologue()
    assert graph[-1] == graph_epilogue()
    assert '    "<A>" -> "<B>";' in graph
    assert '    "<B>" -> "<C>";' in graph
    assert '    "<C>" -> "<A>";' in graph
    assert '    "<C>" -> "s";' in graph
    assert sum(line.startswith('   "s" [shape=box') for line in graph) == 1


def test_leftmost_graph_escapes_quotes():
    graph = leftmost_graph(Grammar.from_str("<A> := '\"'"))
    assert '    "<A>" -> "\\"";' in graph
