from typing import Iterator

from more_itertools import unique_everseen

from grammar import Grammar, Symbol


def yield_edges(grammar: Grammar) -> Iterator[tuple[Symbol, Symbol]]:
    """Yield (A, X) whenever some alternative of A starts with X"""
    yield from unique_everseen(
        (origin, production.first_symbol())
        for origin, production in grammar.iter_productions()
    )


def graph_prologue() -> str:
    return (
        'digraph G {  graph [fontname = "Courier New", engine="sfdp"];\n'
        + ' node [fontname = "Courier", style = rounded];\n'
        + ' edge [fontname = "Courier"];'
    )


def graph_epilogue() -> str:
    return "}"


def escape(s: str) -> str:
    return s.replace("\\", "\\\\").replace('"', '\\"')


def node_id(symbol: Symbol) -> str:
    return f'"{escape(symbol.text)}"'


def leftmost_graph(grammar: Grammar) -> list[str]:
    graph = [graph_prologue()]
    nodes = []
    edges = []

    for rule in grammar:
        nodes.append(
            f"   {node_id(rule.symbol)} [shape=ellipse, "
            f'label="{escape(rule.symbol.text)}"];'
        )

    for src, dst in yield_edges(grammar):
        if dst.is_terminal():
            nodes.append(
                f"   {node_id(dst)} [shape=box, style=filled, fillcolor=white, "
                f'fontcolor=black, label="{escape(dst.text)}"];'
            )
        edges.append(f"    {node_id(src)} -> {node_id(dst)};")

    graph.extend(unique_everseen(nodes))
    graph.extend(edges)
    graph.append(graph_epilogue())
    return graph
