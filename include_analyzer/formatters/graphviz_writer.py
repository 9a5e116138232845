"""
Graphviz DOT output for include graphs.
"""

import io
from typing import TextIO

from ..core.graph import IncludeGraph


def _quote(label: str) -> str:
    return label.replace('\\', '\\\\').replace('"', '\\"')


def write_graphviz(out: TextIO, graph: IncludeGraph) -> None:
    """
    Write a graph as a DOT digraph, labelling each vertex with its path.
    
    Args:
        out: Text stream to write to
        graph: IncludeGraph (a file graph or a path rollup)
    """
    out.write("digraph G {\n")
    for handle in graph.vertices():
        out.write(f'{handle}[label="{_quote(graph[handle].name)}"];\n')
    for source, target in graph.edges():
        out.write(f"{source}->{target} ;\n")
    out.write("}\n")


def to_graphviz(graph: IncludeGraph) -> str:
    """Return the DOT text of a graph."""
    out = io.StringIO()
    write_graphviz(out, graph)
    return out.getvalue()
