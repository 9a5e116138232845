"""
Rendering of path rollup graphs produced by PathInverter.
"""

from typing import Dict, List, Optional

from ..core.graph import IncludeGraph
from .size_formatter import format_size


def _sorted_children(graph: IncludeGraph, handle: int) -> List[int]:
    return sorted(graph.out_edges(handle), key=lambda h: (-graph[h].size, graph[h].name))


def build_path_tree(graph: IncludeGraph, handle: Optional[int] = None) -> Dict:
    """
    Convert a rollup graph into nested dictionaries for JSON output.
    
    Children are ordered largest first, ties by name.
    
    Args:
        graph: Graph returned by PathInverter.invert()
        handle: Vertex to start from (default: the root)
        
    Returns:
        Dictionary with 'name', 'size', 'size_formatted' and 'children'
    """
    if handle is None:
        handle = graph.root
    vertex = graph[handle]
    size = vertex.size_dependencies if handle == graph.root else vertex.size
    
    return {
        'name': vertex.name,
        'size': size,
        'size_formatted': format_size(size),
        'children': [build_path_tree(graph, child) for child in _sorted_children(graph, handle)]
    }


def render_path_tree(graph: IncludeGraph, indent: str = '  ') -> str:
    """
    Render a rollup graph as an indented text tree, one prefix per line.
    
    Example:
        /a  (30 B)
          /a/c  (20 B)
          /a/b  (10 B)
    """
    lines = []
    stack = [(child, 0) for child in reversed(_sorted_children(graph, graph.root))]
    while stack:
        handle, level = stack.pop()
        vertex = graph[handle]
        lines.append(f"{indent * level}{vertex.name}  ({format_size(vertex.size)})")
        stack.extend((child, level + 1) for child in reversed(_sorted_children(graph, handle)))
    return '\n'.join(lines)
