"""
Directory size rollup of an include graph.
"""

from typing import Dict, Optional

from ..core.graph import IncludeGraph
from ..core.types import FileVertex
from ..extractors.path_normalizer import PathNormalizer


class PathInverter:
    """
    Turns an include graph into a tree of path prefixes.
    
    Each prefix vertex is sized by the files beneath it, so the root's
    children are the top-level directories and every level below splits
    their weight further, e.g.

        /           -> 30
          /a        -> 30
            /a/b    -> 10
            /a/c    -> 20
    """
    
    def __init__(self, path_normalizer: Optional[PathNormalizer] = None):
        self.path_normalizer = path_normalizer or PathNormalizer()
    
    def invert(self, graph: IncludeGraph) -> IncludeGraph:
        """
        Build the rollup tree. The input graph is not modified.
        
        Args:
            graph: Include graph produced by TraceParser
            
        Returns:
            New IncludeGraph whose vertices are path prefixes
        """
        result = IncludeGraph()
        prefix_vertices: Dict[str, int] = {}
        
        # One pass per file, not per include, so shared headers count once.
        for handle in graph.file_vertices():
            file = graph[handle]
            parent = result.root
            
            for prefix in self.path_normalizer.path_prefixes(file.name):
                vertex = prefix_vertices.get(prefix)
                if vertex is None:
                    vertex = result.add_vertex(FileVertex(name=prefix))
                    prefix_vertices[prefix] = vertex
                    result.add_edge(parent, vertex)
                
                prefix_vertex = result[vertex]
                prefix_vertex.size += file.size
                prefix_vertex.size_dependencies += file.size
                parent = vertex
            
            result[result.root].size_dependencies += file.size
        
        return result
