"""
Include dependency graph.

Vertices live in an arena and are addressed by integer handles. Handle 0 is
always the synthetic root that stands for the translation unit. Outgoing
edges are kept in insertion order because traversal order depends on it.
"""

from typing import Iterator, List, Tuple

from .types import FileVertex

ROOT = 0


class IncludeGraph:
    """Directed include graph with one synthetic root vertex."""
    
    def __init__(self):
        self._vertices: List[FileVertex] = [FileVertex()]
        self._out_edges: List[List[int]] = [[]]
        self._edge_count = 0
    
    @property
    def root(self) -> int:
        return ROOT
    
    def __len__(self) -> int:
        return len(self._vertices)
    
    def __getitem__(self, handle: int) -> FileVertex:
        return self._vertices[handle]
    
    @property
    def edge_count(self) -> int:
        return self._edge_count
    
    def add_vertex(self, vertex: FileVertex) -> int:
        """
        Add a vertex and return its handle.
        
        Args:
            vertex: Vertex data to store
            
        Returns:
            Integer handle of the new vertex
        """
        self._vertices.append(vertex)
        self._out_edges.append([])
        return len(self._vertices) - 1
    
    def add_edge(self, source: int, target: int) -> None:
        """
        Record that source includes target.
        
        Parallel edges are allowed; each one counts as a separate occurrence
        of the target.
        """
        if not 0 <= source < len(self._vertices) or not 0 <= target < len(self._vertices):
            raise IndexError(f"Edge {source}->{target} references an unknown vertex")
        self._out_edges[source].append(target)
        self._vertices[target].included_count += 1
        self._edge_count += 1
    
    def vertices(self) -> Iterator[int]:
        """Iterate all vertex handles, root first."""
        return iter(range(len(self._vertices)))
    
    def file_vertices(self) -> Iterator[int]:
        """Iterate all non-root vertex handles in creation order."""
        return iter(range(1, len(self._vertices)))
    
    def out_edges(self, handle: int) -> List[int]:
        """Targets of the edges leaving handle, in insertion order."""
        return self._out_edges[handle]
    
    def edges(self) -> Iterator[Tuple[int, int]]:
        """Iterate all (source, target) pairs."""
        for source, targets in enumerate(self._out_edges):
            for target in targets:
                yield source, target
    
    def reachable_from(self, handle: int = ROOT) -> List[int]:
        """Distinct handles reachable from handle, excluding handle itself."""
        seen = {handle}
        order = []
        stack = list(reversed(self._out_edges[handle]))
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            order.append(current)
            stack.extend(reversed(self._out_edges[current]))
        return order
