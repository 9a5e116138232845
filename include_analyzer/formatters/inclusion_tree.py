"""
Inclusion order report built on InclusionOrderVisitor.
"""

from typing import List, Optional

from ..core.types import InclusionEntry
from ..processors.inclusion_visitor import InclusionObserver, Traversal


class InclusionTreeReport(InclusionObserver):
    """
    Records every include occurrence in the order the preprocessor met it.
    
    Two byte totals are kept, and they answer different questions:
    - expanded_bytes: own size summed over expanding occurrences, i.e. the
      header text actually pasted into the translation unit
    - occurrence_bytes: own size summed over every occurrence, i.e. what
      would be read if no header had an include guard
    Neither equals the graph's size_dependencies in general, which counts
    distinct files regardless of how they were reached.
    """
    
    def __init__(self, max_depth: Optional[int] = None):
        """
        Args:
            max_depth: Deepest nesting level kept in entries. Deeper
                       occurrences still count towards the totals.
        """
        self.max_depth = max_depth
        self.entries: List[InclusionEntry] = []
        self.root_name = ''
        self.expanded_bytes = 0
        self.occurrence_bytes = 0
        self.occurrence_count = 0
        self.guarded_count = 0
        self.deepest = 0
    
    def root_file(self, handle: int, traversal: Traversal) -> None:
        self.root_name = traversal.graph[handle].name
    
    def include_file(self, handle: int, traversal: Traversal) -> None:
        vertex = traversal.graph[handle]
        depth = traversal.depth
        
        self.occurrence_count += 1
        self.occurrence_bytes += vertex.size
        if traversal.is_expanding:
            self.expanded_bytes += vertex.size
        else:
            self.guarded_count += 1
        self.deepest = max(self.deepest, depth)
        
        if self.max_depth is not None and depth > self.max_depth:
            return
        
        self.entries.append({
            'name': vertex.name,
            'depth': depth,
            'occurrence': traversal.include_count(handle),
            'expanded': traversal.is_expanding,
            'size': vertex.size,
        })
    
    def render(self, indent: str = '  ') -> str:
        """
        Render the recorded entries as an indented list.
        
        Guarded occurrences are suffixed with their occurrence number.
        """
        lines = []
        for entry in self.entries:
            line = f"{indent * (entry['depth'] - 1)}{entry['name']}"
            if not entry['expanded']:
                line += f"  (guarded, #{entry['occurrence']})"
            lines.append(line)
        return '\n'.join(lines)
