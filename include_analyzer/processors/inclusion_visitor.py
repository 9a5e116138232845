"""
Replay of the textual inclusion order recorded in an include graph.

The graph keeps one vertex per header no matter how often it was included.
A preprocessor only expands a guarded header the first time any include of
it is reached anywhere in the translation unit; later includes are no-ops.
InclusionOrderVisitor walks the graph the same way and reports every
occurrence to an InclusionObserver.
"""

from enum import Enum
from typing import Callable, List

from ..core.errors import GraphInvariantViolation
from ..core.graph import IncludeGraph


class StepOutcome(Enum):
    """What a depth-first walk does with the target of an edge."""
    EXPAND = 'expand'
    SKIP = 'skip'
    STOP = 'stop'


def walk_depth_first(
    graph: IncludeGraph,
    start: int,
    step: Callable[[int, int], StepOutcome],
    finish: Callable[[int], None]
) -> bool:
    """
    Depth-first walk over the edges reachable from start.
    
    Only vertices reached from start are visited. Uses an explicit stack,
    so include depth is not limited by the interpreter recursion limit.
    
    Args:
        graph: Graph to walk
        start: Handle the walk begins at
        step: Called for every edge (source, target) in stored order; its
              outcome decides whether target is descended into, skipped,
              or the whole walk ends
        finish: Called for start and every expanded vertex once all of
                its edges have been walked
        
    Returns:
        False if a step returned StepOutcome.STOP, True otherwise
    """
    stack = [(start, iter(graph.out_edges(start)))]
    
    while stack:
        source, targets = stack[-1]
        target = next(targets, None)
        
        if target is None:
            stack.pop()
            finish(source)
            continue
        
        outcome = step(source, target)
        if outcome is StepOutcome.STOP:
            return False
        if outcome is StepOutcome.EXPAND:
            stack.append((target, iter(graph.out_edges(target))))
    
    return True


class Traversal:
    """
    State of one InclusionOrderVisitor.visit() call.
    
    Observers receive it with every callback to query the position of the
    walk. It is discarded when the walk ends.
    """
    
    def __init__(self, graph: IncludeGraph):
        self.graph = graph
        self.expanded: List[bool] = [False] * len(graph)
        self.include_counts: List[int] = [0] * len(graph)
        self.include_index_stack: List[int] = []
        self.next_include_index = 0
        self.is_expanding = False
        self.stop_requested = False
        self.completed = False
    
    def include_count(self, handle: int) -> int:
        """Occurrences of handle reported so far, including the current one."""
        return self.include_counts[handle]
    
    @property
    def depth(self) -> int:
        """Nesting depth of the current file; 0 for the root."""
        return len(self.include_index_stack) - 1
    
    @property
    def include_index(self) -> int:
        """Sequence number of the current occurrence; 0 for the root."""
        return self.include_index_stack[-1]
    
    def request_stop(self) -> None:
        """End the walk after the current callback returns."""
        self.stop_requested = True
    
    def _open(self) -> None:
        self.include_index_stack.append(self.next_include_index)
        self.next_include_index += 1
    
    def _close(self) -> None:
        self.include_index_stack.pop()


class InclusionObserver:
    """
    Receives the events of an inclusion order replay.
    
    Subclasses override the hooks they need; the defaults do nothing.
    """
    
    def root_file(self, handle: int, traversal: Traversal) -> None:
        """Called once, before anything else, for the translation unit."""
    
    def include_file(self, handle: int, traversal: Traversal) -> None:
        """
        Called for every include of handle, in textual order.
        
        traversal.is_expanding tells whether this occurrence expands the
        file or is skipped by its include guard.
        """
    
    def finish_file(self, handle: int, traversal: Traversal) -> None:
        """Called when the expansion of handle (or the root) is complete."""


class InclusionOrderVisitor:
    """Replays an include graph as a preprocessor would have read it."""
    
    def __init__(self, graph: IncludeGraph):
        self.graph = graph
    
    def visit(self, observer: InclusionObserver) -> Traversal:
        """
        Walk the graph from its root and report every occurrence.
        
        Args:
            observer: Receives root_file, include_file and finish_file events
            
        Returns:
            The finished Traversal; completed is False if the observer
            requested a stop
            
        Raises:
            GraphInvariantViolation: If an include leads back to the root
        """
        graph = self.graph
        root = graph.root
        traversal = Traversal(graph)
        
        traversal._open()
        traversal.expanded[root] = True
        observer.root_file(root, traversal)
        
        def step(source: int, target: int) -> StepOutcome:
            if traversal.stop_requested:
                return StepOutcome.STOP
            if target == root:
                raise GraphInvariantViolation(
                    f"'{graph[source].name}' includes the translation unit root; the graph has a cycle"
                )
            
            expanding = not traversal.expanded[target]
            traversal.expanded[target] = True
            traversal.include_counts[target] += 1
            traversal.is_expanding = expanding
            
            traversal._open()
            observer.include_file(target, traversal)
            if not expanding:
                traversal._close()
            
            if traversal.stop_requested:
                return StepOutcome.STOP
            return StepOutcome.EXPAND if expanding else StepOutcome.SKIP
        
        def finish(handle: int) -> None:
            observer.finish_file(handle, traversal)
            traversal._close()
        
        traversal.completed = walk_depth_first(graph, root, step, finish)
        return traversal
