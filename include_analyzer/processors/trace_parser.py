"""
Include graph construction from compiler traces.
"""

from typing import Callable, Dict, List, Optional, Set, Tuple

from ..core.errors import MalformedTraceError
from ..core.graph import IncludeGraph
from ..core.types import FileVertex
from ..extractors.dialects import TraceDialect, other_dialect
from ..extractors.path_normalizer import PathNormalizer


class _ParseState:
    """Cursor and indexes shared by every frame of one parse."""
    
    def __init__(self, lines: List[str]):
        self.lines = lines
        self.position = 0
        self.graph = IncludeGraph()
        self.known_files: Dict[str, int] = {}
        self.finalized: Set[int] = set()
    
    @property
    def line_number(self) -> int:
        return self.position + 1


class TraceParser:
    """Builds an IncludeGraph from the text of a GCC or MSVC include trace."""
    
    def __init__(
        self,
        dialect: TraceDialect,
        size_lookup: Callable[[str], int],
        path_normalizer: Optional[PathNormalizer] = None
    ):
        """
        Args:
            dialect: Grammar the trace is written in
            size_lookup: Returns the byte size of a path, raising FilesystemError on failure
            path_normalizer: PathNormalizer instance (a default one is created if omitted)
        """
        self.dialect = dialect
        self.foreign_dialect = other_dialect(dialect)
        self.size_lookup = size_lookup
        self.path_normalizer = path_normalizer or PathNormalizer()
    
    def parse(self, text: str) -> IncludeGraph:
        """
        Parse a complete trace.
        
        Args:
            text: Trace text
            
        Returns:
            IncludeGraph rooted at a synthetic vertex for the translation unit,
            with every size field final
            
        Raises:
            MalformedTraceError: If an include entry has no file name or the
                                 trace mixes GCC and MSVC entries
            FilesystemError: If the size of a newly seen file cannot be read
        """
        state = _ParseState(text.splitlines())
        graph = state.graph
        
        # The root frame only returns at end of input; nothing is shallower than depth 1.
        self._read_frame(state, graph.root, 0)
        return graph
    
    def _read_frame(self, state: _ParseState, parent: int, depth: int, virtual: bool = False) -> int:
        """
        Consume every line nested under parent.
        
        Returns when input ends or a line at depth <= depth is reached; that
        line is left unconsumed for an enclosing frame.
        
        Args:
            state: Shared parse state
            parent: Vertex the lines at depth + 1 are included by
            depth: Nesting depth of the frame
            virtual: True for a frame standing in for a level the trace
                     skipped; it does not finalize parent's aggregate size
            
        Returns:
            Bytes of the files first discovered inside this frame
        """
        last_target = None
        sub_tree_size = 0
        
        while state.position < len(state.lines):
            line = state.lines[state.position]
            line_depth, path = self.dialect.split_line(line)
            
            if line_depth == 0:
                if self.foreign_dialect.claims(line):
                    raise MalformedTraceError(
                        f"{self.foreign_dialect.name} include entry in a {self.dialect.name} trace",
                        state.line_number
                    )
                state.position += 1
                continue
            
            if line_depth <= depth:
                break
            
            if line_depth == depth + 1:
                if not path:
                    raise MalformedTraceError("include entry has no file name", state.line_number)
                
                last_target, this_size = self._resolve_file(state, path)
                state.graph.add_edge(parent, last_target)
                sub_tree_size += this_size
                state.position += 1
            elif last_target is not None:
                sub_tree_size += self._read_frame(state, last_target, depth + 1)
            else:
                # Nothing was printed at depth + 1 (e.g. it came from a
                # precompiled header), so the closest known includer is parent.
                sub_tree_size += self._read_frame(state, parent, depth + 1, virtual=True)
        
        if not virtual and parent not in state.finalized:
            vertex = state.graph[parent]
            vertex.size_dependencies = vertex.size + sub_tree_size
            state.finalized.add(parent)
        
        return sub_tree_size
    
    def _resolve_file(self, state: _ParseState, path: str) -> Tuple[int, int]:
        """
        Find or create the vertex for a path.
        
        Returns:
            Tuple of (handle, newly_added_size). The size is 0 when the file
            was already known, so every file is counted once.
        """
        name, lookup_path = self.path_normalizer.normalize_path(path)
        
        handle = state.known_files.get(name)
        if handle is not None:
            return handle, 0
        
        size = self.size_lookup(lookup_path)
        handle = state.graph.add_vertex(FileVertex(name=name, size=size, size_dependencies=size))
        state.known_files[name] = handle
        return handle, size
