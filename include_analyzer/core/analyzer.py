"""
Main include analyzer orchestrator.
"""

from typing import Callable, Optional

from ..core.graph import IncludeGraph
from ..core.types import AnalyzerConfig
from ..extractors import FileSizer, PathNormalizer, TraceDialect, detect_dialect
from ..processors import (
    TraceFileProcessor,
    TraceParser,
    PathInverter,
    InclusionOrderVisitor,
)
from ..formatters import InclusionTreeReport, format_size


class IncludeAnalyzer:
    """Main orchestrator for include trace analysis."""
    
    def __init__(
        self,
        dialect: Optional[str] = None,
        base_dir: Optional[str] = None,
        max_depth: Optional[int] = None,
        size_lookup: Optional[Callable[[str], int]] = None
    ):
        """
        Initialize the IncludeAnalyzer.
        
        Args:
            dialect: 'gcc' or 'msvc' to skip dialect detection
            base_dir: Directory relative trace paths are resolved against
            max_depth: Deepest level listed in the inclusion order report
            size_lookup: Replacement for the on-disk size lookup, called
                         with each distinct path
        """
        # Configuration
        self.config = AnalyzerConfig(
            dialect=dialect,
            base_dir=base_dir,
            max_depth=max_depth
        )
        
        # Results
        self.dialect: Optional[TraceDialect] = None
        self.graph: Optional[IncludeGraph] = None
        self.path_graph: Optional[IncludeGraph] = None
        self.inclusion_report: Optional[InclusionTreeReport] = None
        
        # Initialize components
        self.path_normalizer = PathNormalizer()
        self.file_processor = TraceFileProcessor()
        self.size_lookup = size_lookup or FileSizer(self.config.base_dir)
        self.path_inverter = PathInverter(self.path_normalizer)
    
    def process_trace_file(self, file_path: str):
        """
        Read a trace file and analyze it.
        
        Args:
            file_path: Path to the include trace
        """
        text = self.file_processor.process_file(file_path)
        self.process_trace_text(text)
    
    def process_trace_text(self, text: str):
        """
        Build the include graph, its path rollup and its inclusion order.
        
        Nothing is stored unless every step succeeds.
        
        Args:
            text: Complete trace text
        """
        # Step 1: Pick the grammar
        dialect = detect_dialect(text, self.config.dialect)
        
        # Step 2: Build the include graph
        parser = TraceParser(dialect, self.size_lookup, self.path_normalizer)
        graph = parser.parse(text)
        
        # Step 3: Roll sizes up by directory
        path_graph = self.path_inverter.invert(graph)
        
        # Step 4: Replay the inclusion order
        report = InclusionTreeReport(max_depth=self.config.max_depth)
        InclusionOrderVisitor(graph).visit(report)
        
        self.dialect = dialect
        self.graph = graph
        self.path_graph = path_graph
        self.inclusion_report = report
        
        # Step 5: Report summary
        root = graph[graph.root]
        print(f"\nDetected {dialect.name} trace")
        print(f"Found {len(graph) - 1} unique files in {graph.edge_count} includes")
        print(f"Total size of distinct files: {format_size(root.size_dependencies)}")
        print(f"Expanded {format_size(report.expanded_bytes)} of header text; "
              f"{report.guarded_count} includes skipped by include guards")
    
    def format_size(self, size: int) -> str:
        """
        Format a byte count to a human-readable string.
        
        Args:
            size: Size in bytes
            
        Returns:
            Formatted size string
        """
        return format_size(size)
