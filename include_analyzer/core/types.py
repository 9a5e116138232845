"""
Type definitions for include analysis.
"""

import os
from dataclasses import dataclass
from typing import Optional, TypedDict

GCC_DIALECT = 'gcc'
MSVC_DIALECT = 'msvc'
DIALECTS = (GCC_DIALECT, MSVC_DIALECT)


@dataclass
class FileVertex:
    """A single file in an include graph."""
    name: str = ''
    size: int = 0
    size_dependencies: int = 0
    included_count: int = 0


class InclusionEntry(TypedDict):
    """One occurrence of a file in the replayed inclusion order."""
    name: str
    depth: int
    occurrence: int
    expanded: bool
    size: int


class AnalyzerConfig:
    """Configuration for include analysis."""
    
    def __init__(
        self,
        dialect: Optional[str] = None,
        base_dir: Optional[str] = None,
        max_depth: Optional[int] = None
    ):
        """
        Initialize include analysis configuration.
        
        Args:
            dialect: 'gcc' or 'msvc' to force a trace grammar.
                     Default: None (sniffed from the first character of the trace)
            
            base_dir: Directory that relative paths in the trace are resolved
                      against when looking up file sizes.
                      Default: None (current working directory)
            
            max_depth: Deepest nesting level listed in the inclusion order report.
                       Deeper occurrences are still counted in the totals.
                       Default: None (no limit)
        """
        if dialect is not None and dialect not in DIALECTS:
            raise ValueError(f"Unknown dialect '{dialect}', expected one of {DIALECTS}")
        if max_depth is not None and max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        
        self.dialect = dialect
        self.base_dir = base_dir or os.getcwd()
        self.max_depth = max_depth
