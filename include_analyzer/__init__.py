"""
Include Analyzer - Compiler Include Trace Analysis Tool
"""

__version__ = "1.0.0"

from .core.analyzer import IncludeAnalyzer
from .core.errors import (
    IncludeAnalyzerError,
    TraceReadError,
    FilesystemError,
    MalformedTraceError,
    GraphInvariantViolation,
)
from .core.graph import IncludeGraph
from .core.types import AnalyzerConfig, FileVertex

__all__ = [
    "IncludeAnalyzer",
    "IncludeGraph",
    "AnalyzerConfig",
    "FileVertex",
    "IncludeAnalyzerError",
    "TraceReadError",
    "FilesystemError",
    "MalformedTraceError",
    "GraphInvariantViolation",
]
