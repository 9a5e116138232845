"""Core components for include analysis."""

from .errors import (
    IncludeAnalyzerError,
    TraceReadError,
    FilesystemError,
    MalformedTraceError,
    GraphInvariantViolation,
)
from .graph import IncludeGraph
from .types import AnalyzerConfig, FileVertex, InclusionEntry
from .analyzer import IncludeAnalyzer

__all__ = [
    "IncludeAnalyzer",
    "IncludeGraph",
    "AnalyzerConfig",
    "FileVertex",
    "InclusionEntry",
    "IncludeAnalyzerError",
    "TraceReadError",
    "FilesystemError",
    "MalformedTraceError",
    "GraphInvariantViolation",
]
