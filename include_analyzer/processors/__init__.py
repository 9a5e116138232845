"""Processors that build and transform include graphs."""

from .file_processor import TraceFileProcessor
from .trace_parser import TraceParser
from .path_inverter import PathInverter
from .inclusion_visitor import (
    InclusionObserver,
    InclusionOrderVisitor,
    StepOutcome,
    Traversal,
    walk_depth_first,
)

__all__ = [
    "TraceFileProcessor",
    "TraceParser",
    "PathInverter",
    "InclusionObserver",
    "InclusionOrderVisitor",
    "StepOutcome",
    "Traversal",
    "walk_depth_first",
]
