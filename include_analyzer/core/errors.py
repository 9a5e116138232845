"""
Exception types raised while building and traversing include graphs.
"""

from typing import Optional


class IncludeAnalyzerError(Exception):
    """Base class for all include analyzer errors."""


class TraceReadError(IncludeAnalyzerError, OSError):
    """The trace file could not be read."""


class FilesystemError(IncludeAnalyzerError, OSError):
    """The size of a file named in the trace could not be obtained."""

    def __init__(self, path: str, reason: str = ''):
        self.path = path
        self.reason = reason
        message = f"Unable to get size of '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class MalformedTraceError(IncludeAnalyzerError, ValueError):
    """The trace depth sequence cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class GraphInvariantViolation(IncludeAnalyzerError, AssertionError):
    """
    Raised when a traversal finds a graph that could not have come out of
    a valid parse, e.g. an expansion that leads back to the root.
    """
