"""Trace format and file system helpers."""

from .dialects import TraceDialect, GCC, MSVC, detect_dialect, get_dialect
from .path_normalizer import PathNormalizer
from .file_sizer import FileSizer

__all__ = [
    "TraceDialect",
    "GCC",
    "MSVC",
    "detect_dialect",
    "get_dialect",
    "PathNormalizer",
    "FileSizer",
]
