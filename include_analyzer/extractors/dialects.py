"""
Grammars of the supported include trace formats.

GCC (``g++ -H -E source.cpp``) writes one line per opened header, prefixed
by one dot per nesting level:

    . /usr/include/stdio.h
    .. /usr/include/features.h

MSVC (``cl.exe /showIncludes /P source.cpp``) writes a fixed note followed by
one space per nesting level:

    Note: including file: c:\\sdk\\include\\stdio.h
    Note: including file:  c:\\sdk\\include\\corecrt.h
"""

import re
from typing import Optional, Tuple

from ..core.types import GCC_DIALECT, MSVC_DIALECT


class TraceDialect:
    """Describes how one trace format encodes nesting depth."""
    
    def __init__(self, name: str, line_prefix: str, depth_mark: str, space_after_marks: bool, claim_pattern: str):
        """
        Args:
            name: Dialect identifier ('gcc' or 'msvc')
            line_prefix: Literal text every include line starts with
            depth_mark: Character repeated once per nesting level
            space_after_marks: If True, a single space between the marks and
                               the path is skipped
            claim_pattern: Regex matching lines that unambiguously belong to
                           this dialect, used to reject mixed traces
        """
        self.name = name
        self.line_prefix = line_prefix
        self.depth_mark = depth_mark
        self.space_after_marks = space_after_marks
        self.claim_pattern = re.compile(claim_pattern)
    
    def split_line(self, line: str) -> Tuple[int, str]:
        """
        Split a trace line into its nesting depth and path.
        
        Args:
            line: One line of the trace, without its line terminator
            
        Returns:
            Tuple of (depth, path). Depth 0 means the line is not an include
            entry of this dialect; the path is then empty.
        """
        if not line.startswith(self.line_prefix):
            return 0, ''
        
        rest = line[len(self.line_prefix):]
        depth = len(rest) - len(rest.lstrip(self.depth_mark))
        if depth == 0:
            return 0, ''
        
        rest = rest[depth:]
        if self.space_after_marks and rest.startswith(' '):
            rest = rest[1:]
        return depth, rest.strip()
    
    def claims(self, line: str) -> bool:
        """True if the line is an include entry written in this dialect."""
        return bool(self.claim_pattern.match(line))
    
    def __repr__(self) -> str:
        return f"TraceDialect({self.name!r})"


GCC = TraceDialect(
    name=GCC_DIALECT,
    line_prefix='',
    depth_mark='.',
    space_after_marks=True,
    claim_pattern=r'\.+ \S',
)

MSVC = TraceDialect(
    name=MSVC_DIALECT,
    line_prefix='Note: including file:',
    depth_mark=' ',
    space_after_marks=False,
    claim_pattern=r'Note: including file: +\S',
)

_DIALECTS = {GCC.name: GCC, MSVC.name: MSVC}


def get_dialect(name: str) -> TraceDialect:
    """Look up a dialect by name."""
    try:
        return _DIALECTS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown trace dialect '{name}', expected one of {sorted(_DIALECTS)}") from None


def other_dialect(dialect: TraceDialect) -> TraceDialect:
    """The dialect a trace must not be mixed with."""
    return MSVC if dialect is GCC else GCC


def detect_dialect(text: str, forced: Optional[str] = None) -> TraceDialect:
    """
    Decide which grammar a trace is written in.
    
    GCC traces start with a nesting dot; anything else is read as MSVC.
    
    Args:
        text: Complete trace text
        forced: Dialect name that overrides detection
        
    Returns:
        The TraceDialect to parse the trace with
    """
    if forced:
        return get_dialect(forced)
    if text.startswith(GCC.depth_mark):
        return GCC
    return MSVC
