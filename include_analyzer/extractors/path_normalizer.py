"""
Include path normalization.
"""

from pathlib import PurePosixPath
from typing import List, Tuple

_ASCII_LOWER = str.maketrans(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ',
    'abcdefghijklmnopqrstuvwxyz'
)


class PathNormalizer:
    """Gives every file named in a trace one canonical identity."""
    
    separator = '/'
    
    def normalize_separators(self, path: str) -> str:
        """Convert backslashes to forward slashes."""
        return path.replace('\\', self.separator)
    
    @staticmethod
    def fold_case(path: str) -> str:
        """Lower-case ASCII letters only, leaving other characters untouched."""
        return path.translate(_ASCII_LOWER)
    
    def normalize_path(self, path: str) -> Tuple[str, str]:
        """
        Normalize a path read from a trace.
        
        Args:
            path: Path exactly as it appeared in the trace
            
        Returns:
            Tuple of (identity, lookup_path)
            - identity: separator-normalized, case-folded name used as the vertex key
            - lookup_path: separator-normalized name with its original case,
                           used to find the file on disk
        """
        if not path:
            return path, path
        
        lookup_path = self.normalize_separators(path)
        return self.fold_case(lookup_path), lookup_path
    
    @staticmethod
    def path_prefixes(name: str) -> List[str]:
        """
        Cumulative prefixes of a normalized path, shortest first.
        
        Example:
            '/a/b/x.h' -> ['/', '/a', '/a/b', '/a/b/x.h']
        """
        prefixes = []
        partial = PurePosixPath()
        for component in PurePosixPath(name).parts:
            partial = partial / component
            prefixes.append(str(partial))
        return prefixes
