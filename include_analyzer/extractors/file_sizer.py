"""
On-disk size lookup for files named in a trace.
"""

import os
from typing import Optional

from ..core.errors import FilesystemError


class FileSizer:
    """Returns the byte size of a file, resolving relative paths against a base directory."""
    
    def __init__(self, base_dir: Optional[str] = None):
        """
        Args:
            base_dir: Directory relative paths are resolved against
                      (default: current working directory)
        """
        self.base_dir = base_dir
    
    def __call__(self, path: str) -> int:
        """
        Args:
            path: File path as written in the trace
            
        Returns:
            Size of the file in bytes
            
        Raises:
            FilesystemError: If the file does not exist or cannot be inspected
        """
        full_path = path
        if self.base_dir and not os.path.isabs(path):
            full_path = os.path.join(self.base_dir, path)
        
        try:
            return os.stat(full_path).st_size
        except OSError as e:
            raise FilesystemError(path, e.strerror or str(e)) from e
