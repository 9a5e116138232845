"""
Trace file reading.
"""

from ..core.errors import TraceReadError


class TraceFileProcessor:
    """Reads compiler include traces from disk."""
    
    @staticmethod
    def process_file(file_path: str) -> str:
        """
        Read a complete trace file.
        
        Undecodable bytes are replaced rather than rejected, since the paths
        in a trace are whatever the compiler printed. A leading byte order
        mark is dropped so dialect detection sees the first real character.
        
        Args:
            file_path: Path to the trace file
            
        Returns:
            The trace text
            
        Raises:
            TraceReadError: If the file cannot be opened or read
        """
        print(f"Processing {file_path}...")
        
        try:
            with open(file_path, 'r', encoding='utf-8-sig', errors='replace') as f:
                text = f.read()
        except OSError as e:
            raise TraceReadError(f"Failed to open {file_path} for reading: {e.strerror or e}") from e
        
        print(f"Completed reading file: {len(text.splitlines())} lines.")
        return text
