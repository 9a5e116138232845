"""
Size formatting utilities for human-readable output.
"""


def format_size(size: int) -> str:
    """
    Format a byte count as a human-readable string.
    
    Args:
        size: Size in bytes
        
    Returns:
        Formatted size string (e.g., "512 B", "2.50 KB", "1.20 MB")
    """
    if size < 1024:
        return f"{size} B"
    elif size < 1024 * 1024:
        return f"{size/1024:.2f} KB"
    elif size < 1024 * 1024 * 1024:
        return f"{size/(1024 * 1024):.2f} MB"
    else:
        return f"{size/(1024 * 1024 * 1024):.2f} GB"
