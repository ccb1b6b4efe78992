"""
Text processing utilities
"""
from typing import Optional

def first_playlist_entry(text: str) -> Optional[str]:
    """
    Extract the first stream entry from an M3U playlist.
    
    Args:
        text: Raw playlist body
        
    Returns:
        First non-empty line that is not a comment, or None
    """
    if not text:
        return None
        
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith('#'):
            return line
    
    return None
