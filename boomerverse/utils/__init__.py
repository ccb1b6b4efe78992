"""
Utility functions for the Boomerverse services
"""
from .http import safe_json
from .text import first_playlist_entry
from .log import configure_logging

__all__ = ['safe_json', 'first_playlist_entry', 'configure_logging']
