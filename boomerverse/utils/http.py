"""
HTTP response utilities with error handling
"""
from typing import Any

import requests

def safe_json(response: requests.Response, default=None) -> Any:
    """
    Safely decode a JSON response body.
    
    Args:
        response: Response from an upstream API
        default: Value returned for a failed status or an invalid body
        
    Returns:
        Parsed JSON data or default value
    """
    if response is None or not response.ok:
        return default
    try:
        return response.json()
    except ValueError:
        return default
