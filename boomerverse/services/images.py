"""
Remote image download and data URL encoding
"""
import base64
import logging
from typing import Optional

import requests

from ..config import config
from .errors import FetchError

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "image/jpeg"
FETCH_FAILED = "Failed to fetch image from Cloudinary"

class ImageFetcher:
    """Service for turning remote images into embeddable data URLs"""
    
    def __init__(self, session: Optional[requests.Session] = None):
        self._session = session or requests.Session()
    
    def to_data_url(self, image_url: str) -> str:
        """
        Download an image and encode it as a data URL.
        
        Args:
            image_url: Remote image location
            
        Returns:
            String of the form data:<mime>;base64,<payload>
            
        Raises:
            FetchError: If the download fails or returns a non-success status
        """
        try:
            response = self._session.get(image_url, timeout=config.HTTP_TIMEOUT)
        except requests.RequestException as e:
            logger.warning("Image fetch failed for %s: %s", image_url, e)
            raise FetchError(FETCH_FAILED) from e
        
        if not response.ok:
            logger.warning("Image fetch for %s returned HTTP %s", image_url, response.status_code)
            raise FetchError(FETCH_FAILED)
        
        content_type = response.headers.get("Content-Type") or DEFAULT_CONTENT_TYPE
        payload = base64.b64encode(response.content).decode("ascii")
        return f"data:{content_type};base64,{payload}"
