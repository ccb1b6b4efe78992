"""
Cloudinary resource search with cursor pagination
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import requests
from requests.auth import HTTPBasicAuth

from ..config import config
from .errors import UpstreamError

logger = logging.getLogger(__name__)

SEARCH_FAILED = "Cloudinary search failed"

@dataclass
class ImageAsset:
    """A hosted image as returned by the search API"""
    public_id: str
    format: str = ""
    raw: Dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_resource(cls, resource: Dict) -> "ImageAsset":
        return cls(
            public_id=resource.get("public_id", ""),
            format=resource.get("format") or "",
            raw=resource,
        )

class CloudinaryClient:
    """Client for the tag search endpoint of a single Cloudinary cloud"""
    
    def __init__(self, cloud_name: str, api_key: str, api_secret: str,
                 page_size: int = 100, session: Optional[requests.Session] = None):
        self.cloud_name = cloud_name
        self.page_size = page_size
        self._auth = HTTPBasicAuth(api_key, api_secret)
        self._session = session or requests.Session()
    
    @classmethod
    def for_service(cls, service: str, page_size: int) -> "CloudinaryClient":
        api_key, api_secret = config.cloudinary_credentials(service)
        return cls(config.CLOUDINARY_CLOUD_NAME, api_key, api_secret, page_size=page_size)
    
    @property
    def search_url(self) -> str:
        return f"https://api.cloudinary.com/v1_1/{self.cloud_name}/resources/search"
    
    def search_by_tag(self, tag: str) -> List[ImageAsset]:
        """
        Collect every image carrying a tag, following continuation cursors.
        
        Args:
            tag: Tag to filter on
            
        Returns:
            Assets in API order, pages concatenated
            
        Raises:
            UpstreamError: If any page request fails; nothing partial is returned
        """
        assets = []
        cursor = None
        pages = 0
        
        while True:
            page = self._fetch_page(tag, cursor)
            pages += 1
            assets.extend(ImageAsset.from_resource(r) for r in page.get("resources") or [])
            cursor = page.get("next_cursor")
            if not cursor:
                break
        
        logger.info("Tag %r: %d images across %d page(s)", tag, len(assets), pages)
        return assets
    
    def _fetch_page(self, tag: str, cursor: Optional[str]) -> Dict:
        payload = {
            "expression": f"tags:{tag}",
            "max_results": self.page_size,
            "resource_type": "image",
        }
        if cursor:
            payload["next_cursor"] = cursor
        
        try:
            response = self._session.post(
                self.search_url,
                json=payload,
                auth=self._auth,
                timeout=config.HTTP_TIMEOUT,
            )
        except requests.RequestException as e:
            logger.warning("Search request for tag %r failed: %s", tag, e)
            raise UpstreamError(SEARCH_FAILED) from e
        
        if not response.ok:
            logger.warning("Search for tag %r returned HTTP %s", tag, response.status_code)
            raise UpstreamError(SEARCH_FAILED)
        
        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(SEARCH_FAILED) from e
        if not isinstance(data, dict):
            raise UpstreamError(SEARCH_FAILED)
        
        resources = data.get("resources")
        if resources is not None and (
                not isinstance(resources, list)
                or not all(isinstance(r, dict) for r in resources)):
            logger.warning("Search for tag %r returned malformed resources", tag)
            raise UpstreamError(SEARCH_FAILED)
        return data
    
    def direct_link(self, asset: ImageAsset) -> str:
        """Build the public delivery URL for an asset"""
        fmt = asset.format or "jpg"
        return f"https://res.cloudinary.com/{self.cloud_name}/image/upload/{asset.public_id}.{fmt}"
