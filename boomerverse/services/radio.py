"""
Radio service aggregating now playing data from the RadioKing widget API
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, NamedTuple, Optional

import requests

from ..config import config
from ..utils.http import safe_json
from ..utils.text import first_playlist_entry

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"

@dataclass
class SongInfo:
    title: str = UNKNOWN
    artist: str = UNKNOWN
    url: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Any) -> "SongInfo":
        if not isinstance(data, dict):
            return cls()
        return cls(
            title=data.get("title") or UNKNOWN,
            artist=data.get("artist") or UNKNOWN,
            url=data.get("url") or None,
        )

@dataclass
class RadioSnapshot:
    current: SongInfo = field(default_factory=SongInfo)
    next: SongInfo = field(default_factory=SongInfo)
    recent: List[SongInfo] = field(default_factory=list)
    top_tracks: List[SongInfo] = field(default_factory=list)
    stream_url: str = ""

class FieldResult(NamedTuple):
    """Outcome of one upstream field: the parsed value, or the default with ok=False"""
    value: Any
    ok: bool

def parse_current(data: Any) -> Optional[SongInfo]:
    if isinstance(data, dict) and data.get("title"):
        return SongInfo.from_payload(data)
    return None

def parse_next(data: Any) -> Optional[SongInfo]:
    if isinstance(data, list) and data and data[0]:
        return SongInfo.from_payload(data[0])
    return None

def parse_recent(data: Any) -> Optional[List[SongInfo]]:
    if isinstance(data, list):
        return [SongInfo.from_payload(d) for d in data]
    return None

def parse_top_tracks(data: Any) -> Optional[List[SongInfo]]:
    if isinstance(data, dict):
        data = data.get("items")
    if isinstance(data, list):
        return [SongInfo.from_payload(d) for d in data]
    return None

class RadioService:
    """Service building the radio page data; never raises on upstream failure"""
    
    def __init__(self, session: Optional[requests.Session] = None):
        # Fetches run on worker threads; without an injected client each
        # request gets its own short-lived session from requests.get
        self._http = session or requests
        self.endpoints = {
            "current": (config.CURRENT_TRACK_URL, parse_current, SongInfo),
            "next": (config.NEXT_TRACK_URL, parse_next, SongInfo),
            "recent": (config.RECENT_TRACKS_URL, parse_recent, list),
            "top_tracks": (config.TOP_TRACKS_URL, parse_top_tracks, list),
        }
    
    def snapshot(self) -> RadioSnapshot:
        """
        Fetch all four track endpoints in parallel and resolve the stream URL.
        
        Returns:
            RadioSnapshot with every failed field left at its default
        """
        with ThreadPoolExecutor(max_workers=len(self.endpoints)) as pool:
            futures = {
                name: pool.submit(self._fetch_field, name, url, parser, default)
                for name, (url, parser, default) in self.endpoints.items()
            }
            results = {name: future.result() for name, future in futures.items()}
        
        return RadioSnapshot(
            current=results["current"].value,
            next=results["next"].value,
            recent=results["recent"].value,
            top_tracks=results["top_tracks"].value,
            stream_url=self.resolve_stream_url(),
        )
    
    def _fetch_field(self, name: str, url: str,
                     parser: Callable[[Any], Any], default: Callable[[], Any]) -> FieldResult:
        try:
            response = self._http.get(url, timeout=config.HTTP_TIMEOUT)
        except requests.RequestException as e:
            logger.warning("Radio field %s unavailable: %s", name, e)
            return FieldResult(default(), False)
        
        value = parser(safe_json(response))
        if value is None:
            logger.warning("Radio field %s unusable (HTTP %s)", name, response.status_code)
            return FieldResult(default(), False)
        return FieldResult(value, True)
    
    def resolve_stream_url(self) -> str:
        """Resolve the playlist manifest to its first stream, or return the manifest URL"""
        manifest = config.STREAM_M3U
        try:
            response = self._http.get(manifest, timeout=config.HTTP_TIMEOUT)
        except requests.RequestException as e:
            logger.warning("Stream manifest unavailable: %s", e)
            return manifest
        
        if not response.ok:
            logger.warning("Stream manifest returned HTTP %s", response.status_code)
            return manifest
        return first_playlist_entry(response.text) or manifest
