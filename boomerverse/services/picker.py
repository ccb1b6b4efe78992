"""
Random image selection that avoids recently shown images
"""
import random
from collections import OrderedDict
from typing import List, Optional, Sequence

from .cloudinary import ImageAsset

class RecentlyShown:
    """Bounded insertion-ordered set of public ids; oldest entries are evicted first"""
    
    def __init__(self, capacity: int = 55):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._ids = OrderedDict()
    
    def __contains__(self, public_id) -> bool:
        return public_id in self._ids
    
    def __len__(self) -> int:
        return len(self._ids)
    
    def __iter__(self):
        return iter(self._ids)
    
    def add(self, public_id: str) -> None:
        self._ids.pop(public_id, None)
        self._ids[public_id] = None
        while len(self._ids) > self.capacity:
            self._ids.popitem(last=False)
    
    def clear(self) -> None:
        self._ids.clear()

class ImagePicker:
    """Picks images uniformly at random, skipping ones in its RecentlyShown window"""
    
    def __init__(self, recent: Optional[RecentlyShown] = None, rng: Optional[random.Random] = None):
        self.recent = recent if recent is not None else RecentlyShown()
        self._rng = rng or random.Random()
    
    def pick(self, candidates: Sequence[ImageAsset]) -> ImageAsset:
        """
        Pick one image and remember it.
        
        When every candidate has been shown recently the window is cleared
        and the whole pool becomes eligible again.
        
        Raises:
            ValueError: If candidates is empty
        """
        if not candidates:
            raise ValueError("cannot pick from an empty candidate pool")
        
        available = [c for c in candidates if c.public_id not in self.recent]
        if not available:
            self.recent.clear()
            available = list(candidates)
        
        picked = self._rng.choice(available)
        self.recent.add(picked.public_id)
        return picked
    
    def pick_many(self, candidates: Sequence[ImageAsset], count: int) -> List[ImageAsset]:
        return [self.pick(candidates) for _ in range(count)]
