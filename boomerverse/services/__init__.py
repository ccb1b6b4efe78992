"""
Service layer for the Boomerverse web services
"""
from .errors import ServiceError, UpstreamError, FetchError
from .cloudinary import CloudinaryClient, ImageAsset
from .picker import ImagePicker, RecentlyShown
from .radio import RadioService, RadioSnapshot, SongInfo
from .images import ImageFetcher
from .telegram import TelegramNotifier

__all__ = [
    'ServiceError', 'UpstreamError', 'FetchError',
    'CloudinaryClient', 'ImageAsset',
    'ImagePicker', 'RecentlyShown',
    'RadioService', 'RadioSnapshot', 'SongInfo',
    'ImageFetcher', 'TelegramNotifier',
]
