"""
Configuration management for the Boomerverse web services
"""
import os

RADIOKING_WIDGET = "https://api.radioking.io/widget/radio/boomerfm-web3/track"

class Config:
    # Server Configuration
    HOST = os.environ.get("BOOMERVERSE_HOST", "0.0.0.0")
    PORT = int(os.environ.get("BOOMERVERSE_PORT", "5055"))
    LOG_LEVEL = os.environ.get("BOOMERVERSE_LOG_LEVEL", "INFO")

    # Outbound HTTP
    HTTP_TIMEOUT = 10

    # Cloudinary (cloud name shared by every service)
    CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME", "")
    CLOUDINARY_API_KEY = os.environ.get("CLOUDINARY_API_KEY", "")
    CLOUDINARY_API_SECRET = os.environ.get("CLOUDINARY_API_SECRET", "")
    CONTENTBOB_CLOUDINARY_API_KEY = os.environ.get("CONTENTBOB_CLOUDINARY_API_KEY", "")
    CONTENTBOB_CLOUDINARY_API_SECRET = os.environ.get("CONTENTBOB_CLOUDINARY_API_SECRET", "")

    # Telegram
    TELEGRAM_TOKEN = os.environ.get("TELEGRAM_TOKEN", "")
    TELEGRAM_REPLY = "Hello from Boomerverse Lore!"

    # RadioKing widget API
    CURRENT_TRACK_URL = f"{RADIOKING_WIDGET}/current"
    NEXT_TRACK_URL = f"{RADIOKING_WIDGET}/next?limit=1"
    RECENT_TRACKS_URL = f"{RADIOKING_WIDGET}/ckoi?limit=3"
    TOP_TRACKS_URL = f"{RADIOKING_WIDGET}/top?limit=5"
    STREAM_M3U = os.environ.get("STREAM_M3U", "https://api.radioking.io/radio/736730/listen.m3u")

    # Image search
    LORE_PAGE_SIZE = 100
    ROULETTE_PAGE_SIZE = 500

    # Random picker
    RECENT_CAPACITY = 55
    DEFAULT_MODE = "engage"
    MEME_PICKS = 2
    MODE_TAGS = {
        "engage": "engage",
        "meme": "meme template",
        "profiles": "profiles",
    }

    SERVICES = ("radio", "lore", "roulette")

    def cloudinary_credentials(self, service: str) -> tuple:
        """Return the (api_key, api_secret) pair a service signs searches with"""
        if service == "roulette":
            return self.CONTENTBOB_CLOUDINARY_API_KEY, self.CONTENTBOB_CLOUDINARY_API_SECRET
        return self.CLOUDINARY_API_KEY, self.CLOUDINARY_API_SECRET

# Global config instance
config = Config()
