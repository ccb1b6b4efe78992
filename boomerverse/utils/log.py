"""
Logging setup shared by every service
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger"""
    root = logging.getLogger()
    if any(getattr(h, "_boomerverse", False) for h in root.handlers):
        root.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._boomerverse = True
    root.addHandler(handler)
    root.setLevel(level)
