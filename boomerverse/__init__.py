"""
Boomerverse web services: Boomer FM radio page, lore site and image roulette
"""
from .app import create_app

__version__ = "1.0.0"

__all__ = ['create_app']
