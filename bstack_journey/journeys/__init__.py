"""
Journeys Package

This package contains the end-to-end scenarios run against the demo site.
"""

from .favorite_samsung import FavoriteSamsungJourney, BstackDemoLocators

__all__ = [
    'FavoriteSamsungJourney',
    'BstackDemoLocators'
]
