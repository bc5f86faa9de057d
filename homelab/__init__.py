"""
Home Lab Inventory

Models a home lab's systems and round-trips a JSON snapshot of the lab
through a Redis cache.
"""

from .constants import APP_VERSION

__version__ = APP_VERSION
