"""
Inventory Domain Module

Home lab systems, their hardware and operating systems, and the
JSON snapshot that is written to the cache.
"""

from .entities import HomeLab, System, MIN_SEARCH_TERM_LENGTH
from .exceptions import InventoryError, NoSystemsFoundError, SearchTermTooShortError
from .sample import build_sample_lab
from .value_objects import CPUInfo, OperatingSystem, SystemKind, SystemType

__all__ = [
    "HomeLab",
    "System",
    "MIN_SEARCH_TERM_LENGTH",
    "SystemKind",
    "SystemType",
    "CPUInfo",
    "OperatingSystem",
    "build_sample_lab",
    # Exceptions
    "InventoryError",
    "NoSystemsFoundError",
    "SearchTermTooShortError",
]
