"""
Home Lab Global Constants

Centralized location for defaults shared by configuration, CLI and domain.
"""

# Application Constants
APP_NAME = "homelab-inventory"
APP_VERSION = "0.1.0"

# Cache defaults
DEFAULT_CACHE_URL = "redis://localhost:6379"
DEFAULT_LAB_CACHE_KEY = "myLab"

# Inventory defaults
DEFAULT_LAB_NAME = "Sai Katterishetty's Home Lab"
