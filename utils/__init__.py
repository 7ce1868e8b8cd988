"""
Utils Package
-------------
Provides helper modules for configuration loading, logging setup and the prayer times API client.
"""

from .config_loader import load_config
from .logger import setup_logging
from .prayer_api import get_prayer_times

__all__ = ["load_config", "setup_logging", "get_prayer_times"]
