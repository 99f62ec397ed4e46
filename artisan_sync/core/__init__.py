"""Core: settings for the sync tool.

Single place for configuration loaded from the environment.
"""

from artisan_sync.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
