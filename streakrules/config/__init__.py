# Config Package
"""
Engine configuration loaded from STREAKRULES_* environment variables.
"""

from streakrules.config.settings import EngineSettings, get_settings, reload_settings

__all__ = ["EngineSettings", "get_settings", "reload_settings"]
