"""
Configuration

Usage:
    from codegraph_globals.config import settings

    names = settings.names
"""

from codegraph_globals.config.settings import GlobalsSettings, settings

__all__ = ["GlobalsSettings", "settings"]
