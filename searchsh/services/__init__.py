# searchsh Services Package
"""
System integration used by handlers.
"""

from .browser import BrowserService

__all__ = ["BrowserService"]
