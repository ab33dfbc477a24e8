# searchsh Package
"""
A command line search multi-tool.

Provides a common interface for local file and full text searches
(grep, find, locate, ack, ag, rg, mdfind) as well as web searches.
"""

__version__ = "0.1.4"
