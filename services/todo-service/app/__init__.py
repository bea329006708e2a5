"""
Todo Service.

In-memory todo record management exposed over HTTP.
"""

__version__ = "1.0.0"
