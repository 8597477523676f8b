"""
Infrastructure services for the bot (server transport).
"""

from .connection import Connection, HttpConnection

__all__ = ['Connection', 'HttpConnection']
