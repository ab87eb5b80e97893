"""
Gateways package - Infrastructure Layer

Clients for third-party HTTP APIs.
"""

from .twitter_updates import TwitterUpdates

__all__ = ["TwitterUpdates"]
