"""
Gemini gateway services.

- proxy: userinfo and generateContent relays
"""

from .proxy import GoogleProxyService

__all__ = [
    'GoogleProxyService',
]
