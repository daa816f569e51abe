"""
Gemini gateway module.

This module provides functionality for:
- Loading the Google OAuth 2.0 credential bundle
- Refreshing the shared access token under a lock
- Proxying userinfo and generateContent calls
"""
