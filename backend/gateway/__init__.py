"""
Gemini OAuth Gateway.

A small FastAPI service that keeps one Google OAuth access token fresh and
proxies userinfo and Gemini generateContent calls with it.
"""
