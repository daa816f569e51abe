"""
Version management for the Gemini OAuth Gateway
"""

# API Version
API_VERSION = "0.1.0"
