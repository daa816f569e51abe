"""
Pydantic schemas for the application.
"""
from gateway.schemas import gemini

__all__ = ["gemini"]
