"""
RadioAI Backend

A FastAPI backend for the RadioAI news radio application.
Provides article browsing, favorites, downloads, listening history,
and AI-powered enhancement and text-to-speech.
"""

__version__ = "1.0.0"
