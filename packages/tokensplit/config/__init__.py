# tokensplit/config/__init__.py
"""
Configuration module for chunking settings.
"""

from .base import ChunkingSettings

__all__ = ["ChunkingSettings"]
