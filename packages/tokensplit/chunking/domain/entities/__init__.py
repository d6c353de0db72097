"""Chunk entities."""
