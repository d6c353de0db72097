"""Stateless chunking domain services."""
