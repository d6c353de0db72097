"""Immutable configuration value objects."""
