#!/usr/bin/env python3
"""
Chunking package for text processing.

This package provides the recursive splitter and the pure domain logic it
is built on: separator presets, the chunk entity and overlap stitching.
"""
