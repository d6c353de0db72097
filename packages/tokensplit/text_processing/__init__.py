"""Tokenizer adapters and split performance metrics."""
