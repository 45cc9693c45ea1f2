"""Hypermarket - in-memory catalog manager for a tree of product categories."""

__version__ = "0.1.0"
