# src/stackmind/db/__init__.py
"""Database configuration and utilities."""

from .store import BlogStore, connect_store, get_store

__all__ = ["BlogStore", "connect_store", "get_store"]
