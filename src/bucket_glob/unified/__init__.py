"""Glob search across storage backends."""

from .search import find_matches, search

__all__ = ["find_matches", "search"]
