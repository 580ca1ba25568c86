"""
Storage module - prefixed key-value store backing the habit, mood and chat stores
"""
from .store import KeyValueStore

__all__ = ['KeyValueStore']
