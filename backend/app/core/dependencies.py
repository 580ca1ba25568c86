"""
Dependency injection for shared clients and resources
"""
from typing import Optional
from openai import OpenAI
from app.core.config import settings
from app.services.storage.store import KeyValueStore

_store: Optional[KeyValueStore] = None


def get_openai_client() -> Optional[OpenAI]:
    """Get OpenAI client instance, or None when no API key is configured"""
    if not settings.OPENAI_API_KEY:
        return None
    return OpenAI(api_key=settings.OPENAI_API_KEY)


def get_store() -> KeyValueStore:
    """Get the shared key-value store, created on first use"""
    global _store
    if _store is None:
        _store = KeyValueStore(settings.DATA_FILE or None)
    return _store


def set_store(store: Optional[KeyValueStore]) -> None:
    """Replace the shared store (None resets it to be recreated from settings)"""
    global _store
    _store = store
