"""
Moods Repository - Storage access for the mood history
"""
from typing import List, Optional
import logging

from app.core import dependencies
from app.core.constants import MOODS_KEY
from app.core.exceptions import StorageError
from app.models.mood import MoodEntry

logger = logging.getLogger(__name__)


def get_all_moods() -> List[MoodEntry]:
    """
    Get the full mood history in stored (append) order

    Returns:
        List of mood entries (records that fail validation are skipped)
    """
    raw = dependencies.get_store().get_item(MOODS_KEY) or []
    if not isinstance(raw, list):
        logger.warning("[STORAGE] Ignoring stored moods: expected a list")
        return []
    entries = []
    for record in raw:
        try:
            entries.append(MoodEntry.model_validate(record))
        except ValueError as e:
            logger.warning(f"[STORAGE] Skipping malformed mood record: {e}")
    return entries


def save_all_moods(entries: List[MoodEntry]) -> None:
    """
    Replace the stored mood history

    Raises:
        StorageError: If the store reports a failed write
    """
    records = [entry.model_dump(mode="json") for entry in entries]
    if not dependencies.get_store().set_item(MOODS_KEY, records):
        raise StorageError("Failed to save mood history")


def get_mood_by_id(mood_id: str) -> Optional[MoodEntry]:
    for entry in get_all_moods():
        if entry.id == mood_id:
            return entry
    return None


def append_mood(entry: MoodEntry) -> MoodEntry:
    entries = get_all_moods()
    entries.append(entry)
    save_all_moods(entries)
    return entry


def update_mood(entry: MoodEntry) -> Optional[MoodEntry]:
    """
    Replace the stored entry with the same ID

    Returns:
        The updated entry, or None if no entry has that ID
    """
    entries = get_all_moods()
    for index, existing in enumerate(entries):
        if existing.id == entry.id:
            entries[index] = entry
            save_all_moods(entries)
            return entry
    return None


def delete_mood(mood_id: str) -> Optional[MoodEntry]:
    """
    Delete an entry

    Returns:
        The deleted entry, or None if no entry has that ID
    """
    entries = get_all_moods()
    deleted = next((e for e in entries if e.id == mood_id), None)
    if deleted is None:
        return None
    save_all_moods([e for e in entries if e.id != mood_id])
    return deleted
