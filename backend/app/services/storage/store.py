"""
Key-Value Store - prefixed get/set/export/import over a JSON document

Values are kept JSON-encoded under prefixed keys, either in memory or in a
single JSON file on disk. Failures are logged and reported through the
return value (None / False); nothing is raised to the caller.
"""
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from app.core.constants import STORAGE_PREFIX

logger = logging.getLogger(__name__)


class KeyValueStore:
    """Prefixed key-value store, file-backed when a path is given"""

    def __init__(self, path: Optional[str] = None, prefix: str = STORAGE_PREFIX):
        self.path = Path(path) if path else None
        self.prefix = prefix
        self._lock = threading.Lock()
        self._data: Dict[str, str] = self._load()

    # ========================================================================
    # PERSISTENCE
    # ========================================================================

    def _load(self) -> Dict[str, str]:
        if self.path is None or not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, dict):
                logger.error(f"[STORAGE] Ignoring {self.path}: expected a JSON object")
                return {}
            return {k: v for k, v in raw.items() if isinstance(v, str)}
        except (OSError, ValueError) as e:
            logger.error(f"[STORAGE] Error reading {self.path}: {e}")
            return {}

    def _flush(self) -> bool:
        if self.path is None:
            return True
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2)
            os.replace(tmp_path, self.path)
            return True
        except OSError as e:
            logger.error(f"[STORAGE] Error writing {self.path}: {e}")
            return False

    # ========================================================================
    # KEY-VALUE OPERATIONS
    # ========================================================================

    def get_item(self, key: str) -> Optional[Any]:
        """
        Get a decoded value

        Args:
            key: Unprefixed key

        Returns:
            Decoded value, or None when missing or unreadable
        """
        raw = self._data.get(self.prefix + key)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            logger.error(f"[STORAGE] Error reading {key}: {e}")
            return None

    def set_item(self, key: str, value: Any) -> bool:
        """
        Store a value JSON-encoded under the prefixed key

        Returns:
            True on success, False when the value cannot be encoded or written
        """
        try:
            encoded = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.error(f"[STORAGE] Error writing {key}: {e}")
            return False

        with self._lock:
            previous = self._data.get(self.prefix + key)
            self._data[self.prefix + key] = encoded
            if self._flush():
                return True
            # Keep memory consistent with disk
            if previous is None:
                self._data.pop(self.prefix + key, None)
            else:
                self._data[self.prefix + key] = previous
            return False

    def remove_item(self, key: str) -> bool:
        """Remove a key (missing keys are not an error)"""
        with self._lock:
            self._data.pop(self.prefix + key, None)
            return self._flush()

    def clear_all(self) -> bool:
        """Remove every key carrying this store's prefix"""
        with self._lock:
            for key in [k for k in self._data if k.startswith(self.prefix)]:
                del self._data[key]
            return self._flush()

    def export_data(self) -> str:
        """
        Export every prefixed key as pretty JSON

        Returns:
            JSON object mapping prefixed keys to their JSON-encoded values
        """
        exported = {k: v for k, v in self._data.items() if k.startswith(self.prefix)}
        return json.dumps(exported, indent=2)

    def import_data(self, json_string: str) -> bool:
        """
        Import a previous export; only prefixed keys with string values are taken

        Returns:
            True on success, False when the document is not valid JSON or cannot be written
        """
        try:
            data = json.loads(json_string)
        except (TypeError, ValueError) as e:
            logger.error(f"[STORAGE] Error importing data: {e}")
            return False
        if not isinstance(data, dict):
            logger.error("[STORAGE] Error importing data: expected a JSON object")
            return False

        with self._lock:
            for key, value in data.items():
                if key.startswith(self.prefix) and isinstance(value, str):
                    self._data[key] = value
            return self._flush()
