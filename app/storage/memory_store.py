import threading
import uuid
from typing import Any, Dict, Optional


class MemoryStore:
    """Process-local key-value store. Contents are lost on restart."""

    def __init__(self):
        self._data: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def put(self, value: Any) -> str:
        """Store a value under a freshly generated id and return the id."""
        key = str(uuid.uuid4())
        with self._lock:
            self._data[key] = value
        return key

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._data.get(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
