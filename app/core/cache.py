import threading
from typing import Dict

from app.models import Profile


class ProfileCache:
    """Last successfully assembled Profile per username, held in memory only."""

    def __init__(self):
        self._entries: Dict[str, Profile] = {}
        self._lock = threading.Lock()

    def get(self, username: str) -> Profile | None:
        with self._lock:
            return self._entries.get(username)

    def put(self, username: str, profile: Profile) -> None:
        with self._lock:
            self._entries[username] = profile

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, username: object) -> bool:
        with self._lock:
            return username in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
