from typing import Dict, List, Optional

from src.domain.models import UserProfile


class UserCache:
    """
    In-memory store of merged user records for the current session.
    Entries are never replaced or evicted.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, UserProfile] = {}

    def __contains__(self, username: str) -> bool:
        return username in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, username: str) -> Optional[UserProfile]:
        return self._entries.get(username)

    def add(self, username: str, profile: UserProfile) -> UserProfile:
        """Stores profile under username unless the key exists. Returns the stored record."""
        return self._entries.setdefault(username, profile)

    def values(self) -> List[UserProfile]:
        return list(self._entries.values())
