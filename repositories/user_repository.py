import asyncio
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from config import config
from models import User
from utils.logger import log_debug


class UserLookup(ABC):
    """Asynchronous user lookup by id. Swap implementations without touching the screens."""

    @abstractmethod
    async def fetch(self, user_id: int) -> Optional[User]:
        ...


DEFAULT_USERS = (
    User(101, "Anya Smith", "anya@example.com"),
    User(202, "Ben Miller", "ben@example.com"),
    User(303, "Cathy Lee", "cathy@example.com"),
)


class InMemoryUserRepository(UserLookup):
    """
    Fixed in-memory table with a simulated network/database delay.
    Lookup is an exact id match.
    """

    def __init__(self, users: Iterable[User] = DEFAULT_USERS, delay: Optional[float] = None):
        self._users: Dict[int, User] = {u.id: u for u in users}
        self.delay = config.USER_FETCH_DELAY if delay is None else delay

    async def fetch(self, user_id: int) -> Optional[User]:
        if self.delay:
            await asyncio.sleep(self.delay)
        user = self._users.get(user_id)
        log_debug(f"UserRepository.fetch({user_id}) -> {'hit' if user else 'miss'}")
        return user

    def list_users(self) -> List[User]:
        return sorted(self._users.values(), key=lambda u: u.id)


# Singleton instance
user_repository = InMemoryUserRepository()
