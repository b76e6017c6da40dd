"""
Detail screen view-model for the id-forwarding flow.

Only the user id travels through the route; the view-model reads it from
the entry's saved state and resolves the full record itself.
"""
from dataclasses import dataclass
from typing import Any, Optional

from config import config
from models import User
from repositories.user_repository import UserLookup, user_repository
from services.navigation import INT_ARG_PATTERN
from services.saved_state import SavedStateHandle
from utils.logger import log_debug, log_info, log_warning
from utils.observable import ObservableValue


class UserDetailState:
    """Base for the three mutually exclusive detail states."""


@dataclass(frozen=True)
class Loading(UserDetailState):
    pass


@dataclass(frozen=True)
class Found(UserDetailState):
    user: User


@dataclass(frozen=True)
class NotFound(UserDetailState):
    pass


def extract_user_id(saved_state: SavedStateHandle) -> Optional[int]:
    """Read the route id; anything that is not an integer counts as absent."""
    raw: Any = saved_state.get(config.Keys.USER_ID_ARG)
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if not INT_ARG_PATTERN.fullmatch(text):
        log_warning(f"Ignoring malformed user id {raw!r}")
        return None
    return int(text)


class UserDetailViewModel:
    def __init__(self, saved_state: SavedStateHandle, repository: UserLookup = user_repository):
        self.repository = repository
        self.user_id = extract_user_id(saved_state)
        initial = Loading() if self.user_id is not None else NotFound()
        self.state: ObservableValue[UserDetailState] = ObservableValue(initial)
        self._closed = False

    async def load(self) -> UserDetailState:
        if self.user_id is None:
            log_info("User detail opened without an id")
            return self.state.value

        user = await self.repository.fetch(self.user_id)
        if self._closed:
            log_debug(f"Discarding result for user {self.user_id}: screen closed")
            return self.state.value

        self.state.set(Found(user) if user is not None else NotFound())
        log_info(f"User {self.user_id} resolved: {type(self.state.value).__name__}")
        return self.state.value

    def close(self):
        self._closed = True
        self.state.clear_subscribers()
