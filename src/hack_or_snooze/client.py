from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from .api import ApiClient
from .config import SESSION_FILE
from .datamodels import Story, StoryList, User
from .session_store import FileSessionStore, SessionStore

logger = logging.getLogger("hack_or_snooze")


class HackOrSnooze:
    def __init__(
        self,
        *,
        config: Optional[Dict[str, Any]] = None,
        api: Optional[ApiClient] = None,
        store: Optional[SessionStore] = None,
    ):
        self.config = config or {}
        self.api = api if api is not None else ApiClient.from_config(self.config)
        self.store = (
            store
            if store is not None
            else FileSessionStore(self.config.get("session_file") or SESSION_FILE)
        )

    def get_stories(self) -> StoryList:
        return StoryList.get_stories(self.api)

    def add_story(self, user: User, new_story: Mapping[str, str]) -> Story:
        return StoryList().add_story(self.api, user, new_story)

    def create_user(self, username: str, password: str, name: str) -> User:
        return User.create(self.api, self.store, username, password, name)

    def login(self, username: str, password: str) -> User:
        return User.login(self.api, self.store, username, password)

    def stay_logged_in(self) -> Optional[User]:
        return User.stay_logged_in(self.api, self.store)

    def add_favorite(self, user: User, story_id: str) -> Any:
        return user.add_favorite(self.api, story_id)

    def remove_favorite(self, user: User, story_id: str) -> Any:
        return user.remove_favorite(self.api, story_id)

    def logout(self) -> None:
        User.logout(self.store)
        logger.info("Logged out")
