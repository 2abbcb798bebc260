from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from .api import ApiClient
from .schemas import (
    LoginResponse,
    SignupResponse,
    StoriesResponse,
    StoryPayload,
    StoryResponse,
    UserPayload,
    UserResponse,
    parse,
)
from .session_store import Credentials, SessionStore

logger = logging.getLogger("hack_or_snooze")


# --- Data models ---
@dataclass(frozen=True)
class Story:
    author: str
    title: str
    url: str
    username: str
    story_id: str
    created_at: str
    updated_at: str

    @classmethod
    def from_payload(cls, payload: StoryPayload) -> "Story":
        return cls(
            author=payload.author,
            title=payload.title,
            url=payload.url,
            username=payload.username,
            story_id=payload.story_id,
            created_at=payload.created_at,
            updated_at=payload.updated_at,
        )


@dataclass
class StoryList:
    stories: List[Story] = field(default_factory=list)

    @classmethod
    def get_stories(cls, api: ApiClient) -> "StoryList":
        """Fetch the global feed as a fresh snapshot, in server order."""
        data = parse(StoriesResponse, api.get("stories"), "GET /stories")
        return cls([Story.from_payload(s) for s in data.stories])

    def add_story(
        self, api: ApiClient, user: "User", new_story: Mapping[str, str]
    ) -> Story:
        """Post ``new_story`` (title and url) as ``user``.

        Returns the story the server created. ``self.stories`` is left
        untouched; re-fetch or append it yourself.
        """
        body = {
            "token": user.login_token,
            "story": {
                "author": user.name,
                "title": new_story["title"],
                "url": new_story["url"],
            },
        }
        data = parse(StoryResponse, api.post("stories", json=body), "POST /stories")
        logger.info("Added story %s for %s", data.story.story_id, user.username)
        return Story.from_payload(data.story)


@dataclass
class User:
    username: str
    name: str
    created_at: str
    updated_at: str
    login_token: str = ""
    favorites: List[Story] = field(default_factory=list)
    own_stories: List[Story] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: UserPayload, token: str) -> "User":
        return cls(
            username=payload.username,
            name=payload.name,
            created_at=payload.created_at,
            updated_at=payload.updated_at,
            login_token=token,
            favorites=[Story.from_payload(s) for s in payload.favorites],
            own_stories=[Story.from_payload(s) for s in payload.stories],
        )

    @classmethod
    def create(
        cls, api: ApiClient, store: SessionStore, username: str, password: str, name: str
    ) -> "User":
        body = {"user": {"username": username, "password": password, "name": name}}
        data = parse(SignupResponse, api.post("signup", json=body), "POST /signup")
        # signup never carries favorites or stories
        user = cls(
            username=data.user.username,
            name=data.user.name,
            created_at=data.user.created_at,
            updated_at=data.user.updated_at,
            login_token=data.token,
        )
        store.save(Credentials(token=data.token, username=user.username))
        return user

    @classmethod
    def login(
        cls, api: ApiClient, store: SessionStore, username: str, password: str
    ) -> "User":
        body = {"user": {"username": username, "password": password}}
        data = parse(LoginResponse, api.post("login", json=body), "POST /login")
        user = cls.from_payload(data.user, data.token)
        store.save(Credentials(token=data.token, username=user.username))
        return user

    @classmethod
    def stay_logged_in(cls, api: ApiClient, store: SessionStore) -> Optional["User"]:
        """Rebuild the stored user with a live request.

        Returns None if nothing is stored. A token the server no longer
        accepts fails like any other request.
        """
        credentials = store.load()
        if credentials is None:
            logger.debug("No stored session to restore")
            return None
        resp = api.get("users", credentials.username, params={"token": credentials.token})
        data = parse(UserResponse, resp, "GET /users/:username")
        return cls.from_payload(data.user, credentials.token)

    @staticmethod
    def logout(store: SessionStore) -> None:
        store.clear()

    def add_favorite(self, api: ApiClient, story_id: str) -> Any:
        return api.post(
            "users", self.username, "favorites", story_id,
            json={"token": self.login_token},
        )

    def remove_favorite(self, api: ApiClient, story_id: str) -> Any:
        return api.delete(
            "users", self.username, "favorites", story_id,
            json={"token": self.login_token},
        )
