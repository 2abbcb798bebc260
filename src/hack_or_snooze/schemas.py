"""
Pydantic schemas for the payloads the Hack or Snooze API returns.

Responses are validated here before any model is built, so a payload with
the wrong shape raises PayloadError instead of producing a half-filled
object.
"""

from __future__ import annotations

from typing import Any, List, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class PayloadError(ValueError):
    """A response body was JSON but not the shape the endpoint promises."""

    def __init__(self, endpoint: str, error: ValidationError):
        self.endpoint = endpoint
        self.error = error
        super().__init__(f"Unexpected payload from {endpoint}: {error}")


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class StoryPayload(_Payload):
    author: str
    title: str
    url: str
    username: str
    story_id: str = Field(..., alias="storyId")
    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")


class UserPayload(_Payload):
    username: str
    name: str
    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")
    # signup answers may leave these out
    favorites: List[StoryPayload] = Field(default_factory=list)
    stories: List[StoryPayload] = Field(default_factory=list)


class FullUserPayload(UserPayload):
    favorites: List[StoryPayload]
    stories: List[StoryPayload]


class StoriesResponse(_Payload):
    stories: List[StoryPayload]


class StoryResponse(_Payload):
    story: StoryPayload


class SignupResponse(_Payload):
    user: UserPayload
    token: str


class LoginResponse(_Payload):
    user: FullUserPayload
    token: str


class UserResponse(_Payload):
    user: FullUserPayload


SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse(schema: Type[SchemaT], data: Any, endpoint: str) -> SchemaT:
    """Validate ``data`` against ``schema`` or raise PayloadError."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise PayloadError(endpoint, e) from e
