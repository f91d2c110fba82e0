"""Pydantic models for the users resource."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from users_backend.shared import User


class UserRequest(BaseModel):
    """Body accepted by ``POST /users`` and ``PUT /users/{id}``.

    An ``id`` in the body is accepted but never trusted: inserts get a
    store-assigned id and updates use the path id.
    """

    model_config = ConfigDict(populate_by_name=True)

    id_: int | None = Field(default=None, alias="id")
    name: str = ""
    email: str | None = None

    def to_user(self, *, user_id: int | None = None) -> User:
        return User(id=user_id, name=self.name, email=self.email)


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: int = Field(alias="id")
    name: str
    email: str | None = None
