"""Pydantic schemas for users.  Users are managed outside the catalog."""

from pydantic import BaseModel


class UserRead(BaseModel):
    user_id: int
    name: str
