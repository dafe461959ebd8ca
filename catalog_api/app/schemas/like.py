"""
Pydantic schemas for like/dislike votes.

Clients send ``like_or_dislike`` as the string ``"like"`` or
``"dislike"``; the store keeps a boolean ``liked`` column.
"""

from typing import Literal

from pydantic import BaseModel, Field


class VoteCreate(BaseModel):
    """Schema for casting or changing a vote on a resource."""

    user_id: int = Field(..., description="Identifier of the voting user")
    like_or_dislike: Literal["like", "dislike"]

    @property
    def liked(self) -> bool:
        return self.like_or_dislike == "like"


class LikeRead(BaseModel):
    user_id: int
    resource_id: int
    liked: bool


class VoteTally(BaseModel):
    """Aggregate of all votes cast on one resource."""

    resource_id: int
    likes: int
    dislikes: int
