"""Pydantic schemas for comments on resources."""

from pydantic import BaseModel, Field, validator


class CommentCreate(BaseModel):
    """Schema for posting a comment; the resource comes from the path."""

    comment_body: str = Field(..., description="Comment text")
    user_id: int = Field(..., description="Identifier of the commenting user")

    @validator("comment_body")
    def strip_body(cls, v: str) -> str:
        """Trim surrounding whitespace and reject blank comments."""
        v = v.strip()
        if not v:
            raise ValueError("Comment body must not be empty")
        return v


class CommentRead(BaseModel):
    comment_id: int
    comment_body: str
    user_id: int
    resource_id: int
