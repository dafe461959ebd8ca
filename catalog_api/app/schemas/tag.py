"""Pydantic schemas for tags."""

from pydantic import BaseModel, Field, validator


class TagCreate(BaseModel):
    """Schema for creating or deleting a tag by name."""

    tag_name: str = Field(..., description="Unique tag name")

    @validator("tag_name")
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Tag name must not be empty")
        return v


class TagRead(BaseModel):
    tag_name: str
