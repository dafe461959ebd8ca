"""
Pydantic schemas for study lists.

A study-list entry marks that a user saved a resource for later.  The
user comes from the request path; the body only names the resource.
"""

from pydantic import BaseModel, Field

from .resource import ResourceRead


class StudyListAdd(BaseModel):
    resource_id: int = Field(..., description="Identifier of the resource to save")


class StudyListEntryRead(BaseModel):
    user_id: int
    resource_id: int


class StudyListItem(ResourceRead):
    """A saved resource together with the user who saved it."""

    saved_by: int
