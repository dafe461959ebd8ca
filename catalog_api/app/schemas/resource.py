"""
Pydantic schemas for learning resources.

A resource is a link submitted by a user together with the
submitter's notes about it: what kind of content it is, which build
stage it helps with and whether they recommend it.  Apart from the
owner reference, fields are accepted as given.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ResourceCreate(BaseModel):
    """Schema for submitting a new resource."""

    resource_name: str = Field(..., description="Title of the resource")
    author_name: Optional[str] = Field(None, description="Who wrote or produced it")
    url: Optional[str] = Field(None, description="Where the resource lives")
    description: Optional[str] = None
    content_type: Optional[str] = Field(None, description="e.g. video, article, course")
    build_stage: Optional[str] = Field(None, description="Stage of a project it is useful for")
    opinion: Optional[str] = Field(None, description="Submitter's recommendation")
    opinion_reason: Optional[str] = None
    user_id: int = Field(..., description="Identifier of the submitting user")


class ResourceRead(BaseModel):
    """Schema for reading a resource from the API."""

    resource_id: int
    resource_name: str
    author_name: Optional[str]
    url: Optional[str]
    description: Optional[str]
    content_type: Optional[str]
    build_stage: Optional[str]
    opinion: Optional[str]
    opinion_reason: Optional[str]
    user_id: int
    time_date: str
