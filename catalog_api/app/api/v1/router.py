"""
Top-level router for version 1 of the API.

This router aggregates the entity routers under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import comments, likes, resources, study_list, tags, users

router = APIRouter()

router.include_router(resources.router, prefix="/resources", tags=["resources"])
router.include_router(comments.router, prefix="/resources", tags=["comments"])
router.include_router(likes.router, prefix="/resources", tags=["likes"])
router.include_router(tags.router, prefix="/tags", tags=["tags"])
router.include_router(users.router, prefix="/users", tags=["users"])
# The web client creates entries through ``study_list`` but reads and
# deletes through ``study-list``.  Both spellings expose the same routes.
router.include_router(
    study_list.router, prefix="/users/{user_id}/study-list", tags=["study-list"]
)
router.include_router(
    study_list.router,
    prefix="/users/{user_id}/study_list",
    tags=["study-list"],
    include_in_schema=False,
)
