"""Response shapes shared by several entities."""

from pydantic import BaseModel


class DeleteConfirmation(BaseModel):
    """Body returned after a successful delete."""

    status: str = "success"
    message: str
