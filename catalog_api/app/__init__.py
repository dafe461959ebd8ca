"""
Application package initializer.

The catalog is organised by entity: resources, comments, likes, tags,
study lists and users.  Each entity has a schema module, a service
holding its SQL and an APIRouter under ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
