"""Repository classes"""

from related_content_service.repos.content_api_repository import ContentApiRepository
from related_content_service.repos.query_service import QueryService

__all__ = [
    "ContentApiRepository",
    "QueryService",
]
