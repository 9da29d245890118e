"""Service classes"""

from .related_content_service import RelatedContentService

__all__ = ["RelatedContentService"]
