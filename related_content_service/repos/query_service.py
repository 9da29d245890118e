"""Content store capabilities the related content lookup depends on."""
from typing import List, Optional, Protocol

from related_content_service.models import ContentTypeSelector, FilterExpression, Record


class QueryService(Protocol):
    """
    A content store that executes queries on behalf of the core.
    """

    def get_content(
            self,
            selector: ContentTypeSelector,
            filter_expression: Optional[FilterExpression] = None
    ) -> List[Record]:
        """Records of the selected content types matching the filter, in store order."""
        ...

    def get_content_by_id(self, key: str) -> Optional[Record]:
        """Single record by its ``contenttype/id`` key, or None."""
        ...
