"""Content, schema and filter models"""

from related_content_service.models.filters import (
    ClauseGroup,
    Condition,
    ContentTypeSelector,
    FilterExpression,
    MatchKind,
)
from related_content_service.models.record import PUBLISHED, Record, record_key
from related_content_service.models.schema import (
    DEFAULT_SEARCHWEIGHT,
    ContentSchema,
    ContentTypeDefinition,
    FieldDefinition,
    TaxonomyDefinition,
)

__all__ = [
    "ClauseGroup",
    "Condition",
    "ContentSchema",
    "ContentTypeDefinition",
    "ContentTypeSelector",
    "DEFAULT_SEARCHWEIGHT",
    "FieldDefinition",
    "FilterExpression",
    "MatchKind",
    "PUBLISHED",
    "Record",
    "TaxonomyDefinition",
    "record_key",
]
