"""Resolve author-curated related content from the manual relation field."""
from dataclasses import dataclass
from typing import Any, List, Optional, Union
import logging

from related_content_service.models import ContentSchema, Record, record_key
from related_content_service.relations.allowed import is_empty
from related_content_service.relations.filter_builder import RELATION_LIST_TYPES, decode_relation_list
from related_content_service.repos.query_service import QueryService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArrayField:
    """Multi-select field: a list of ids of one target content type."""
    field: str
    target_contenttype: str

    def query_keys(self, value: Any) -> List[str]:
        if not isinstance(value, (list, tuple)) or not self.target_contenttype:
            return []
        return [
            record_key(self.target_contenttype, item)
            for item in value
            if not is_empty(item)
        ]


@dataclass(frozen=True)
class RelationListField:
    """Serialized list of complete ``contenttype/id`` queries."""
    field: str

    def query_keys(self, value: Any) -> List[str]:
        return decode_relation_list(value)


@dataclass(frozen=True)
class SingleField:
    """Single-select field: one id of the target content type."""
    field: str
    target_contenttype: str

    def query_keys(self, value: Any) -> List[str]:
        if is_empty(value) or isinstance(value, (list, tuple, dict)) or not self.target_contenttype:
            return []
        return [record_key(self.target_contenttype, value)]


ManualFieldSpec = Union[ArrayField, RelationListField, SingleField]


def manual_field_spec(
        record: Record,
        schema: ContentSchema,
        field: Optional[str],
        field_type: Optional[str] = None
) -> Optional[ManualFieldSpec]:
    """
    Describe how the manual relation field of the record is resolved.

    Args:
        record: Source record
        schema: Global content schema
        field: Configured manual relation field slug
        field_type: 'array', 'relationlist', 'json' or 'single' (default)

    Returns:
        ManualFieldSpec, or None when no usable field is configured
    """
    if not field:
        return None

    definition = schema.field_definition(record.contenttype, field)
    if definition is None:
        logger.warning(f"Manual relation field '{field}' is not defined on '{record.contenttype}'")
        return None

    if field_type in RELATION_LIST_TYPES:
        return RelationListField(field=field)

    if field_type == 'array':
        return ArrayField(field=field, target_contenttype=definition.target_contenttype)

    return SingleField(field=field, target_contenttype=definition.target_contenttype)


def resolve_manual_relations(
        record: Record,
        field_spec: Optional[ManualFieldSpec],
        query_service: QueryService
) -> List[Record]:
    """
    Fetch the published records the manual relation field points at.

    Args:
        record: Source record
        field_spec: How to read the manual relation field
        query_service: Content store to fetch records from

    Returns:
        Published records in the order they are stored on the field
    """
    if field_spec is None:
        return []

    keys = field_spec.query_keys(record.values.get(field_spec.field))

    related = []
    for key in keys:
        content = query_service.get_content_by_id(key)

        if content is None:
            logger.debug(f"Manual relation {key} does not exist")
            continue

        if not content.is_published:
            logger.debug(f"Manual relation {key} is not published ({content.status})")
            continue

        related.append(content)

    logger.info(f"✓ Resolved {len(related)}/{len(keys)} manual relations for {record.key}")
    return related
