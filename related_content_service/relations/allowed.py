"""Which content types, taxonomies and fields take part in the comparison."""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from related_content_service.models import ContentSchema, Record


@dataclass(frozen=True)
class AllowedField:
    """Type and stored value of a comparable field on the source record."""
    type: str
    value: Any


def is_empty(value: Any) -> bool:
    """Empty values give nothing to compare on."""
    if isinstance(value, str):
        return not value.strip()
    return not value


def allowed_contenttypes(schema: ContentSchema, configured: Optional[Sequence[str]] = None) -> List[str]:
    """
    Content types to search for candidates, in schema order.

    Args:
        schema: Global content schema
        configured: Allow-list; None or empty allows every content type

    Returns:
        List of content type slugs
    """
    if not configured:
        return list(schema.contenttypes)
    return [slug for slug in schema.contenttypes if slug in configured]


def allowed_taxonomies(
        record: Record,
        schema: ContentSchema,
        configured: Optional[Sequence[str]] = None
) -> Dict[str, List[str]]:
    """
    Taxonomies of the record that may be compared, with their term slugs.

    Args:
        record: Source record
        schema: Global content schema
        configured: Allow-list; None allows all, an empty list allows none

    Returns:
        Dict mapping taxonomy slug to the record's term slugs
    """
    if not record.taxonomies:
        return {}

    if configured is None:
        comparable = set(schema.taxonomies)
    else:
        comparable = {slug for slug in schema.taxonomies if slug in configured}

    return {
        slug: list(terms)
        for slug, terms in record.taxonomies.items()
        if slug in comparable and terms
    }


def allowed_fields(
        record: Record,
        schema: ContentSchema,
        configured: Optional[Sequence[str]] = None
) -> Dict[str, AllowedField]:
    """
    Configured fields that carry a value on the record.

    Args:
        record: Source record
        schema: Global content schema
        configured: Field slugs to compare; None or empty compares none

    Returns:
        Dict mapping field slug to its type and value
    """
    fields: Dict[str, AllowedField] = {}

    for field_slug in configured or ():
        value = record.values.get(field_slug)
        if is_empty(value):
            continue

        field_type = schema.field_type(record.contenttype, field_slug)
        if field_type is None:
            continue

        fields[field_slug] = AllowedField(type=field_type, value=value)

    return fields
