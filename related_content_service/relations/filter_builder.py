"""Build the candidate query from the comparable taxonomies and fields."""
import json
import logging
from typing import Any, Dict, List, Sequence

from related_content_service.models import (
    ClauseGroup,
    Condition,
    ContentTypeSelector,
    FilterExpression,
    MatchKind,
)
from related_content_service.relations.allowed import AllowedField, is_empty

logger = logging.getLogger(__name__)

RELATION_LIST_TYPES = ('relationlist', 'json')


def build_selector(contenttypes: Sequence[str]) -> ContentTypeSelector:
    """Selector over the allowed content types."""
    return ContentTypeSelector(contenttypes=tuple(contenttypes))


def decode_relation_list(value: Any) -> List[str]:
    """
    Decode a stored relation list into its ``contenttype/id`` queries.

    Args:
        value: JSON array text, or an already decoded list

    Returns:
        List of query strings; empty when the value is malformed
    """
    if isinstance(value, (list, tuple)):
        decoded = value
    elif isinstance(value, str):
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            logger.warning(f"Could not decode relation list value: {value!r}")
            return []
    else:
        return []

    if not isinstance(decoded, list):
        logger.warning(f"Relation list value is not an array: {value!r}")
        return []

    return [str(item) for item in decoded if not is_empty(item)]


def _taxonomy_group(slug: str, terms: Sequence[str]) -> ClauseGroup | None:
    conditions = tuple(Condition(str(term)) for term in terms if not is_empty(term))
    if not conditions:
        return None
    return ClauseGroup(slug=slug, conditions=conditions)


def _field_group(slug: str, field: AllowedField) -> ClauseGroup | None:
    if field.type in RELATION_LIST_TYPES:
        conditions = tuple(
            Condition(query, MatchKind.CONTAINS)
            for query in decode_relation_list(field.value)
        )
    elif isinstance(field.value, (list, tuple, set)):
        conditions = tuple(Condition(str(item)) for item in field.value if not is_empty(item))
    elif is_empty(field.value):
        conditions = ()
    else:
        conditions = (Condition(str(field.value)),)

    if not conditions:
        return None
    return ClauseGroup(slug=slug, conditions=conditions)


def build_filter(
        taxonomies: Dict[str, List[str]],
        fields: Dict[str, AllowedField]
) -> FilterExpression:
    """
    Build the filter that candidates must match.

    Each taxonomy and field with values becomes one clause group; taxonomy
    groups come first, in the order given.

    Args:
        taxonomies: Allowed taxonomies of the source record
        fields: Allowed fields of the source record

    Returns:
        FilterExpression; empty when nothing is comparable
    """
    groups = []

    for slug, terms in taxonomies.items():
        group = _taxonomy_group(slug, terms)
        if group is not None:
            groups.append(group)

    for slug, field in fields.items():
        group = _field_group(slug, field)
        if group is not None:
            groups.append(group)

    expression = FilterExpression(groups=tuple(groups))
    logger.debug(f"Built filter with {len(groups)} clause groups: {expression.to_where()}")
    return expression
