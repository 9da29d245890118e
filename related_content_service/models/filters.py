"""Structured filter description handed to the query service."""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from related_content_service.models.record import PUBLISHED

# Separators of the CMS where-syntax: groups are AND-ed, alternatives OR-ed
GROUP_SEPARATOR = ' ||| '
ALTERNATIVE_SEPARATOR = ' || '


class MatchKind(str, Enum):
    EXACT = 'exact'
    CONTAINS = 'contains'


@dataclass(frozen=True)
class Condition:
    """One literal to match a slug against."""
    value: str
    kind: MatchKind = MatchKind.EXACT

    def to_query_value(self) -> str:
        if self.kind is MatchKind.CONTAINS:
            return f"%{self.value}%"
        return self.value


@dataclass(frozen=True)
class ClauseGroup:
    """Disjunction of conditions on a single taxonomy or field slug."""
    slug: str
    conditions: Tuple[Condition, ...]


@dataclass(frozen=True)
class FilterExpression:
    """
    Conjunction of clause groups plus an implicit status condition.

    An empty expression means there is nothing to compare on, and no
    candidates should be fetched at all.
    """
    groups: Tuple[ClauseGroup, ...] = ()
    status: str = PUBLISHED

    @property
    def is_empty(self) -> bool:
        return not self.groups

    def to_where(self) -> Dict[str, str]:
        """
        Render the expression in the CMS where-syntax.

        Returns:
            {'tax_a ||| field_b': 'x || y ||| z', 'status': 'published'}
        """
        if self.is_empty:
            return {'status': self.status}

        key = GROUP_SEPARATOR.join(group.slug for group in self.groups)
        value = GROUP_SEPARATOR.join(
            ALTERNATIVE_SEPARATOR.join(condition.to_query_value() for condition in group.conditions)
            for group in self.groups
        )
        return {key: value, 'status': self.status}


@dataclass(frozen=True)
class ContentTypeSelector:
    """The content types to search: one name, or a set union over several."""
    contenttypes: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.contenttypes

    def __str__(self):
        if len(self.contenttypes) == 1:
            return self.contenttypes[0]
        if not self.contenttypes:
            return ''
        return f"({','.join(self.contenttypes)})"
