"""Content record as handed out by the CMS."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

PUBLISHED = 'published'


def record_key(contenttype: str, record_id: Any) -> str:
    """Identity key used for every equality and deduplication check."""
    return f"{contenttype}/{record_id}"


@dataclass
class Record:
    """A single content item.

    Taxonomies map a taxonomy slug to the ordered term slugs assigned to
    the record. Values map a field slug to the stored field value.
    """
    contenttype: str
    id: int
    status: Optional[str] = PUBLISHED
    taxonomies: Dict[str, List[str]] = field(default_factory=dict)
    values: Dict[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return record_key(self.contenttype, self.id)

    @property
    def is_published(self) -> bool:
        return self.status == PUBLISHED

    def terms(self, taxonomy: str) -> List[str]:
        """Term slugs namespaced as ``/taxonomy/term``."""
        return [f"/{taxonomy}/{term}" for term in self.taxonomies.get(taxonomy, [])]

    @classmethod
    def from_dict(cls, data: Dict) -> Optional['Record']:
        """
        Build a record from its JSON representation.

        Args:
            data: Dict with contenttype, id, status, taxonomy and values keys

        Returns:
            Record, or None when the payload has no usable identity or shape
        """
        if not isinstance(data, dict):
            return None

        contenttype = data.get('contenttype')
        record_id = data.get('id')
        if not contenttype or record_id is None:
            return None

        try:
            record_id = int(record_id)
        except (TypeError, ValueError):
            return None

        taxonomy = data.get('taxonomy') or {}
        values = data.get('values') or {}
        if not isinstance(taxonomy, dict) or not isinstance(values, dict):
            return None

        taxonomies = {
            slug: [str(term) for term in terms]
            for slug, terms in taxonomy.items()
            if isinstance(terms, list)
        }

        # A payload without status is not published
        return cls(
            contenttype=str(contenttype),
            id=record_id,
            status=data.get('status'),
            taxonomies=taxonomies,
            values=dict(values),
        )

    def to_dict(self) -> Dict:
        return {
            'contenttype': self.contenttype,
            'id': self.id,
            'status': self.status,
            'taxonomy': {slug: list(terms) for slug, terms in self.taxonomies.items()},
            'values': dict(self.values),
        }

    def __repr__(self):
        return f"<Record(key='{self.key}', status='{self.status}')>"
