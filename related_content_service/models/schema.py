"""Global content schema: content types, their fields and taxonomies."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

DEFAULT_SEARCHWEIGHT = 50


def _searchweight(value: Any, context: str) -> int:
    if value is None:
        return DEFAULT_SEARCHWEIGHT
    try:
        weight = int(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid searchweight {value!r} for {context}, using {DEFAULT_SEARCHWEIGHT}")
        return DEFAULT_SEARCHWEIGHT

    # Weights are never negative
    if weight < 0:
        logger.warning(f"Negative searchweight {value!r} for {context}, using 0")
        return 0
    return weight


@dataclass(frozen=True)
class FieldDefinition:
    """A field of a content type.

    ``values`` is the select-field target (e.g. ``"pages/title"``) used to
    find the content type that manual relations point at.
    """
    slug: str
    type: str = 'text'
    searchweight: Optional[Any] = None
    values: Optional[str] = None

    @property
    def weight(self) -> int:
        return _searchweight(self.searchweight, f"field '{self.slug}'")

    @property
    def target_contenttype(self) -> str:
        if not isinstance(self.values, str):
            return ''
        return self.values.split('/')[0].strip()


@dataclass(frozen=True)
class ContentTypeDefinition:
    slug: str
    fields: Dict[str, FieldDefinition] = field(default_factory=dict)


@dataclass(frozen=True)
class TaxonomyDefinition:
    slug: str
    searchweight: Optional[Any] = None

    @property
    def weight(self) -> int:
        return _searchweight(self.searchweight, f"taxonomy '{self.slug}'")


@dataclass(frozen=True)
class ContentSchema:
    """
    Read-only view of the CMS configuration for content types and taxonomies.

    Doubles as the taxonomy and field weight tables: any taxonomy or field
    without a ``searchweight`` weighs ``DEFAULT_SEARCHWEIGHT``.
    """
    contenttypes: Dict[str, ContentTypeDefinition] = field(default_factory=dict)
    taxonomies: Dict[str, TaxonomyDefinition] = field(default_factory=dict)

    def field_definition(self, contenttype: str, field_slug: str) -> Optional[FieldDefinition]:
        definition = self.contenttypes.get(contenttype)
        if definition is None:
            return None
        return definition.fields.get(field_slug)

    def field_type(self, contenttype: str, field_slug: str) -> Optional[str]:
        definition = self.field_definition(contenttype, field_slug)
        return definition.type if definition else None

    def taxonomy_weight(self, taxonomy: str) -> int:
        definition = self.taxonomies.get(taxonomy)
        return definition.weight if definition else DEFAULT_SEARCHWEIGHT

    def field_weight(self, contenttype: str, field_slug: str) -> int:
        definition = self.field_definition(contenttype, field_slug)
        return definition.weight if definition else DEFAULT_SEARCHWEIGHT

    @classmethod
    def from_dict(cls, contenttypes: Optional[Dict] = None, taxonomy: Optional[Dict] = None) -> 'ContentSchema':
        """
        Build a schema from CMS-style configuration mappings.

        Args:
            contenttypes: {slug: {'fields': {field_slug: {'type', 'searchweight', 'values'}}}}
            taxonomy: {slug: {'searchweight': int}}

        Returns:
            ContentSchema
        """
        parsed_contenttypes = {}
        for ct_slug, ct_config in (contenttypes or {}).items():
            ct_config = ct_config or {}
            fields = {
                field_slug: FieldDefinition(
                    slug=field_slug,
                    type=(field_config or {}).get('type', 'text'),
                    searchweight=(field_config or {}).get('searchweight'),
                    values=(field_config or {}).get('values'),
                )
                for field_slug, field_config in (ct_config.get('fields') or {}).items()
            }
            slug = ct_config.get('slug', ct_slug)
            parsed_contenttypes[slug] = ContentTypeDefinition(slug=slug, fields=fields)

        parsed_taxonomies = {
            tax_slug: TaxonomyDefinition(
                slug=tax_slug,
                searchweight=(tax_config or {}).get('searchweight'),
            )
            for tax_slug, tax_config in (taxonomy or {}).items()
        }

        return cls(contenttypes=parsed_contenttypes, taxonomies=parsed_taxonomies)
