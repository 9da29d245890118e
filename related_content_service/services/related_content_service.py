"""Service for related content of a CMS record."""
from typing import Any, Dict, List, Optional
import logging

from related_content_service.config import ExtensionConfig, RelatedContentSettings
from related_content_service.models import ContentSchema, Record
from related_content_service.relations import (
    WeightingEngine,
    allowed_contenttypes,
    allowed_fields,
    allowed_taxonomies,
    assemble,
    build_filter,
    build_selector,
    flatten,
    manual_field_spec,
    resolve_manual_relations,
)
from related_content_service.repos import QueryService

logger = logging.getLogger(__name__)


class RelatedContentService:
    """
    Service for related content.
    Combines manually linked records with records sharing taxonomy terms
    or field values with the source record.
    """

    def __init__(
            self,
            query_service: QueryService,
            schema: ContentSchema,
            config: Optional[ExtensionConfig] = None
    ):
        """
        Initialize the related content service.

        Args:
            query_service: Content store to fetch records and candidates from
            schema: Content type and taxonomy configuration
            config: Global extension settings (None = read from environment)
        """
        self.query_service = query_service
        self.schema = schema
        self.config = config if config is not None else ExtensionConfig.from_environment()

    def get_related_content(self, record: Record, options: Optional[Dict[str, Any]] = None) -> List[Record]:
        """
        Get the records related to a record.

        Args:
            record: Record to find related content for
            options: Per-request overrides of the extension settings

        Returns:
            Manual relations first, then automatic ones by descending weight
        """
        settings = RelatedContentSettings.resolve(self.config, options)

        if settings.limit <= 0:
            return []

        manual = self.get_manual_related_content(record, settings)

        auto: List[Record] = []
        if len(manual) < settings.limit:
            auto = self.get_auto_related_content(record, settings)
        else:
            logger.info(f"Manual relations fill the limit of {settings.limit}, skipping automatic lookup")

        related = assemble(manual, auto, record, settings.limit)
        logger.info(f"✓ Found {len(related)} related records for {record.key}")
        return related

    def get_manual_related_content(self, record: Record, settings: RelatedContentSettings) -> List[Record]:
        """Published records linked through the manual relation field."""
        field_spec = manual_field_spec(record, self.schema, settings.manual_field, settings.manual_field_type)
        return resolve_manual_relations(record, field_spec, self.query_service)

    def get_auto_related_content(self, record: Record, settings: RelatedContentSettings) -> List[Record]:
        """
        Records sharing taxonomy terms or field values with the record.

        Args:
            record: Source record
            settings: Resolved request settings

        Returns:
            Candidates sorted by descending weight
        """
        selector = build_selector(allowed_contenttypes(self.schema, settings.contenttypes))
        taxonomies = allowed_taxonomies(record, self.schema, settings.taxonomies)
        fields = allowed_fields(record, self.schema, settings.fields)

        filter_expression = build_filter(taxonomies, fields)

        # Nothing to compare on, or nowhere to look
        if filter_expression.is_empty or selector.is_empty:
            logger.info(f"No comparable taxonomies or fields for {record.key}, skipping automatic lookup")
            return []

        candidates = self.query_service.get_content(selector, filter_expression)

        engine = WeightingEngine(self.schema, taxonomies, fields)
        scored = engine.weigh_all(candidates)

        logger.info(f"Weighed {len(scored)} candidates for {record.key}")
        return flatten(scored)
