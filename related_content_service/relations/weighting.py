"""Score candidates by taxonomy and field overlap with the source record."""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List
import logging

from related_content_service.models import ContentSchema, Record
from related_content_service.relations.allowed import AllowedField

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredCandidate:
    record: Record
    weight: int


def _strictly_equal(a: Any, b: Any) -> bool:
    return type(a) is type(b) and a == b


class WeightingEngine:
    """Compute similarity weights for candidates of one source record."""

    def __init__(
        self,
        schema: ContentSchema,
        taxonomies: Dict[str, List[str]],
        fields: Dict[str, AllowedField]
    ):
        """
        Initialize the weighting engine.

        Args:
            schema: Global content schema holding the searchweights
            taxonomies: Allowed taxonomies of the source record
            fields: Allowed fields of the source record
        """
        self.schema = schema
        self.fields = fields
        # Namespaced as /taxonomy/term, like the candidate terms
        self.current_terms = {
            slug: {f"/{slug}/{term}" for term in terms}
            for slug, terms in taxonomies.items()
        }

    def taxonomy_weight(self, candidate: Record) -> int:
        """
        Sum over taxonomies of shared terms times the taxonomy searchweight.

        Args:
            candidate: Record to weigh

        Returns:
            Taxonomy weight
        """
        weight = 0
        for slug, current_terms in self.current_terms.items():
            shared = current_terms.intersection(candidate.terms(slug))
            weight += len(shared) * self.schema.taxonomy_weight(slug)
        return weight

    def field_weight(self, candidate: Record) -> int:
        """
        Sum of the searchweights of fields whose type and value both match.

        Args:
            candidate: Record to weigh

        Returns:
            Field weight
        """
        weight = 0
        for slug, field in self.fields.items():
            if slug not in candidate.values:
                continue

            if self.schema.field_type(candidate.contenttype, slug) != field.type:
                continue

            if _strictly_equal(candidate.values[slug], field.value):
                weight += self.schema.field_weight(candidate.contenttype, slug)
        return weight

    def weigh(self, candidate: Record) -> ScoredCandidate:
        weight = self.taxonomy_weight(candidate) + self.field_weight(candidate)
        logger.debug(f"Weighed {candidate.key}: {weight}")
        return ScoredCandidate(record=candidate, weight=weight)

    def weigh_all(self, candidates: Iterable[Record]) -> List[ScoredCandidate]:
        """
        Weigh candidates and sort them by descending weight.

        The sort is stable, so equal weights keep their fetch order.

        Args:
            candidates: Records returned by the candidate query

        Returns:
            List of ScoredCandidate, heaviest first
        """
        scored = [self.weigh(candidate) for candidate in candidates if candidate is not None]
        return sorted(scored, key=lambda item: item.weight, reverse=True)


def flatten(scored: Iterable[ScoredCandidate]) -> List[Record]:
    """Drop the weights, keeping the order."""
    return [item.record for item in scored]
