"""Related content selection: filter, manual relations, weighting and merging"""

from related_content_service.relations.allowed import (
    AllowedField,
    allowed_contenttypes,
    allowed_fields,
    allowed_taxonomies,
)
from related_content_service.relations.assembler import assemble
from related_content_service.relations.filter_builder import build_filter, build_selector
from related_content_service.relations.manual_resolver import (
    ArrayField,
    ManualFieldSpec,
    RelationListField,
    SingleField,
    manual_field_spec,
    resolve_manual_relations,
)
from related_content_service.relations.weighting import ScoredCandidate, WeightingEngine, flatten

__all__ = [
    "AllowedField",
    "ArrayField",
    "ManualFieldSpec",
    "RelationListField",
    "ScoredCandidate",
    "SingleField",
    "WeightingEngine",
    "allowed_contenttypes",
    "allowed_fields",
    "allowed_taxonomies",
    "assemble",
    "build_filter",
    "build_selector",
    "flatten",
    "manual_field_spec",
    "resolve_manual_relations",
]
