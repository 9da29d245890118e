"""Unit tests for related_content_service.models.schema."""

from related_content_service.models.schema import (
    DEFAULT_SEARCHWEIGHT,
    ContentSchema,
    FieldDefinition,
    TaxonomyDefinition,
)


class TestContentSchemaFromDict:
    """Tests for ContentSchema.from_dict."""

    def test_from_dict_parses_contenttypes_and_fields(self, sample_schema):
        """Test that content types and their fields are parsed."""
        # Assert
        assert list(sample_schema.contenttypes) == ['pages', 'entries', 'showcases']
        assert sample_schema.field_type('pages', 'relations') == 'relationlist'
        assert sample_schema.field_definition('pages', 'related').values == 'pages/title'

    def test_from_dict_parses_taxonomies(self, sample_schema):
        """Test that taxonomies are parsed."""
        assert set(sample_schema.taxonomies) == {'category', 'tags', 'groups'}

    def test_from_dict_handles_missing_config(self):
        """Test that missing configuration yields an empty schema."""
        # Act
        schema = ContentSchema.from_dict()

        # Assert
        assert schema.contenttypes == {}
        assert schema.taxonomies == {}

    def test_from_dict_uses_slug_setting(self):
        """Test that an explicit slug overrides the mapping key."""
        schema = ContentSchema.from_dict(contenttypes={'Pages': {'slug': 'pages', 'fields': {}}})

        assert 'pages' in schema.contenttypes

    def test_field_type_defaults_to_text(self):
        """Test that fields without a type are text fields."""
        schema = ContentSchema.from_dict(contenttypes={'pages': {'fields': {'body': None}}})

        assert schema.field_type('pages', 'body') == 'text'


class TestSearchweights:
    """Tests for taxonomy and field weights."""

    def test_taxonomy_weight_uses_searchweight(self, sample_schema):
        """Test configured taxonomy weights."""
        assert sample_schema.taxonomy_weight('tags') == 10
        assert sample_schema.taxonomy_weight('groups') == 75

    def test_taxonomy_weight_defaults_to_fifty(self, sample_schema):
        """Test the default taxonomy weight."""
        assert sample_schema.taxonomy_weight('category') == DEFAULT_SEARCHWEIGHT == 50
        assert sample_schema.taxonomy_weight('unknown') == 50

    def test_field_weight_uses_searchweight(self, sample_schema):
        """Test configured field weights per content type."""
        assert sample_schema.field_weight('pages', 'colour') == 20
        assert sample_schema.field_weight('entries', 'relations') == 30

    def test_field_weight_defaults_to_fifty(self, sample_schema):
        """Test the default field weight."""
        assert sample_schema.field_weight('entries', 'colour') == 50
        assert sample_schema.field_weight('unknown', 'colour') == 50

    def test_string_searchweight_is_converted(self):
        """Test that numeric strings are accepted."""
        assert TaxonomyDefinition(slug='tags', searchweight='25').weight == 25

    def test_invalid_searchweight_falls_back_to_default(self):
        """Test that non-numeric searchweights use the default."""
        assert FieldDefinition(slug='colour', searchweight='heavy').weight == 50

    def test_negative_searchweight_is_clamped_to_zero(self):
        """Test that negative searchweights weigh nothing."""
        assert TaxonomyDefinition(slug='category', searchweight=-20).weight == 0
        assert FieldDefinition(slug='colour', searchweight='-5').weight == 0


class TestFieldDefinitionTarget:
    """Tests for FieldDefinition.target_contenttype."""

    def test_target_contenttype_from_values(self):
        """Test reading the target content type from a select field."""
        assert FieldDefinition(slug='related', values='pages/title').target_contenttype == 'pages'

    def test_target_contenttype_without_field_part(self):
        """Test a values setting without a field part."""
        assert FieldDefinition(slug='related', values='entries').target_contenttype == 'entries'

    def test_target_contenttype_missing(self):
        """Test a field without values setting."""
        assert FieldDefinition(slug='related').target_contenttype == ''
