"""Unit tests for related_content_service.models.filters."""

from related_content_service.models.filters import (
    ClauseGroup,
    Condition,
    ContentTypeSelector,
    FilterExpression,
    MatchKind,
)


class TestCondition:
    """Tests for Condition."""

    def test_exact_condition_value(self):
        """Test that exact conditions render unchanged."""
        assert Condition('news').to_query_value() == 'news'

    def test_contains_condition_is_wrapped(self):
        """Test that substring conditions are wrapped in wildcards."""
        assert Condition('pages/1', MatchKind.CONTAINS).to_query_value() == '%pages/1%'


class TestFilterExpression:
    """Tests for FilterExpression."""

    def test_empty_expression(self):
        """Test an expression without groups."""
        # Act
        expression = FilterExpression()

        # Assert
        assert expression.is_empty is True
        assert expression.to_where() == {'status': 'published'}

    def test_to_where_joins_groups_and_alternatives(self):
        """Test rendering groups in the CMS where-syntax."""
        # Arrange
        expression = FilterExpression(groups=(
            ClauseGroup('category', (Condition('news'), Condition('sports'))),
            ClauseGroup('relations', (Condition('pages/1', MatchKind.CONTAINS),)),
        ))

        # Act
        where = expression.to_where()

        # Assert
        assert expression.is_empty is False
        assert where == {
            'category ||| relations': 'news || sports ||| %pages/1%',
            'status': 'published',
        }


class TestContentTypeSelector:
    """Tests for ContentTypeSelector."""

    def test_single_contenttype(self):
        """Test that a single content type renders as its name."""
        assert str(ContentTypeSelector(('pages',))) == 'pages'

    def test_multiple_contenttypes(self):
        """Test that several content types render as a set union."""
        assert str(ContentTypeSelector(('pages', 'entries'))) == '(pages,entries)'

    def test_empty_selector(self):
        """Test an empty selector."""
        selector = ContentTypeSelector()

        assert selector.is_empty is True
        assert str(selector) == ''
