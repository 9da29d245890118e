"""Shared test fixtures and configuration for pytest."""
import pytest
from unittest.mock import Mock
from typing import Dict, List

from related_content_service.config import ExtensionConfig
from related_content_service.models import ContentSchema, Record


# ===== Schema Fixtures =====

@pytest.fixture
def sample_schema_config() -> Dict:
    """CMS-style content type and taxonomy configuration."""
    return {
        'contenttypes': {
            'pages': {
                'fields': {
                    'title': {'type': 'text'},
                    'colour': {'type': 'select', 'searchweight': 20},
                    'related': {'type': 'select', 'values': 'pages/title'},
                    'related_list': {'type': 'select', 'values': 'pages/title', 'multiple': True},
                    'relations': {'type': 'relationlist'},
                }
            },
            'entries': {
                'fields': {
                    'title': {'type': 'text'},
                    'colour': {'type': 'select'},
                    'relations': {'type': 'relationlist', 'searchweight': 30},
                }
            },
            'showcases': {
                'fields': {
                    'title': {'type': 'text'},
                    'colour': {'type': 'text'},
                }
            },
        },
        'taxonomy': {
            'category': {},
            'tags': {'searchweight': 10},
            'groups': {'searchweight': 75},
        },
    }


@pytest.fixture
def sample_schema(sample_schema_config) -> ContentSchema:
    """Content schema built from the sample configuration."""
    return ContentSchema.from_dict(
        contenttypes=sample_schema_config['contenttypes'],
        taxonomy=sample_schema_config['taxonomy']
    )


# ===== Record Fixtures =====

@pytest.fixture
def source_record() -> Record:
    """Record to find related content for."""
    return Record(
        contenttype='pages',
        id=1,
        taxonomies={'category': ['news'], 'tags': ['python', 'cms']},
        values={
            'title': 'Source page',
            'colour': 'blue',
            'related': '5',
            'related_list': [5, 6],
            'relations': '["entries/2", "pages/3"]',
        }
    )


@pytest.fixture
def sample_candidates() -> List[Record]:
    """Candidate records in fetch order."""
    return [
        Record(contenttype='pages', id=2, taxonomies={'category': ['sports']}, values={'colour': 'red'}),
        Record(contenttype='pages', id=3, taxonomies={'category': ['news'], 'tags': ['python']}),
        Record(contenttype='entries', id=4, taxonomies={'category': ['news']}, values={'colour': 'blue'}),
        Record(contenttype='pages', id=5, taxonomies={'tags': ['cms']}),
    ]


def make_record(contenttype: str, record_id: int, status: str = 'published', **kwargs) -> Record:
    """Build a record with sensible defaults."""
    return Record(contenttype=contenttype, id=record_id, status=status, **kwargs)


@pytest.fixture
def record_factory():
    """Factory for ad-hoc records."""
    return make_record


# ===== Mock Fixtures =====

@pytest.fixture
def mock_query_service():
    """Mock QueryService with an in-memory record store."""
    store: Dict[str, Record] = {}

    mock = Mock()
    mock.store = store
    mock.get_content_by_id.side_effect = lambda key: store.get(key)
    mock.get_content.return_value = []
    return mock


@pytest.fixture
def extension_config() -> ExtensionConfig:
    """Extension configuration with only a limit set."""
    return ExtensionConfig({'limit': 5})


# ===== Configuration Fixtures =====

@pytest.fixture
def mock_config(monkeypatch):
    """Mock configuration values."""
    monkeypatch.setenv('CONTENT_API_URL', 'http://localhost:7071/api')
    monkeypatch.setenv('CONTENT_API_TIMEOUT', '10')
    monkeypatch.setenv('RELATED_CONTENT_LIMIT', '5')


@pytest.fixture(autouse=True)
def clear_related_content_env(monkeypatch):
    """Keep developer environment settings out of the tests."""
    for key in (
        'RELATED_CONTENT_LIMIT',
        'RELATED_CONTENT_MANUAL_FIELD',
        'RELATED_CONTENT_MANUAL_FIELD_TYPE',
        'RELATED_CONTENT_CONTENTTYPES',
        'RELATED_CONTENT_TAXONOMIES',
        'RELATED_CONTENT_FIELDS',
    ):
        monkeypatch.delenv(key, raising=False)


# ===== Azure Functions Fixtures =====

@pytest.fixture
def mock_http_request():
    """Mock Azure Functions HttpRequest."""
    mock_req = Mock()
    mock_req.route_params = {}
    mock_req.params = {}
    mock_req.get_json.return_value = {}
    return mock_req
