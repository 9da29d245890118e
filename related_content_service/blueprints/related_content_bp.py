"""Get related content for a record."""
import azure.functions as func
import logging
import json

from related_content_service.config import ExtensionConfig
from related_content_service.models import record_key
from related_content_service.repos import ContentApiRepository
from related_content_service.services import RelatedContentService

# Initialize blueprint
bp = func.Blueprint()

# Initialize content store client (singleton pattern)
content_repository = ContentApiRepository()

# Extension settings, read once per worker
extension_config = ExtensionConfig.from_environment()

# Content schema, loaded on first use (singleton pattern)
_content_schema = None

logger = logging.getLogger(__name__)

MAX_LIMIT = 50

LIST_OPTIONS = ('contenttypes', 'taxonomies', 'fields')


def _get_content_schema():
    """Content schema, fetched from the store once per worker."""
    global _content_schema
    if _content_schema is None:
        _content_schema = content_repository.get_schema()
        logger.info("✓ Loaded content schema")
    return _content_schema


def _error(message: str, status_code: int) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps({"error": message}),
        status_code=status_code,
        mimetype="application/json"
    )


def _parse_options(params) -> dict:
    """Translate query parameters into related content options."""
    options = {}

    if params.get('limit') is not None:
        options['limit'] = int(params.get('limit'))

    for name in LIST_OPTIONS:
        value = params.get(name)
        if value is not None:
            options[name] = [item.strip() for item in value.split(',') if item.strip()]

    if params.get('manual_field'):
        options['manual_related_content_field'] = params.get('manual_field')
    if params.get('manual_field_type'):
        options['manual_related_content_field_type'] = params.get('manual_field_type')

    return options


@bp.route(
    route="content/{contenttype}/{content_id}/related",
    methods=["GET"],
    auth_level=func.AuthLevel.ANONYMOUS
)
def get_related_content(req: func.HttpRequest) -> func.HttpResponse:
    """
    Get related content for a specific record.

    Query Parameters:
        - limit: Number of related records (1-50, default from config)
        - contenttypes: Comma separated content types to search
        - taxonomies: Comma separated taxonomies to compare (empty = none)
        - fields: Comma separated fields to compare
        - manual_field: Field holding manual relations
        - manual_field_type: array, relationlist, json or single
    """
    try:
        contenttype = req.route_params.get('contenttype')
        content_id = req.route_params.get('content_id')

        if not contenttype or not content_id:
            return _error("contenttype and content_id are required", 400)

        try:
            content_id = int(content_id)
        except ValueError:
            return _error("content_id must be an integer", 400)

        try:
            options = _parse_options(req.params)
        except ValueError:
            return _error("limit must be an integer", 400)

        if 'limit' in options and (options['limit'] < 1 or options['limit'] > MAX_LIMIT):
            return _error(f"limit must be between 1 and {MAX_LIMIT}", 400)

        key = record_key(contenttype, content_id)
        record = content_repository.get_content_by_id(key)

        if record is None:
            return _error(f"Content {key} not found", 404)

        service = RelatedContentService(
            query_service=content_repository,
            schema=_get_content_schema(),
            config=extension_config
        )
        related = service.get_related_content(record, options)

        if not related:
            return func.HttpResponse(
                json.dumps({
                    "content": key,
                    "related": [],
                    "message": "No related content found for this record"
                }),
                status_code=404,
                mimetype="application/json"
            )

        # Format response
        response = {
            "content": key,
            "count": len(related),
            "related": [item.to_dict() for item in related]
        }

        return func.HttpResponse(
            json.dumps(response, default=str),
            status_code=200,
            mimetype="application/json"
        )

    except Exception as e:
        logger.error(f"Error getting related content: {str(e)}", exc_info=True)
        return _error("Internal server error", 500)


# noinspection PyUnusedLocal
@bp.route(route="related/health", methods=["GET"])
def health_check(req: func.HttpRequest) -> func.HttpResponse:
    """Health check endpoint."""
    return func.HttpResponse(
        json.dumps({
            "status": "healthy",
            "service": "related-content-service",
            "version": "1.0.0"
        }),
        status_code=200,
        mimetype="application/json"
    )
