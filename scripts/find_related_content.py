"""
Print the related content of a single record.

Usage:
    python scripts/find_related_content.py pages/1

    # Override the extension settings
    python scripts/find_related_content.py entries/12 --limit 3 --taxonomies tags,categories
"""

import sys
from pathlib import Path

# Add parent directory to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

import argparse
import logging

from related_content_service.repos import ContentApiRepository
from related_content_service.services import RelatedContentService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def _split(value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [item.strip() for item in value.split(',') if item.strip()]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Find related content for a CMS record')
    parser.add_argument('key', help='Record to start from, as contenttype/id')
    parser.add_argument('--api-url', default=None, help='Content API base URL')
    parser.add_argument('--limit', type=int, default=None, help='Number of related records')
    parser.add_argument('--contenttypes', default=None, help='Comma separated content types to search')
    parser.add_argument('--taxonomies', default=None, help='Comma separated taxonomies to compare')
    parser.add_argument('--fields', default=None, help='Comma separated fields to compare')
    parser.add_argument('--manual-field', default=None, help='Field holding manual relations')
    parser.add_argument(
        '--manual-field-type',
        default=None,
        choices=['array', 'relationlist', 'json', 'single'],
        help='How the manual relation field is stored'
    )
    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> dict:
    """Turn command line arguments into related content options."""
    options = {
        'limit': args.limit,
        'contenttypes': _split(args.contenttypes),
        'taxonomies': _split(args.taxonomies),
        'fields': _split(args.fields),
        'manual_related_content_field': args.manual_field,
        'manual_related_content_field_type': args.manual_field_type,
    }
    return {key: value for key, value in options.items() if value is not None}


def main(argv: list[str] | None = None):
    """Main execution function."""
    args = parse_args(argv)

    repository = ContentApiRepository(content_api_url=args.api_url)

    record = repository.get_content_by_id(args.key)
    if record is None:
        logger.error(f"Content {args.key} not found")
        sys.exit(1)

    service = RelatedContentService(query_service=repository, schema=repository.get_schema())
    related = service.get_related_content(record, build_options(args))

    logger.info("=" * 70)
    logger.info(f"RELATED CONTENT FOR {record.key}")
    logger.info("=" * 70)

    if not related:
        logger.info("No related content found")

    for i, item in enumerate(related, 1):
        title = item.values.get('title', '')
        logger.info(f"  {i}. {item.key} {title}")

    return related


if __name__ == '__main__':
    main()
