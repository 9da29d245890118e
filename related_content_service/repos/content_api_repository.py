"""Content store backed by the CMS JSON API"""
from typing import Dict, List, Optional
import json
import logging
import requests

from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from related_content_service.config import get_content_api_timeout, get_content_api_url
from related_content_service.models import ContentSchema, ContentTypeSelector, FilterExpression, Record

logger = logging.getLogger(__name__)


class ContentApiRepository:
    """Fetch records and schema from the CMS content API.

    Queries are executed by the CMS; this class only sends the selector and
    the rendered filter along.
    """

    def __init__(self, content_api_url: Optional[str] = None, timeout: Optional[float] = None):
        self.content_api_url = (content_api_url or get_content_api_url()).rstrip('/')
        self.timeout = timeout if timeout is not None else get_content_api_timeout()

        # Configure session with retries
        self.session = requests.Session()
        retry_strategy = Retry(
            total=3,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504]
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        # noinspection HttpUrlsUsage
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    # ===== RECORDS =====

    def get_content_by_id(self, key: str) -> Optional[Record]:
        """
        Fetch a single record by its contenttype/id key.

        Args:
            key: Record identity, e.g. 'pages/5'

        Returns:
            Record, or None when it does not exist
        """
        url = f"{self.content_api_url}/content/{key.strip('/')}"
        response = self.session.get(url, timeout=self.timeout)

        if response.status_code == 404:
            return None

        response.raise_for_status()

        record = Record.from_dict(response.json())
        if record is None:
            logger.warning(f"Content API returned no usable record for {key}")
        return record

    def get_content(
            self,
            selector: ContentTypeSelector,
            filter_expression: Optional[FilterExpression] = None
    ) -> List[Record]:
        """
        Fetch the records matching a selector and filter.

        Args:
            selector: Content types to search
            filter_expression: Conditions candidates must match

        Returns:
            List of records in the order the CMS returned them
        """
        if selector.is_empty:
            return []

        where = filter_expression.to_where() if filter_expression else FilterExpression().to_where()
        params = {
            'contenttypes': str(selector),
            'where': json.dumps(where),
        }

        url = f"{self.content_api_url}/content"
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()

        results = self._parse_results(response.json())
        logger.info(f"✓ Fetched {len(results)} records for {selector}")
        return results

    def _parse_results(self, payload: Dict) -> List[Record]:
        items = payload.get('results', []) if isinstance(payload, dict) else payload

        records = []
        for item in items or []:
            record = Record.from_dict(item)
            if record is None:
                logger.warning(f"Skipping unparseable record in result set: {item!r}")
                continue
            records.append(record)
        return records

    # ===== SCHEMA =====

    def get_schema(self) -> ContentSchema:
        """Fetch the content type and taxonomy configuration."""
        url = f"{self.content_api_url}/schema"
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()

        data = response.json()
        return ContentSchema.from_dict(
            contenttypes=data.get('contenttypes'),
            taxonomy=data.get('taxonomy')
        )
