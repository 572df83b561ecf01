"""
Rest module: single object fetch, cursor based paging and auto-paginating
enumeration over any registered resource
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple
from urllib.parse import quote

from . import api
from .context import CallerContext, require_context
from .dates import check_date
from .errors import TransportError, ValidationError
from .resource import ResourceDescriptor

logger = logging.getLogger(__name__)

MAX_PAGE_LIMIT = 100
DATE_FILTERS = ('after', 'before')


class Rest:
    """
    Generic resource operations on top of a transport

    The transport must provide ``request(method, path, query, context)``
    returning an object with a decoded ``raw_data`` body, and must raise the
    errors of ``starkbank_adapter.errors`` for not found, unauthorised and
    network failures.
    """

    def __init__(self, transport):
        self.transport = transport

    def get_id(self, descriptor: ResourceDescriptor, id: str, context: CallerContext) -> Any:
        """
        Retrieve a single object by id

        Args:
            descriptor: Resource to fetch
            id: Object unique id
            context: Caller context used for the request

        Returns:
            Hydrated object

        Raises:
            ValidationError: If the id is empty
            NotFound: If the API has no object with that id
            AuthorizationError: If the context is missing or rejected
            TransportError: On network failures
        """
        if not isinstance(id, str) or not id.strip():
            raise ValidationError(f"{descriptor.name} id must be a non-empty string")
        context = require_context(context)

        path = f"{descriptor.endpoint}/{quote(id, safe='')}"
        logger.debug(f"Fetching {descriptor.name} {id}")
        response = self.transport.request("GET", path, None, context)
        return descriptor.maker(api.unwrap(response.raw_data, descriptor.singular_key))

    def get_page(self, descriptor: ResourceDescriptor, context: CallerContext,
                 **options) -> Tuple[List[Any], Optional[str]]:
        """
        Retrieve a single page of objects

        Args:
            descriptor: Resource to list
            context: Caller context used for the request
            **options: Query filters, plus ``cursor`` from a previous call and
                ``limit`` between 1 and 100 (default 100)

        Returns:
            Tuple of (hydrated objects, cursor of the next page or None)

        Raises:
            ValidationError: If limit is out of range or a date filter is malformed
        """
        options.setdefault('limit', MAX_PAGE_LIMIT)
        limit = options['limit']
        if limit is None:
            options['limit'] = MAX_PAGE_LIMIT
        elif not _is_int(limit) or not 1 <= limit <= MAX_PAGE_LIMIT:
            raise ValidationError(f"limit must be an integer between 1 and {MAX_PAGE_LIMIT}, got {limit!r}")

        query = self._prepare_query(options)
        context = require_context(context)
        return self._fetch_page(descriptor, context, query)

    def get_list(self, descriptor: ResourceDescriptor, context: CallerContext,
                 **options) -> Iterator[Any]:
        """
        Lazily enumerate every object matching the query, page by page

        Input is validated immediately, so a malformed filter fails here and
        not on the first iteration. Pages are requested only as the returned
        iterator is consumed and never beyond ``limit`` objects.

        Args:
            descriptor: Resource to list
            context: Caller context used for the requests
            **options: Query filters, plus an optional positive ``limit`` on the
                total number of objects (unlimited if None)

        Returns:
            Iterator of hydrated objects

        Raises:
            ValidationError: If limit is not positive, a date filter is
                malformed or a cursor is given
        """
        limit = options.pop('limit', None)
        if limit is not None and (not _is_int(limit) or limit < 1):
            raise ValidationError(f"limit must be a positive integer or None, got {limit!r}")
        if options.get('cursor') is not None:
            raise ValidationError("cursor is not accepted when enumerating, use page instead")
        options.pop('cursor', None)

        query = self._prepare_query(options)
        context = require_context(context)
        return self._stream(descriptor, context, query, limit)

    def _stream(self, descriptor: ResourceDescriptor, context: CallerContext,
                query: Dict[str, Any], limit: Optional[int]) -> Iterator[Any]:
        yielded = 0
        cursor = None
        while True:
            page_limit = MAX_PAGE_LIMIT if limit is None else min(MAX_PAGE_LIMIT, limit - yielded)
            elements, cursor = self._fetch_page(
                descriptor, context, {**query, 'cursor': cursor, 'limit': page_limit}
            )
            for element in elements:
                if limit is not None and yielded >= limit:
                    return
                yield element
                yielded += 1

            if not cursor or (limit is not None and yielded >= limit):
                return

    def _fetch_page(self, descriptor: ResourceDescriptor, context: CallerContext,
                    query: Dict[str, Any]) -> Tuple[List[Any], Optional[str]]:
        logger.debug(
            f"Requesting {descriptor.name} page (cursor={query.get('cursor')}, limit={query.get('limit')})"
        )
        response = self.transport.request("GET", descriptor.endpoint, api.cast_query(query), context)
        raws = api.unwrap(response.raw_data, descriptor.plural_key)
        if not isinstance(raws, list):
            raise TransportError(f"Malformed API response: '{descriptor.plural_key}' is not a list")
        elements = [descriptor.maker(raw) for raw in raws]
        cursor = response.raw_data.get('cursor') or None
        logger.debug(f"Hydrated {len(elements)} {descriptor.name} objects, next cursor={cursor}")
        return elements, cursor

    @staticmethod
    def _prepare_query(options: Dict[str, Any]) -> Dict[str, Any]:
        query = dict(options)
        for key in DATE_FILTERS:
            if key in query:
                query[key] = check_date(query[key])
        return query


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
