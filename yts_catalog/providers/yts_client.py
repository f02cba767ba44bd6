from yts_catalog.providers import BaseCatalogClient
from yts_catalog.domain.models import Movie, OrderDirection, ResponseEnvelope, SortField
from yts_catalog.utils.error_handlings import (CatalogDecodeError, CatalogError, CatalogUnavailableError,
                                               EmptyResultError, InvalidQueryError)
from yts_catalog.utils.query import coerce_choice, format_int
from typing import Dict, List, Union
import logging

logger = logging.getLogger(__name__)

# Parameters of the liveness probe: one well-seeded movie is enough
STATUS_PARAMS = {
    'limit': '1',
    'sort_by': SortField.PEERS.value,
    'order_by': OrderDirection.DESC.value,
    'minimum_rating': '6',
}

class YTSClient(BaseCatalogClient):
    endpoint = "list_movies.json"

    def list_movies(self, page: int, min_rating: int,
                    sort_by: Union[SortField, str], order_by: Union[OrderDirection, str]) -> List[Movie]:
        """
        Get one page of movies.

        Args:
            page: Page number, 1-based; sent as is
            min_rating: Minimum IMDb rating; sent as is
            sort_by: Field to sort by
            order_by: Sort direction

        Returns:
            List[Movie]: Movies in the order the server returned them

        Raises:
            InvalidQueryError: An argument cannot be sent; no request is made
            CatalogTransportError: The request failed or was rejected
            CatalogDecodeError: The body is not the expected envelope
        """
        params = {
            'limit': format_int('limit', self.config.page_size),
            'sort_by': coerce_choice('sort_by', sort_by, SortField).value,
            'order_by': coerce_choice('order_by', order_by, OrderDirection).value,
            'minimum_rating': format_int('min_rating', min_rating),
            'page': format_int('page', page),
        }
        return self._get_movie_list(params)

    def search_movies(self, query: str) -> List[Movie]:
        """Search movies by title; no other filter is sent along"""
        if not isinstance(query, str):
            raise InvalidQueryError(f"'query' must be a string, got {query!r}")
        return self._get_movie_list({'query_term': query})

    def check_status(self) -> None:
        """
        Probe the service with a real, minimal list query.

        Raises:
            CatalogUnavailableError: The service is not responding correctly,
                whatever the reason; the original error is chained
            EmptyResultError: The service answered but returned no movies
        """
        try:
            movies = self._get_movie_list(dict(STATUS_PARAMS))
        except CatalogError as e:
            logger.warning(f"Catalog at {self.config.base_url} is unavailable: {e}")
            raise CatalogUnavailableError(f"Catalog service unavailable: {e}") from e

        if not movies:
            logger.warning(f"Catalog at {self.config.base_url} returned no movies")
            raise EmptyResultError("Catalog service unavailable: no movies returned")

    def _get_movie_list(self, params: Dict[str, str]) -> List[Movie]:
        """Internal method shared by every operation"""
        response = self._make_request(params)

        # deeply nested bodies exhaust the decoder's recursion limit
        try:
            payload = response.json()
        except (ValueError, RecursionError) as e:
            logger.error(f"Invalid JSON from {response.url}: {e}")
            raise CatalogDecodeError(f"Response body is not valid JSON: {e}") from e

        try:
            envelope = ResponseEnvelope.from_dict(payload)
        except CatalogDecodeError as e:
            logger.error(f"Unexpected response shape from {response.url}: {e}")
            raise

        logger.debug(f"Decoded {len(envelope.data.movies)} movies "
                     f"(status={envelope.status!r}, page={envelope.data.page_number})")
        return list(envelope.data.movies)
