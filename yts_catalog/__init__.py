from yts_catalog.domain.models import CatalogMirror, Movie, OrderDirection, SortField, Torrent
from yts_catalog.providers.yts_client import YTSClient
from yts_catalog.utils.config import CatalogConfig
from yts_catalog.utils.error_handlings import (CatalogConnectionError, CatalogDecodeError, CatalogError,
                                               CatalogHTTPError, CatalogTransportError, CatalogUnavailableError,
                                               EmptyResultError, InvalidQueryError)

__version__ = "0.1.0"
