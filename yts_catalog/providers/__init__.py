from yts_catalog.utils.config import CatalogConfig
from yts_catalog.utils.http_client import make_api_request
from yts_catalog.utils.query import encode_params
from typing import Dict, Optional
import requests
import logging

logger = logging.getLogger(__name__)

class BaseCatalogClient:
    """Owns the HTTP session and the URL layout shared by catalog clients"""
    endpoint = None

    def __init__(self, config: Optional[CatalogConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or CatalogConfig()
        self._session = session if session is not None else self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a configured requests session"""
        session = requests.Session()
        session.headers.update({
            'User-Agent': self.config.user_agent,
            'Accept': 'application/json',
        })
        return session

    def build_url(self, params: Dict[str, str]) -> str:
        """Compose ``<base-url>/<endpoint>?<encoded params>``"""
        url = f"{self.config.base_url}/{self.endpoint}"
        if params:
            url = f"{url}?{encode_params(params)}"
        return url

    def _make_request(self, params: Dict[str, str]) -> requests.Response:
        url = self.build_url(params)
        logger.debug(f"GET {url}")
        return make_api_request(self._session, url, timeout=self.config.timeout)

    def close(self):
        """Release pooled connections"""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
