from dataclasses import dataclass
from typing import Optional, Union
import os
import logging

from dotenv import load_dotenv

from yts_catalog.domain.models import CatalogMirror

logger = logging.getLogger(__name__)

DEFAULT_MIRROR = CatalogMirror.YTS_MX
DEFAULT_TIMEOUT = 10.0
DEFAULT_PAGE_SIZE = 50
DEFAULT_USER_AGENT = 'yts-catalog/0.1 (+https://pypi.org/project/yts-catalog/)'


@dataclass(frozen=True)
class CatalogConfig:
    """Connection settings for one catalog deployment"""
    base_url: str = DEFAULT_MIRROR.api_url
    timeout: float = DEFAULT_TIMEOUT
    page_size: int = DEFAULT_PAGE_SIZE
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self):
        # frozen, so normalise through object.__setattr__
        object.__setattr__(self, 'base_url', self.base_url.rstrip('/'))
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def for_mirror(cls, mirror: Union[CatalogMirror, str], **overrides) -> 'CatalogConfig':
        """Returns a config pointing at a known mirror, given as enum or hostname"""
        if not isinstance(mirror, CatalogMirror):
            mirror = CatalogMirror.from_host(mirror)
        return cls(base_url=mirror.api_url, **overrides)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> 'CatalogConfig':
        """
        Build a config from the environment, loading a .env file first.

        Reads YTS_BASE_URL, YTS_MIRROR, YTS_TIMEOUT and YTS_PAGE_SIZE. An
        explicit base URL wins over a mirror hostname.
        """
        load_dotenv(dotenv_path)

        kwargs = {}
        base_url = os.getenv('YTS_BASE_URL')
        mirror = os.getenv('YTS_MIRROR')
        if base_url:
            kwargs['base_url'] = base_url
        elif mirror:
            kwargs['base_url'] = CatalogMirror.from_host(mirror).api_url

        timeout = os.getenv('YTS_TIMEOUT')
        if timeout:
            try:
                kwargs['timeout'] = float(timeout)
            except ValueError:
                raise ValueError(f"YTS_TIMEOUT must be a number, got {timeout!r}") from None

        page_size = os.getenv('YTS_PAGE_SIZE')
        if page_size:
            try:
                kwargs['page_size'] = int(page_size)
            except ValueError:
                raise ValueError(f"YTS_PAGE_SIZE must be an integer, got {page_size!r}") from None

        config = cls(**kwargs)
        logger.debug(f"Loaded catalog config from environment: {config}")
        return config
