import requests
from typing import Optional
import logging

from yts_catalog.utils.error_handlings import CatalogConnectionError, CatalogHTTPError, CatalogTransportError

logger = logging.getLogger(__name__)

def make_api_request(session: requests.Session, api_url: str, timeout: float,
                     headers: Optional[dict] = None) -> requests.Response:
    """
    Make a single GET request and check its status.

    Args:
        session: Session used for the request
        api_url: Fully composed URL, query string included
        timeout: Seconds to wait for the server before giving up
        headers: Extra headers merged over the session headers

    Returns:
        requests.Response: A response with a 2xx status

    Raises:
        CatalogConnectionError: The service could not be reached or timed out
        CatalogHTTPError: The service answered with a non-2xx status
    """
    try:
        response = session.get(api_url, headers=headers, timeout=timeout)
    except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
        logger.error(f"Could not reach {api_url}: {e}")
        raise CatalogConnectionError(f"Could not reach catalog service: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request to {api_url} failed: {e}")
        raise CatalogTransportError(f"Request failed: {e}") from e

    # raise_for_status() lets 1xx/3xx through, anything outside 2xx is a rejection here
    if not 200 <= response.status_code < 300:
        logger.error(f"Catalog service rejected request to {api_url}: HTTP {response.status_code}")
        raise CatalogHTTPError(
            f"Catalog service returned HTTP {response.status_code} {response.reason or ''}".rstrip(),
            status_code=response.status_code,
        )

    return response
