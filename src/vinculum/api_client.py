import logging
import threading
from typing import Any, Dict, Tuple

import requests
from requests.adapters import HTTPAdapter, Retry

from .utils import SERVER_ERROR_CODES, ServiceError

logger = logging.getLogger(__name__)


class RomanServiceClient:
    """
    A memoized client for a deployed Roman numeral conversion service.

    The service exposes one GET endpoint per conversion mode, each taking the
    value in a `query` parameter and answering with `{"input": ..., "output": ...}`
    on success or a plain-text reason with status 400 on failure.

    This client provides:
    - In-memory memoization of successful conversions
    - Automatic retry logic for server errors
    - Configurable timeout settings
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initializes the RomanServiceClient with configuration settings.

        Args:
            config: Configuration dictionary containing:
                - service_base_url: Root URL of the service
                - timeout: Request timeout in seconds (default: 15)
                - max_retries: Maximum number of retry attempts (default: 3)
        """
        self.base_url: str = config["service_base_url"].rstrip("/")
        self.timeout: int = config.get("timeout", 15)
        self._session = self._setup_session(config)
        self._cache: Dict[Tuple[str, str], str] = {}
        self._lock = threading.Lock()

    def _setup_session(self, config: Dict[str, Any]) -> requests.Session:
        """
        Creates a requests Session with automatic retry logic for server errors.

        Args:
            config: Configuration dictionary

        Returns:
            Configured requests.Session instance
        """
        session = requests.Session()
        retries = Retry(
            total=config.get("max_retries", 3),
            backoff_factor=0.5,
            status_forcelist=SERVER_ERROR_CODES,
        )
        adapter = HTTPAdapter(max_retries=retries)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def convert(self, endpoint: str, query: str) -> str:
        """
        Asks the service to convert a single value.

        Args:
            endpoint: The endpoint name, e.g. "romannumeral"
            query: The raw value to convert

        Returns:
            The converted value from the response's `output` field

        Raises:
            ServiceError: If the service rejects the value, the request fails,
                or the response is not the expected JSON
        """
        key = (endpoint, query)
        with self._lock:
            if key in self._cache:
                logger.debug(f"Cache hit (memory): {endpoint}?query={query}")
                return self._cache[key]

        url = f"{self.base_url}/{endpoint}"
        logger.debug(f"Requesting {url} with query: {query}")
        try:
            response = self._session.get(
                url, params={"query": query}, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise ServiceError(f"Could not reach conversion service at {url}: {e}")

        if response.status_code == 400:
            # The service reports conversion errors as plain text
            raise ServiceError(response.text, status_code=400)

        try:
            response.raise_for_status()
            output = str(response.json()["output"])
        except requests.HTTPError as e:
            raise ServiceError(
                f"Conversion service error: {e}", status_code=response.status_code
            )
        except (ValueError, KeyError, TypeError) as e:
            raise ServiceError(f"Unexpected response from {url}: {e}")

        with self._lock:
            self._cache[key] = output
        return output

    def health(self) -> bool:
        """
        Checks whether the service is up.

        Returns:
            True if the health endpoint answers 200 with body "OK"
        """
        try:
            response = self._session.get(f"{self.base_url}/health", timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Health check failed: {e}")
            return False
        return response.status_code == 200 and response.text.strip() == "OK"
