from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor, as_completed
from enum import Enum
from logging import getLogger
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from ..api_client import RomanServiceClient
from ..utils import QueryError, VinculumError, parse_query_int

logger = getLogger(__name__)


class ConversionMode(str, Enum):
    """Conversion modes, named after the service endpoints that perform them."""

    ROMAN = "romannumeral"
    ROMAN_REVERSE = "romannumeralreverse"
    LIMITLESS = "romannumerallimitless"
    LIMITLESS_REVERSE = "romannumeralreverselimitless"


class BaseConverter(ABC):
    """
    An abstract base class for all conversion modes.

    A converter takes raw query strings, the way the conversion service
    receives them, and turns each into an `{"input", "output"}` record.

    Features:
    - Local conversion, or forwarding to a remote service when a client is given
    - Concurrent batch processing using ThreadPoolExecutor
    - Progress tracking with tqdm
    - Per-query error collection
    """

    mode: ConversionMode

    def __init__(
        self,
        config: Dict[str, Any],
        api_client: Optional[RomanServiceClient] = None,
    ):
        """
        Initializes the BaseConverter with configuration and dependencies.

        Args:
            config: Configuration dictionary with converter settings
            api_client: Optional service client; when set, conversions are
                delegated to the remote service
        """
        self.config = config
        self.api_client = api_client

    @abstractmethod
    def convert_locally(self, query: str) -> str:
        """
        Converts a single non-empty query without contacting the service.

        Args:
            query: The raw query value

        Returns:
            The converted value as a string

        Raises:
            VinculumError: If the query cannot be converted
        """
        pass

    @staticmethod
    def parse_integer(query: str) -> int:
        """Parses the leading integer of a query, or raises QueryError."""
        number = parse_query_int(query)
        if number is None:
            raise QueryError("Query parameter must be a valid integer.")
        return number

    def convert(self, query: Optional[str]) -> Dict[str, str]:
        """
        Converts a single query.

        Args:
            query: The raw query value

        Returns:
            A dict with the original `input` and the converted `output`

        Raises:
            QueryError: If the query is missing or empty
            VinculumError: If the conversion fails
        """
        if not query:
            raise QueryError("Query parameter 'query' is required.")

        logger.debug(f"Processing {self.mode.value} with query: {query}")
        if self.api_client is not None:
            output = self.api_client.convert(self.mode.value, query)
        else:
            output = self.convert_locally(query)

        logger.debug(f"Converted {query} to {output}")
        return {"input": query, "output": output}

    def process(self, query: str) -> Dict[str, str]:
        """
        Converts a single query, capturing failures instead of raising them.

        Returns:
            The conversion record, or `{"input", "error"}` if the conversion failed
        """
        try:
            return self.convert(query)
        except VinculumError as e:
            return {"input": query, "error": str(e)}

    def run(self, queries: List[str]) -> Dict[str, Any]:
        """
        Converts a batch of queries concurrently.

        Results are returned in the order of the input queries.

        Args:
            queries: The raw query values

        Returns:
            A dict with the `mode`, the successful `results` and the failed `errors`
        """
        logger.info(f"--- Running {self.mode.value} on {len(queries)} queries ---")
        records: List[Optional[Dict[str, str]]] = [None] * len(queries)

        with ThreadPoolExecutor(max_workers=self.config["max_workers"]) as executor:
            # Submit all conversion tasks
            future_map = {
                executor.submit(self.process, query): index
                for index, query in enumerate(queries)
            }

            # Collect results as they complete
            for future in tqdm(
                as_completed(future_map),
                total=len(queries),
                desc=f"Converting ({self.mode.value})",
                disable=len(queries) < 2,
            ):
                records[future_map[future]] = future.result()

        results = [record for record in records if record and "output" in record]
        errors = [record for record in records if record and "error" in record]

        # Report any errors that occurred
        if errors:
            logger.warning(f"{len(errors)} error(s) occurred during conversion:")
            for error in errors:
                logger.warning(f"  - {error['input']}: {error['error']}")

        logger.info(f"{self.mode.value} complete: {len(results)} converted")
        return {"mode": self.mode.value, "results": results, "errors": errors}
