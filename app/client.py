import logging
import time
from typing import Any, Optional

import requests
from pydantic import ValidationError as SchemaValidationError

from app.config import API_BASE_URL, ANALYZE_ENDPOINT_PATH
from app.errors import ServiceError, TransportError
from app.schemas import AnalysisRequest, AnalysisResult

logger = logging.getLogger(__name__)

# --- Constants ---
SERVICE_FAILURE_MESSAGE = "Failed to analyze content"
TRANSPORT_FAILURE_MESSAGE = "Analysis failed. Please try again."
MAX_ERROR_BODY_PREVIEW_LENGTH = 200


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _extract_error_message(response: requests.Response) -> str:
    """Reads the service's `error` field from a failed response, falling back to a generic message."""
    try:
        payload: Any = response.json()
    except ValueError:
        logger.debug(f"Error body is not JSON: {response.text[:MAX_ERROR_BODY_PREVIEW_LENGTH]!r}")
        return SERVICE_FAILURE_MESSAGE
    if isinstance(payload, dict):
        message = payload.get("error")
        if isinstance(message, str) and message:
            return message
    return SERVICE_FAILURE_MESSAGE


class AnalysisClient:
    """
    Thin HTTP client for the content analysis service.

    One call to `submit` issues exactly one POST. There are no retries, no
    caching and no client-side timeout; a hung request blocks until the
    transport gives up.
    """

    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None):
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{ANALYZE_ENDPOINT_PATH}"

    def submit(self, text: str) -> AnalysisResult:
        """
        Sends `text` for analysis and returns the parsed result.

        Args:
            text: Raw editor content. Must be non-empty; any minimum length
                  policy belongs to the caller.

        Returns:
            AnalysisResult: The service's result, unmodified.

        Raises:
            ValueError: If `text` is empty. No request is issued.
            ServiceError: The service answered with a non-2xx status.
            TransportError: The request failed or the success body was malformed.
        """
        if not text:
            raise ValueError("Cannot submit empty text for analysis.")
        payload = AnalysisRequest(text=text).model_dump()

        logger.debug(f"POST {self.endpoint} ({len(text)} chars)")
        start_time = time.time()
        try:
            response = self.session.post(
                self.endpoint,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Connection error while calling {self.endpoint}: {e}")
            raise TransportError(TRANSPORT_FAILURE_MESSAGE) from e

        if not _is_success(response.status_code):
            message = _extract_error_message(response)
            logger.warning(f"Analysis service error (status {response.status_code}): {message}")
            raise ServiceError(message, status_code=response.status_code)

        try:
            result = AnalysisResult.model_validate(response.json())
        except SchemaValidationError as e:
            logger.error(f"Analysis response did not match the expected shape: {e}")
            raise TransportError(TRANSPORT_FAILURE_MESSAGE) from e
        except ValueError as e:
            logger.error(f"Analysis response is not valid JSON: {e}")
            raise TransportError(TRANSPORT_FAILURE_MESSAGE) from e

        logger.info(f"Analysis completed in {time.time() - start_time:.2f}s "
                    f"(aiLikelihood={result.ai_likelihood})")
        return result
