"""
HTTPClient module for handling Stark Bank API requests with authentication and retry logic
"""

import logging
import time
import requests
from typing import Dict, Any, Optional
from datetime import datetime
from dataclasses import dataclass, field

from .context import CallerContext, require_context
from .errors import AuthorizationError, NotFound, TransportError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class APIRequest:
    """Represents a single API request"""
    url: str
    parameters: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)
    method: str = "GET"


@dataclass
class APIResponse:
    """Standardised API response wrapper"""
    raw_data: Dict[str, Any]
    metadata: Dict[str, Any]
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    request_timestamp: datetime = field(default_factory=datetime.now)


class HTTPClient:
    """HTTP client with authentication, retry logic, and rate limiting"""

    # HTTP status codes that should trigger retries
    RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

    def __init__(self, max_retries: int = 3, backoff_factor: float = 2.0,
                 requests_per_second: float = 5.0, timeout: float = 15.0):
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.requests_per_second = requests_per_second
        self.timeout = timeout
        self.session: Optional[requests.Session] = None
        self.last_request_time: Optional[float] = None

    @staticmethod
    def authentication_headers(credentials: Dict[str, Any]) -> Dict[str, str]:
        """
        Build authentication headers based on credential type

        Args:
            credentials: Dictionary containing authentication information

        Raises:
            AuthorizationError: If the credential type is not supported or incomplete
        """
        auth_type = credentials.get('type')

        if auth_type not in ('bearer_token', 'access_token'):
            raise AuthorizationError(f"Unsupported authentication type: {auth_type}")

        token = credentials.get('token')
        if not token:
            raise AuthorizationError(f"Missing token for authentication type: {auth_type}")

        if auth_type == 'bearer_token':
            return {'Authorization': f"Bearer {token}"}
        return {'Access-Token': token}

    def request(self, method: str, path: str, query: Optional[Dict[str, Any]],
                context: CallerContext) -> APIResponse:
        """
        Perform a request against the API location of the caller context

        Args:
            method: HTTP method
            path: Path relative to the API base URL, e.g. 'boleto/log/123'
            query: Query string parameters
            context: Caller context supplying credentials and base URL

        Returns:
            APIResponse object with the decoded body
        """
        context = require_context(context)
        headers = {
            'Accept': 'application/json',
            'Content-Type': 'application/json',
            **self.authentication_headers(context.credentials),
        }
        api_request = APIRequest(
            url=context.url + path.lstrip('/'),
            parameters=query or {},
            headers=headers,
            method=method
        )
        return self.make_request(api_request)

    def make_request(self, request: APIRequest) -> APIResponse:
        """
        Make HTTP request with integrated retry logic and exponential backoff

        Args:
            request: APIRequest object containing request details

        Returns:
            APIResponse object with response data

        Raises:
            NotFound: On HTTP 404
            AuthorizationError: On HTTP 401 and 403
            ValidationError: On HTTP 400, carrying the errors reported by the API
            TransportError: On network failures, or once retries are exhausted
        """
        # Apply rate limiting before making request
        self.apply_rate_limit()

        # Create session if not exists
        if self.session is None:
            self.session = requests.Session()

        retry_count = 0
        request_timestamp = datetime.now()

        while True:
            try:
                response = self.session.request(
                    request.method.upper(),
                    request.url,
                    params=request.parameters,
                    headers=request.headers,
                    timeout=self.timeout
                )
            except requests.exceptions.RequestException as e:
                # Network-level errors are retryable
                retry_count += 1
                if retry_count > self.max_retries:
                    raise TransportError(
                        f"Failed after {self.max_retries} retry attempts. "
                        f"Last error: {str(e)}"
                    )
                self._backoff(retry_count, request, str(e))
                continue

            self.last_request_time = time.time()

            if response.status_code in self.RETRYABLE_STATUS_CODES:
                retry_count += 1
                if retry_count > self.max_retries:
                    raise TransportError(
                        f"Failed after {self.max_retries} retry attempts. "
                        f"Last status: {response.status_code}",
                        status_code=response.status_code
                    )
                self._backoff(retry_count, request, f"HTTP {response.status_code}")
                continue

            raw_data = self._decode(response)
            self._raise_for_status(response.status_code, raw_data, request)

            metadata = {
                'url': request.url,
                'method': request.method,
                'parameters': request.parameters,
                'retry_count': retry_count
            }

            return APIResponse(
                raw_data=raw_data,
                metadata=metadata,
                status_code=response.status_code,
                headers=dict(response.headers),
                request_timestamp=request_timestamp
            )

    def _backoff(self, retry_count: int, request: APIRequest, reason: str) -> None:
        # True exponential backoff with a 1 second base delay
        delay = 1.0 * (self.backoff_factor ** (retry_count - 1))
        logger.warning(
            f"{request.method} {request.url} failed ({reason}), "
            f"retry {retry_count}/{self.max_retries} in {delay:.1f}s"
        )
        time.sleep(delay)

    @staticmethod
    def _decode(response: requests.Response) -> Dict[str, Any]:
        try:
            return response.json()
        except ValueError:
            # Handle non-JSON responses
            return {'text': response.text}

    @staticmethod
    def _raise_for_status(status_code: int, raw_data: Dict[str, Any], request: APIRequest) -> None:
        if status_code < 400:
            return

        errors = raw_data.get('errors', []) if isinstance(raw_data, dict) else []
        detail = "; ".join(
            f"{error.get('code')}: {error.get('message')}" for error in errors if isinstance(error, dict)
        ) or f"HTTP {status_code}"

        if status_code == 404:
            raise NotFound(f"{request.url} not found: {detail}")
        if status_code in (401, 403):
            raise AuthorizationError(f"Request to {request.url} was not authorised: {detail}")
        if status_code == 400:
            raise ValidationError(f"Request to {request.url} was rejected: {detail}", errors=errors)
        raise TransportError(f"Request to {request.url} failed: {detail}", status_code=status_code)

    def apply_rate_limit(self) -> None:
        """
        Apply rate limiting delay to respect API quotas
        """
        if self.last_request_time is None or self.requests_per_second <= 0:
            # First request, no delay needed
            return

        time_since_last = time.time() - self.last_request_time
        min_delay = 1.0 / self.requests_per_second

        if time_since_last < min_delay:
            time.sleep(min_delay - time_since_last)

    def close_connection(self) -> None:
        """
        Close HTTP session and release resources
        """
        if self.session:
            self.session.close()
            self.session = None
