"""
client.py

PURPOSE: Authenticated HTTP round trips against the OpenAI REST API.
DEPENDENCIES: httpx, pydantic, codec, errors

ARCHITECTURE NOTES:
OpenAIClient owns nothing but configuration and an httpx.AsyncClient.
Each call to request() is exactly one round trip:
- build the URL from base_url + endpoint path
- attach the bearer token
- send JSON or multipart content
- decode the body into the expected Record, or into an error value

Retries are the transport's business: when the client creates its own
httpx.AsyncClient it configures AsyncHTTPTransport(retries=max_retries),
which retries failed connection attempts only. request() adds no retry
loop of its own. A caller-supplied httpx.AsyncClient is used as is.

The resource modules (openai_rest.resources.*) are thin functions over
request(); this module knows nothing about individual endpoints.
"""

import logging
import time
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from openai_rest.codec import Record
from openai_rest.config import DEFAULT_BASE_URL, OpenAISettings
from openai_rest.errors import ApiError, ClientError, ErrorEnvelope, Result
from openai_rest.observability import get_tracer
from openai_rest.observability.telemetry import Span

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

R = TypeVar("R", bound=Record)

# Bodies longer than this are truncated in error values
_MAX_ERROR_BODY = 2000


class OpenAIClient:
    """
    Client handle passed to every resource function.

    Usage:
        async with OpenAIClient(api_key) as client:
            result = await list_models(client)
    """

    def __init__(
        self,
        api_key: str,
        http_client: httpx.AsyncClient | None = None,
        max_retries: int = 2,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
    ):
        """
        Initialize the client.

        Args:
            api_key: Secret key sent as a bearer token.
            http_client: Shared httpx client. If None, one is created with
                max_retries connection retries and the given timeout.
            max_retries: Connection retries for a client created here.
            base_url: API root that endpoint paths are appended to.
            timeout: Request timeout in seconds for a client created here.
        """
        if not api_key:
            raise ValueError("api_key must not be empty")
        if max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {max_retries}")

        self._api_key = api_key
        self._base_url = base_url.rstrip("/") + "/"
        self._max_retries = max_retries
        self._owns_http_client = http_client is None

        if http_client is None:
            http_client = httpx.AsyncClient(
                transport=httpx.AsyncHTTPTransport(retries=max_retries),
                timeout=timeout,
            )
        self._http = http_client

    @classmethod
    def from_settings(
        cls,
        settings: OpenAISettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> "OpenAIClient":
        """Create a client from OpenAISettings."""
        return cls(
            api_key=settings.api_key,
            http_client=http_client,
            max_retries=settings.max_retries,
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def max_retries(self) -> int:
        return self._max_retries

    async def aclose(self) -> None:
        """Close the underlying httpx client if this object created it."""
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> "OpenAIClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        path: str,
        response_type: type[R],
        *,
        body: Record | None = None,
        data: dict[str, str] | None = None,
        files: dict[str, Any] | None = None,
    ) -> Result[R]:
        """
        Perform one round trip and decode the response.

        Args:
            method: HTTP method.
            path: Endpoint path relative to base_url, e.g. "chat/completions".
            response_type: Record to decode a success body into.
            body: Record sent as a JSON body.
            data: Form fields for a multipart request.
            files: Files for a multipart request, in httpx's format.

        Returns:
            The decoded record, a ClientError or an ApiError.
        """
        url = self._base_url + path.lstrip("/")
        headers = {"Authorization": f"Bearer {self._api_key}"}
        json_body = body.to_wire() if body is not None else None

        with tracer.start_as_current_span("openai.request") as span:
            span.set_attribute("http.method", method)
            span.set_attribute("openai.path", path)
            span.set_attribute("openai.response_type", response_type.__name__)

            start_time = time.perf_counter()
            logger.debug(f"{method} {url}")

            try:
                response = await self._http.request(
                    method,
                    url,
                    headers=headers,
                    json=json_body,
                    data=data,
                    files=files,
                )
            except httpx.RequestError as e:
                span.record_exception(e)
                logger.warning(f"{method} {path} failed: {type(e).__name__}: {e}")
                return ClientError(kind="transport", message=f"{type(e).__name__}: {e}")

            elapsed_ms = (time.perf_counter() - start_time) * 1000
            span.set_attribute("http.status_code", response.status_code)
            span.set_attribute("openai.latency_ms", elapsed_ms)
            logger.debug(f"{method} {path} -> {response.status_code} in {elapsed_ms:.0f}ms")

            if response.is_success:
                return self._decode_success(response, response_type, span)
            return self._decode_failure(response, span)

    def _decode_success(
        self, response: httpx.Response, response_type: type[R], span: Span
    ) -> Result[R]:
        try:
            return response_type.from_wire(response.json())
        except ValidationError as e:
            span.record_exception(e)
            logger.warning(f"Response did not match {response_type.__name__}: {e}")
            return ClientError(
                kind="decode",
                message=f"Response did not match {response_type.__name__}: {e}",
                status_code=response.status_code,
                body=response.text[:_MAX_ERROR_BODY],
            )
        except ValueError as e:
            span.record_exception(e)
            logger.warning(f"Response body is not JSON: {e}")
            return ClientError(
                kind="decode",
                message=f"Response body is not JSON: {e}",
                status_code=response.status_code,
                body=response.text[:_MAX_ERROR_BODY],
            )

    def _decode_failure(self, response: httpx.Response, span: Span) -> ClientError | ApiError:
        try:
            envelope = ErrorEnvelope.from_wire(response.json())
        except ValueError:
            # ValidationError is a ValueError too: the body is not an error object
            logger.warning(f"HTTP {response.status_code} without a provider error object")
            return ClientError(
                kind="decode",
                message=f"HTTP {response.status_code} with unrecognised body",
                status_code=response.status_code,
                body=response.text[:_MAX_ERROR_BODY],
            )

        error = envelope.to_api_error(response.status_code)
        span.set_attribute("openai.error_type", error.type or "unknown")
        logger.warning(f"API error: {error}")
        return error
