"""Shared HTTP transport for the 9jaPay REST API.

Uses one long-lived ``httpx.AsyncClient`` with:
* Base URL resolved from ``ClientConfig``
* Static ``api-key`` / ``secret`` headers on every request
* TLS verification unless explicitly disabled

Every failure is raised as a ``NineJaPayError`` subclass; raw httpx
exceptions never reach callers.
"""

import time
from typing import Any, Dict, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ninejapay.config import ClientConfig
from ninejapay.domain.exceptions import NineJaPayError, ProviderError, TransportError
from ninejapay.infrastructure.observability.logging import log_call, log_failure
from ninejapay.infrastructure.observability.metrics import record_decode_failure, record_failure, record_request

M = TypeVar("M", bound=BaseModel)


class Transport:
    """HTTP client bound to a single 9jaPay environment"""

    def __init__(self, config: ClientConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self.base_url = config.resolved_base_url
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Content-Type": "application/json",
                "api-key": config.api_key,
                "secret": config.secret_key,
            },
            verify=config.tls_verify,
            timeout=config.timeout_seconds,
            transport=transport,
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        json: Dict[str, Any] | None = None,
        params: Dict[str, Any] | None = None,
    ) -> Any:
        """
        Issue one request and return the decoded JSON body, or None
        when a 2xx response has no body.

        Raises:
            TransportError: On network, TLS, DNS or timeout failures
            ProviderError: On any non-2xx response
        """
        start_time = time.perf_counter()
        try:
            response = await self._client.request(method, path, json=json, params=params)
            response.raise_for_status()
            body = response.json() if response.content else None

        except httpx.HTTPStatusError as e:
            error = self._provider_error(e.response, str(e))
            self._record_failure(operation, error, start_time)
            raise error from e
        except httpx.RequestError as e:
            error = TransportError(str(e) or type(e).__name__)
            self._record_failure(operation, error, start_time)
            raise error from e
        except ValueError as e:
            error = ProviderError(
                f"Invalid JSON from 9jaPay: {e}",
                response=response.text,
                http_status=response.status_code,
            )
            self._record_failure(operation, error, start_time)
            raise error from e

        duration = time.perf_counter() - start_time
        record_request(operation, duration)
        log_call(method, path, operation, response.status_code, duration * 1000)
        return body

    def decode(self, model: Type[M], body: Any, *, operation: str) -> M | None:
        """
        Validate a 2xx body against the operation's response model.

        Raises:
            ProviderError: If the body does not fit the model
        """
        if body is None:
            return None
        try:
            return model.model_validate(body)
        except ValidationError as e:
            message = None
            status_code = None
            if isinstance(body, dict):
                message = body.get("message")
                if body.get("statusCode") is not None:
                    status_code = str(body["statusCode"])
            error = ProviderError(
                message or f"Unexpected 9jaPay response: {e.error_count()} invalid field(s)",
                nine_ja_pay_status_code=status_code,
                response=body,
            )
            record_decode_failure(operation, status_code)
            log_failure(operation, error, 0.0)
            raise error from e

    @staticmethod
    def _provider_error(response: httpx.Response, fallback_message: str) -> ProviderError:
        """Build a ProviderError from the {message, statusCode} body if present"""
        try:
            body = response.json()
        except ValueError:
            body = response.text or None

        message = fallback_message
        status_code = None
        if isinstance(body, dict):
            message = body.get("message") or fallback_message
            if body.get("statusCode") is not None:
                status_code = str(body["statusCode"])

        return ProviderError(
            message,
            nine_ja_pay_status_code=status_code,
            response=body,
            http_status=response.status_code,
        )

    @staticmethod
    def _record_failure(operation: str, error: NineJaPayError, start_time: float) -> None:
        duration = time.perf_counter() - start_time
        record_failure(operation, error.kind, error.nine_ja_pay_status_code, duration)
        log_failure(operation, error, duration * 1000)

    async def aclose(self) -> None:
        await self._client.aclose()

    # context-manager sugar
    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
