"""9jaPay error family and provider status code translation"""

from http import HTTPStatus
from typing import Any

PROVIDER_STATUS_MAP = {
    "00": HTTPStatus.OK,  # Success
    "01": HTTPStatus.ACCEPTED,  # Processing
    "06": HTTPStatus.INTERNAL_SERVER_ERROR,  # General error
    "09": HTTPStatus.BAD_REQUEST,  # Validation error
    "25": HTTPStatus.NOT_FOUND,  # No record found
    "26": HTTPStatus.CONFLICT,  # Duplicate record
}


def map_status_code(nine_ja_pay_status_code: str | None) -> HTTPStatus:
    """Map a 9jaPay status code to an HTTP status; unknown codes are server errors"""
    return PROVIDER_STATUS_MAP.get(nine_ja_pay_status_code, HTTPStatus.INTERNAL_SERVER_ERROR)


class NineJaPayError(Exception):
    """Base exception for every failure surfaced by the SDK.

    All variants expose the same attributes so callers can branch on
    ``kind`` or ``nine_ja_pay_status_code`` instead of parsing messages.
    """

    kind = "unknown"

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        nine_ja_pay_status_code: str | None = None,
        response: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.nine_ja_pay_status_code = nine_ja_pay_status_code
        self.response = response

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, http_status={self.http_status}, "
            f"nine_ja_pay_status_code={self.nine_ja_pay_status_code!r})"
        )


class TransportError(NineJaPayError):
    """Network, DNS, TLS or timeout failure before a response was received"""

    kind = "transport"


class ProviderError(NineJaPayError):
    """9jaPay rejected the request"""

    kind = "provider"

    def __init__(
        self,
        message: str,
        *,
        nine_ja_pay_status_code: str | None = None,
        response: Any = None,
        http_status: int | None = None,
    ):
        # Without a provider code the transport's HTTP status is the best category
        if http_status is None or nine_ja_pay_status_code is not None:
            http_status = int(map_status_code(nine_ja_pay_status_code))
        super().__init__(
            message,
            http_status=http_status,
            nine_ja_pay_status_code=nine_ja_pay_status_code,
            response=response,
        )


class ConfigurationError(NineJaPayError):
    """Local precondition failed; no request was sent"""

    kind = "local_precondition"
