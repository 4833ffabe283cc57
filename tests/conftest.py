"""Pytest fixtures for testing"""

import json
from typing import Any, List

import httpx
import pytest

from ninejapay.client import NineJaPayClient
from ninejapay.config import ClientConfig, Environment

SUCCESS_ENVELOPE = {"status": "SUCCESS", "message": "ok", "statusCode": "00"}


class FakeNineJaPay:
    """MockTransport handler that records requests and replays one canned response"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: Any = dict(SUCCESS_ENVELOPE)
        self.error: type | None = None

    def respond(self, body: Any, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code

    def fail_with(self, error: type) -> None:
        self.error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error("connection refused", request=request)
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def sandbox_config() -> ClientConfig:
    return ClientConfig(
        api_key="test-api-key",
        secret_key="test-secret-key",
        environment=Environment.SANDBOX,
    )


@pytest.fixture
def production_config() -> ClientConfig:
    return ClientConfig(
        api_key="live-api-key",
        secret_key="live-secret-key",
        environment=Environment.PRODUCTION,
    )


@pytest.fixture
def fake_api() -> FakeNineJaPay:
    return FakeNineJaPay()


@pytest.fixture
async def client(sandbox_config: ClientConfig, fake_api: FakeNineJaPay):
    """Sandbox client wired to the fake API"""
    client = NineJaPayClient(sandbox_config, transport=httpx.MockTransport(fake_api))
    yield client
    await client.aclose()
