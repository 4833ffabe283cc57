"""Async client for the 9jaPay virtual account, transfer and transaction APIs"""

from typing import List

import httpx

from ninejapay.config import ClientConfig, Settings
from ninejapay.domain.exceptions import ConfigurationError
from ninejapay.domain.models import (
    AccountBalance,
    AllVirtualAccountsResponse,
    Bank,
    ClosePermanentVirtualAccountRequest,
    CreatePermanentVirtualAccountRequest,
    CreatePermanentVirtualAccountResponse,
    CreateTransientVirtualAccountRequest,
    CreateTransientVirtualAccountResponse,
    GetTransactionsQuery,
    NameEnquiryRequest,
    NameEnquiryResponse,
    PaginatedResponse,
    PaginationQuery,
    ResendNotificationRequest,
    ResendNotificationsForAccountRequest,
    ResendNotificationsResponse,
    SimulateDepositRequest,
    StandardResponse,
    TotalBalanceSummary,
    Transaction,
    TransactionStatusQueryResponse,
    TransferRequest,
    TransferResponse,
    UpdatePermanentVirtualAccountRequest,
    UpdateTransientVirtualAccountRequest,
    VirtualAccount,
)
from ninejapay.infrastructure.transport import Transport


class NineJaPayClient:
    """Client for the 9jaPay REST API.

    Each method issues exactly one request and returns the decoded
    envelope. A ``FAILED`` envelope delivered with HTTP 2xx is returned,
    not raised; inspect ``status`` / ``status_code``. A body that does not
    fit the response model raises ``ProviderError``, and an empty 2xx body
    (such as a 204) returns None.
    """

    def __init__(self, config: ClientConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self.http = Transport(config, transport=transport)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self.http.aclose()

    # Permanent virtual accounts

    async def create_permanent_virtual_account(
        self, request: CreatePermanentVirtualAccountRequest
    ) -> StandardResponse[CreatePermanentVirtualAccountResponse]:
        body = await self.http.request(
            "POST",
            "/virtual-accounts/permanent",
            json=request.to_wire(),
            operation="create_permanent_virtual_account",
        )
        return self.http.decode(
            StandardResponse[CreatePermanentVirtualAccountResponse], body, operation="create_permanent_virtual_account"
        )

    async def update_permanent_virtual_account(
        self, account_number: str, request: UpdatePermanentVirtualAccountRequest
    ) -> StandardResponse[VirtualAccount]:
        body = await self.http.request(
            "PATCH",
            f"/virtual-accounts/permanent/{account_number}",
            json=request.to_wire(),
            operation="update_permanent_virtual_account",
        )
        return self.http.decode(
            StandardResponse[VirtualAccount], body, operation="update_permanent_virtual_account"
        )

    async def get_permanent_virtual_account(self, account_number: str) -> StandardResponse[VirtualAccount]:
        body = await self.http.request(
            "GET",
            f"/virtual-accounts/permanent/{account_number}",
            operation="get_permanent_virtual_account",
        )
        return self.http.decode(
            StandardResponse[VirtualAccount], body, operation="get_permanent_virtual_account"
        )

    async def get_all_permanent_virtual_accounts(self, query: PaginationQuery) -> PaginatedResponse[VirtualAccount]:
        body = await self.http.request(
            "GET",
            "/virtual-accounts/permanent",
            params=query.to_params(),
            operation="get_all_permanent_virtual_accounts",
        )
        return self.http.decode(
            PaginatedResponse[VirtualAccount], body, operation="get_all_permanent_virtual_accounts"
        )

    async def close_permanent_virtual_account(self, request: ClosePermanentVirtualAccountRequest) -> StandardResponse:
        body = await self.http.request(
            "DELETE",
            "/virtual-accounts/permanent",
            json=request.to_wire(),
            operation="close_permanent_virtual_account",
        )
        return self.http.decode(StandardResponse, body, operation="close_permanent_virtual_account")

    # Transient virtual accounts

    async def create_transient_virtual_account(
        self, request: CreateTransientVirtualAccountRequest
    ) -> StandardResponse[CreateTransientVirtualAccountResponse]:
        body = await self.http.request(
            "POST",
            "/virtual-accounts/transient",
            json=request.to_wire(),
            operation="create_transient_virtual_account",
        )
        return self.http.decode(
            StandardResponse[CreateTransientVirtualAccountResponse], body, operation="create_transient_virtual_account"
        )

    async def update_transient_virtual_account(
        self, account_number: str, request: UpdateTransientVirtualAccountRequest
    ) -> StandardResponse[VirtualAccount]:
        body = await self.http.request(
            "PUT",
            f"/virtual-accounts/transient/{account_number}",
            json=request.to_wire(),
            operation="update_transient_virtual_account",
        )
        return self.http.decode(
            StandardResponse[VirtualAccount], body, operation="update_transient_virtual_account"
        )

    async def get_transient_virtual_account(self, account_number: str) -> StandardResponse[VirtualAccount]:
        body = await self.http.request(
            "GET",
            f"/virtual-accounts/transient/{account_number}",
            operation="get_transient_virtual_account",
        )
        return self.http.decode(
            StandardResponse[VirtualAccount], body, operation="get_transient_virtual_account"
        )

    async def get_all_transient_virtual_accounts(self, query: PaginationQuery) -> PaginatedResponse[VirtualAccount]:
        body = await self.http.request(
            "GET",
            "/virtual-accounts/transient",
            params=query.to_params(),
            operation="get_all_transient_virtual_accounts",
        )
        return self.http.decode(
            PaginatedResponse[VirtualAccount], body, operation="get_all_transient_virtual_accounts"
        )

    # All virtual accounts

    async def get_all_virtual_accounts(self, query: PaginationQuery) -> AllVirtualAccountsResponse:
        """List permanent and transient accounts together, with per-type counts"""
        body = await self.http.request(
            "GET",
            "/virtual-accounts",
            params=query.to_params(),
            operation="get_all_virtual_accounts",
        )
        return self.http.decode(AllVirtualAccountsResponse, body, operation="get_all_virtual_accounts")

    async def get_virtual_account(self, account_number: str) -> StandardResponse[VirtualAccount]:
        body = await self.http.request(
            "GET",
            f"/virtual-accounts/{account_number}",
            operation="get_virtual_account",
        )
        return self.http.decode(StandardResponse[VirtualAccount], body, operation="get_virtual_account")

    # Balances

    async def get_total_balance_summary(self) -> StandardResponse[TotalBalanceSummary]:
        body = await self.http.request(
            "GET",
            "/virtual-accounts/total-balance",
            operation="get_total_balance_summary",
        )
        return self.http.decode(
            StandardResponse[TotalBalanceSummary], body, operation="get_total_balance_summary"
        )

    async def get_account_balance(self, account_number: str) -> StandardResponse[AccountBalance]:
        body = await self.http.request(
            "GET",
            f"/virtual-accounts/balance/{account_number}",
            operation="get_account_balance",
        )
        return self.http.decode(StandardResponse[AccountBalance], body, operation="get_account_balance")

    # Transfers

    async def get_bank_list(self) -> StandardResponse[List[Bank]]:
        body = await self.http.request("GET", "/banks", operation="get_bank_list")
        return self.http.decode(StandardResponse[List[Bank]], body, operation="get_bank_list")

    async def name_enquiry(self, request: NameEnquiryRequest) -> StandardResponse[NameEnquiryResponse]:
        """Resolve an account number / bank code pair to an account name before a transfer"""
        body = await self.http.request(
            "POST",
            "/transfers/name-enquiry",
            json=request.to_wire(),
            operation="name_enquiry",
        )
        return self.http.decode(StandardResponse[NameEnquiryResponse], body, operation="name_enquiry")

    async def transfer(self, request: TransferRequest) -> StandardResponse[TransferResponse]:
        body = await self.http.request("POST", "/transfers", json=request.to_wire(), operation="transfer")
        return self.http.decode(StandardResponse[TransferResponse], body, operation="transfer")

    async def transfer_from_virtual_account(self, request: TransferRequest) -> StandardResponse[TransferResponse]:
        body = await self.http.request(
            "POST",
            "/transfers/virtual-account",
            json=request.to_wire(),
            operation="transfer_from_virtual_account",
        )
        return self.http.decode(
            StandardResponse[TransferResponse], body, operation="transfer_from_virtual_account"
        )

    async def get_transaction_status(self, reference: str) -> StandardResponse[TransactionStatusQueryResponse]:
        body = await self.http.request(
            "GET",
            f"/transfers/tsq/{reference}",
            operation="get_transaction_status",
        )
        return self.http.decode(
            StandardResponse[TransactionStatusQueryResponse], body, operation="get_transaction_status"
        )

    # Transactions

    async def get_transactions(self, query: GetTransactionsQuery) -> PaginatedResponse[Transaction]:
        body = await self.http.request(
            "GET",
            "/transactions",
            params=query.to_params(),
            operation="get_transactions",
        )
        return self.http.decode(PaginatedResponse[Transaction], body, operation="get_transactions")

    async def get_transaction_by_id(self, transaction_id: str) -> StandardResponse[Transaction]:
        body = await self.http.request(
            "GET",
            f"/transactions/{transaction_id}",
            operation="get_transaction_by_id",
        )
        return self.http.decode(StandardResponse[Transaction], body, operation="get_transaction_by_id")

    async def resend_notification(self, request: ResendNotificationRequest) -> StandardResponse:
        body = await self.http.request(
            "POST",
            "/transactions/resend-notification",
            json=request.to_wire(),
            operation="resend_notification",
        )
        return self.http.decode(StandardResponse, body, operation="resend_notification")

    async def resend_notifications_for_account(
        self, request: ResendNotificationsForAccountRequest
    ) -> StandardResponse[ResendNotificationsResponse]:
        body = await self.http.request(
            "POST",
            "/transactions/resend-notifications-for-account",
            json=request.to_wire(),
            operation="resend_notifications_for_account",
        )
        return self.http.decode(
            StandardResponse[ResendNotificationsResponse], body, operation="resend_notifications_for_account"
        )

    async def resend_all_notifications(self) -> StandardResponse[ResendNotificationsResponse]:
        body = await self.http.request(
            "POST",
            "/transactions/resend-all-notifications",
            operation="resend_all_notifications",
        )
        return self.http.decode(
            StandardResponse[ResendNotificationsResponse], body, operation="resend_all_notifications"
        )

    async def simulate_deposit(self, request: SimulateDepositRequest) -> StandardResponse:
        """
        Credit a virtual account with a fake inbound transfer.

        Raises:
            ConfigurationError: If the client is not bound to the sandbox; no request is sent
        """
        if not self.config.is_sandbox:
            raise ConfigurationError("Simulate deposit is only available in sandbox environment")

        body = await self.http.request(
            "POST",
            "/transactions/simulate-deposit",
            json=request.to_wire(),
            operation="simulate_deposit",
        )
        return self.http.decode(StandardResponse, body, operation="simulate_deposit")


def create_client(config: ClientConfig, transport: httpx.AsyncBaseTransport | None = None) -> NineJaPayClient:
    """Provide a 9jaPay client for the given configuration"""
    return NineJaPayClient(config, transport=transport)


def create_client_from_settings(settings: Settings | None = None) -> NineJaPayClient:
    """Provide a 9jaPay client configured from NINEJAPAY_* environment variables"""
    return NineJaPayClient(ClientConfig.from_settings(settings or Settings()))
