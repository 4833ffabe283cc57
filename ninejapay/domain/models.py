"""Pydantic models for 9jaPay request bodies and response envelopes"""

from decimal import Decimal
from enum import Enum
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ResponseStatus(str, Enum):
    SUCCESS = "SUCCESS"
    PROCESSING = "PROCESSING"
    FAILED = "FAILED"


# Envelopes


class StandardResponse(WireModel, Generic[T]):
    """Response envelope shared by every endpoint"""

    status: ResponseStatus
    message: str
    status_code: str
    data: T | None = None


class PaginatedResponse(WireModel, Generic[T]):
    status: ResponseStatus
    message: str
    status_code: str
    data: List[T] | None = None
    total_count: int = 0


class PaginationQuery(WireModel):
    page_size: int
    page_number: int

    def to_params(self) -> dict:
        return {"page-size": self.page_size, "page-number": self.page_number}


# Virtual accounts


class AccountStatus(str, Enum):
    ACTIVE = "Active"
    CLOSED = "Closed"


class AccountType(str, Enum):
    PERMANENT = "Permanent"
    TRANSIENT = "Transient"


class VirtualAccount(WireModel):
    account_number: str
    account_name: str
    business_id: str
    status: AccountStatus
    account_balance: Decimal | None = None
    account_type: AccountType | None = None
    auto_payout_enabled: bool | None = None
    request_reference: str | None = None
    amount: Decimal | None = None
    is_single_payment: bool | None = None
    expires_at: str | None = None


class AllVirtualAccountsResponse(PaginatedResponse[VirtualAccount]):
    total_permanent_account_count: int = 0
    total_transient_account_count: int = 0


class CreatePermanentVirtualAccountRequest(WireModel):
    request_reference: str
    account_name: str
    auto_payout_enabled: bool = False


class CreatePermanentVirtualAccountResponse(WireModel):
    request_reference: str
    id: str
    account_number: str


class UpdatePermanentVirtualAccountRequest(WireModel):
    """Partial update; unset fields are not sent"""

    account_name: str | None = None
    block_status: bool | None = None
    auto_payout_enabled: bool | None = None


class ClosePermanentVirtualAccountRequest(WireModel):
    request_reference: str
    account_number: str
    reason_for_closure: str


class CreateTransientVirtualAccountRequest(WireModel):
    request_reference: str
    time_to_live: str
    amount: Decimal | None = None
    is_single_payment: bool | None = None

    # Sent as a JSON number, unlike transfer amounts
    @field_serializer("amount")
    def serialize_amount(self, amount: Decimal | None) -> float | None:
        return float(amount) if amount is not None else None


class CreateTransientVirtualAccountResponse(WireModel):
    request_reference: str
    id: str
    account_number: str


class UpdateTransientVirtualAccountRequest(WireModel):
    block_status: bool | None = None


# Balances


class AccountBalance(WireModel):
    account_balance: Decimal


class TotalBalanceSummary(WireModel):
    total_permanent_account_balance: Decimal
    total_transient_account_balance: Decimal
    total_virtual_account_balance: Decimal


# Banks and transfers


class Bank(WireModel):
    name: str
    code: str


class NameEnquiryRequest(WireModel):
    bank_code: str
    account_number: str


class NameEnquiryResponse(WireModel):
    account_name: str
    account_number: str
    bank_code: str
    name_enquiry_reference: str


class TransferRequest(WireModel):
    payment_reference: str
    sender_account_number: str
    sender_account_name: str
    recipient_account_number: str
    recipient_account_name: str
    recipient_bank_code: str
    amount: Decimal
    name_enquiry_reference: str
    narration: str

    @field_serializer("amount")
    def serialize_amount(self, amount: Decimal) -> str:
        return str(amount)


class TransferResponse(WireModel):
    id: str


class TransferStatus(str, Enum):
    SUCCESS = "Success"
    FAILED = "Failed"
    PROCESSING = "Processing"


class TransactionStatusQueryResponse(WireModel):
    id: str
    payment_reference: str
    session_id: str | None = None
    amount: Decimal
    status: TransferStatus
    transfer_date: str


# Transactions


class TransactionType(str, Enum):
    CREDIT = "Credit"
    DEBIT = "Debit"


class NotificationStatus(str, Enum):
    SUCCESS = "Success"
    PENDING = "Pending"
    FAILED = "Failed"


class Recipient(WireModel):
    account_name: str
    bank: str


class TransactionMetadata(WireModel):
    sender_account_name: str
    sender_account_number: str
    sender_bank: str
    sender_bank_code: str
    recipients: List[Recipient] = []


class Transaction(WireModel):
    transaction_id: str
    transaction_reference: str
    account_number: str
    transaction_type: TransactionType
    amount: Decimal
    narration: str
    transaction_date: str
    notification_status: NotificationStatus
    metadata: TransactionMetadata


class GetTransactionsQuery(PaginationQuery):
    account_number: str | None = None
    start_date: str | None = None
    end_date: str | None = None

    def to_params(self) -> dict:
        """Pagination keys plus only the filters that were supplied"""
        params = super().to_params()
        if self.account_number:
            params["account-number"] = self.account_number
        if self.start_date:
            params["start-date"] = self.start_date
        if self.end_date:
            params["end-date"] = self.end_date
        return params


class ResendNotificationRequest(WireModel):
    transaction_id: str


class ResendNotificationsForAccountRequest(WireModel):
    account_number: str


class ResendNotificationsResponse(WireModel):
    number_of_resent_notifications: int


class SimulateDepositRequest(WireModel):
    recipient_account_number: str
    amount: Decimal
    auth_key: str

    @field_serializer("amount")
    def serialize_amount(self, amount: Decimal) -> str:
        return str(amount)
