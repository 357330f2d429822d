"""Pydantic snapshot schemas for pm_wallet results."""

from pydantic import BaseModel

from src.pm_common.cents import cents_to_display
from src.pm_common.datetime_utils import to_iso
from src.pm_wallet.domain.models import Account, Favorite, Payment


class AccountResponse(BaseModel):
    id: int
    phone: str
    balance_cents: int
    balance_display: str

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            phone=account.phone,
            balance_cents=account.balance,
            balance_display=cents_to_display(account.balance),
        )


class PaymentResponse(BaseModel):
    id: str
    account_id: int
    amount_cents: int
    amount_display: str
    category: str
    status: str
    created_at: str  # ISO8601 string

    @classmethod
    def from_payment(cls, payment: Payment) -> "PaymentResponse":
        return cls(
            id=payment.id,
            account_id=payment.account_id,
            amount_cents=payment.amount,
            amount_display=cents_to_display(payment.amount),
            category=payment.category,
            status=payment.status.value,
            created_at=to_iso(payment.created_at),
        )


class FavoriteResponse(BaseModel):
    id: str
    account_id: int
    name: str
    amount_cents: int
    amount_display: str
    category: str

    @classmethod
    def from_favorite(cls, favorite: Favorite) -> "FavoriteResponse":
        return cls(
            id=favorite.id,
            account_id=favorite.account_id,
            name=favorite.name,
            amount_cents=favorite.amount,
            amount_display=cents_to_display(favorite.amount),
            category=favorite.category,
        )


class PaymentListResponse(BaseModel):
    account_id: int
    items: list[PaymentResponse]
    total_live_cents: int  # sum over payments that are not FAILED


class FavoriteListResponse(BaseModel):
    account_id: int
    items: list[FavoriteResponse]
