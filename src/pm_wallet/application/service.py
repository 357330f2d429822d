"""WalletApplicationService — thin composition layer.

Delegates to WalletService and converts domain objects into pydantic
snapshots. Errors raised by the core propagate unchanged.
"""

from src.pm_wallet.application.schemas import (
    AccountResponse,
    FavoriteListResponse,
    FavoriteResponse,
    PaymentListResponse,
    PaymentResponse,
)
from src.pm_wallet.domain.service import WalletService


class WalletApplicationService:
    def __init__(self, service: WalletService | None = None) -> None:
        self._service = service or WalletService()

    @property
    def service(self) -> WalletService:
        return self._service

    def register_account(self, phone: str) -> AccountResponse:
        return AccountResponse.from_account(self._service.register_account(phone))

    def get_account(self, account_id: int) -> AccountResponse:
        return AccountResponse.from_account(self._service.find_account_by_id(account_id))

    def deposit(self, account_id: int, amount_cents: int) -> AccountResponse:
        self._service.deposit(account_id, amount_cents)
        return self.get_account(account_id)

    def pay(self, account_id: int, amount_cents: int, category: str) -> PaymentResponse:
        return PaymentResponse.from_payment(
            self._service.pay(account_id, amount_cents, category)
        )

    def reject(self, payment_id: str) -> PaymentResponse:
        self._service.reject(payment_id)
        return PaymentResponse.from_payment(self._service.find_payment_by_id(payment_id))

    def repeat(self, payment_id: str) -> PaymentResponse:
        return PaymentResponse.from_payment(self._service.repeat(payment_id))

    def favorite_payment(self, payment_id: str, name: str) -> FavoriteResponse:
        return FavoriteResponse.from_favorite(
            self._service.favorite_payment(payment_id, name)
        )

    def pay_from_favorite(self, favorite_id: str) -> PaymentResponse:
        return PaymentResponse.from_payment(self._service.pay_from_favorite(favorite_id))

    def list_payments(self, account_id: int) -> PaymentListResponse:
        payments = self._service.list_payments(account_id)
        return PaymentListResponse(
            account_id=account_id,
            items=[PaymentResponse.from_payment(p) for p in payments],
            total_live_cents=sum(p.amount for p in payments if not p.is_failed),
        )

    def list_favorites(self, account_id: int) -> FavoriteListResponse:
        return FavoriteListResponse(
            account_id=account_id,
            items=[FavoriteResponse.from_favorite(f) for f in self._service.list_favorites(account_id)],
        )
