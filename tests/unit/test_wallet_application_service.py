"""Unit tests for WalletApplicationService."""

import pytest

from src.pm_common.errors import InsufficientBalanceError, PaymentNotRejectableError
from src.pm_wallet.application.schemas import (
    AccountResponse,
    FavoriteListResponse,
    FavoriteResponse,
    PaymentListResponse,
    PaymentResponse,
)
from src.pm_wallet.application.service import WalletApplicationService


class TestAccounts:
    def test_register_returns_snapshot(self, app_service: WalletApplicationService) -> None:
        result = app_service.register_account("+992000000001")
        assert isinstance(result, AccountResponse)
        assert result.id == 1
        assert result.balance_cents == 0
        assert result.balance_display == "$0.00"

    def test_deposit_returns_new_balance(self, app_service: WalletApplicationService) -> None:
        account = app_service.register_account("+992000000001")
        result = app_service.deposit(account.id, 1_000_000)
        assert result.balance_cents == 1_000_000
        assert result.balance_display == "$10,000.00"

    def test_snapshot_is_detached(self, app_service: WalletApplicationService) -> None:
        account = app_service.register_account("+992000000001")
        app_service.deposit(account.id, 100)
        assert account.balance_cents == 0


class TestPayments:
    def test_pay_and_reject(self, app_service: WalletApplicationService) -> None:
        account = app_service.register_account("+992000000001")
        app_service.deposit(account.id, 1_000_000)

        payment = app_service.pay(account.id, 100_000, "auto")
        assert isinstance(payment, PaymentResponse)
        assert payment.status == "INPROGRESS"
        assert payment.amount_display == "$1,000.00"
        assert payment.created_at != ""

        rejected = app_service.reject(payment.id)
        assert rejected.status == "FAIL"
        assert app_service.get_account(account.id).balance_cents == 1_000_000

        with pytest.raises(PaymentNotRejectableError):
            app_service.reject(payment.id)

    def test_repeat(self, app_service: WalletApplicationService) -> None:
        account = app_service.register_account("+992000000001")
        app_service.deposit(account.id, 300)
        first = app_service.pay(account.id, 100, "auto")

        second = app_service.repeat(first.id)

        assert second.id != first.id
        assert app_service.get_account(account.id).balance_cents == 100

    def test_errors_propagate(self, app_service: WalletApplicationService) -> None:
        account = app_service.register_account("+992000000001")
        with pytest.raises(InsufficientBalanceError):
            app_service.pay(account.id, 1, "auto")

    def test_list_payments_totals_live_only(self, app_service: WalletApplicationService) -> None:
        account = app_service.register_account("+992000000001")
        app_service.deposit(account.id, 1000)
        p1 = app_service.pay(account.id, 100, "a")
        app_service.pay(account.id, 250, "b")
        app_service.reject(p1.id)

        result = app_service.list_payments(account.id)

        assert isinstance(result, PaymentListResponse)
        assert [p.category for p in result.items] == ["a", "b"]
        assert result.total_live_cents == 250


class TestFavorites:
    def test_favorite_and_pay(self, app_service: WalletApplicationService) -> None:
        account = app_service.register_account("+992000000001")
        app_service.deposit(account.id, 1000)
        payment = app_service.pay(account.id, 400, "phone")

        favorite = app_service.favorite_payment(payment.id, "Mobile")
        assert isinstance(favorite, FavoriteResponse)
        assert favorite.amount_cents == 400
        assert favorite.name == "Mobile"

        again = app_service.pay_from_favorite(favorite.id)
        assert again.amount_cents == 400
        assert again.category == "phone"
        favorites = app_service.list_favorites(account.id)
        assert isinstance(favorites, FavoriteListResponse)
        assert favorites.account_id == account.id
        assert [f.id for f in favorites.items] == [favorite.id]

    def test_default_service_is_created(self) -> None:
        svc = WalletApplicationService()
        assert svc.register_account("+992000000001").id == 1
        assert svc.service.list_accounts()[0].phone == "+992000000001"
