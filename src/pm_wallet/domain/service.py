"""WalletService — in-memory ledger of accounts, payments and favorites.

Every public operation validates before it mutates, so a call that raises
leaves the ledger untouched. All operations run under one re-entrant lock
owned by the instance; repeat/pay_from_favorite re-enter through pay().

Entities are frozen dataclasses. Callers receive snapshots; a balance or
status change stores a new instance built with dataclasses.replace.
"""

import logging
import threading
from dataclasses import replace

from config.settings import settings
from src.pm_common.cents import validate_amount
from src.pm_common.datetime_utils import utc_now
from src.pm_common.enums import PaymentStatus
from src.pm_common.errors import (
    AccountNotFoundError,
    DuplicateIdError,
    FavoriteNotFoundError,
    InsufficientBalanceError,
    PaymentNotFoundError,
    PaymentNotRejectableError,
    PhoneAlreadyRegisteredError,
)
from src.pm_common.id_generator import IdGeneratorProtocol, SnowflakeIdGenerator
from src.pm_wallet.domain.invariants import verify_ledger_invariants
from src.pm_wallet.domain.models import Account, Favorite, Payment

logger = logging.getLogger(__name__)


class WalletService:
    def __init__(self, id_generator: IdGeneratorProtocol | None = None) -> None:
        self._ids: IdGeneratorProtocol = id_generator or SnowflakeIdGenerator(
            machine_id=settings.ID_MACHINE_ID
        )
        self._lock = threading.RLock()
        self._next_account_id = 0
        self._total_deposited = 0
        self._accounts: dict[int, Account] = {}
        self._accounts_by_phone: dict[str, int] = {}
        self._payments: dict[str, Payment] = {}
        self._favorites: dict[str, Favorite] = {}

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    def register_account(self, phone: str) -> Account:
        with self._lock:
            if phone in self._accounts_by_phone:
                logger.warning("Registration refused, phone on file: %s", phone)
                raise PhoneAlreadyRegisteredError(phone)

            self._next_account_id += 1
            account = Account(id=self._next_account_id, phone=phone, balance=0)
            self._accounts[account.id] = account
            self._accounts_by_phone[phone] = account.id
            logger.info("Account registered: id=%d phone=%s", account.id, phone)
            return account

    def deposit(self, account_id: int, amount: int) -> None:
        """Credit an account. Deposits are not recorded as payments."""
        with self._lock:
            validate_amount(amount)
            account = self.find_account_by_id(account_id)
            account = self._set_balance(account, account.balance + amount)
            self._total_deposited += amount
            logger.info(
                "Deposit: account=%d amount=%d balance=%d", account_id, amount, account.balance
            )

    def find_account_by_id(self, account_id: int) -> Account:
        with self._lock:
            account = self._accounts.get(account_id)
            if account is None:
                raise AccountNotFoundError(account_id)
            return account

    def list_accounts(self) -> list[Account]:
        with self._lock:
            return list(self._accounts.values())

    @property
    def total_deposited(self) -> int:
        return self._total_deposited

    def _set_balance(self, account: Account, balance: int) -> Account:
        updated = replace(account, balance=balance)
        self._accounts[account.id] = updated
        return updated

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------

    def pay(self, account_id: int, amount: int, category: str) -> Payment:
        with self._lock:
            validate_amount(amount)
            account = self.find_account_by_id(account_id)
            if account.balance < amount:
                logger.warning(
                    "Payment refused: account=%d required=%d available=%d",
                    account_id, amount, account.balance,
                )
                raise InsufficientBalanceError(amount, account.balance)

            payment_id = self._ids.next_id()
            if payment_id in self._payments:
                logger.error("Payment refused, id generator repeated id=%s", payment_id)
                raise DuplicateIdError(payment_id)

            payment = Payment(
                id=payment_id,
                account_id=account_id,
                amount=amount,
                category=category,
                status=PaymentStatus.IN_PROGRESS,
                created_at=utc_now(),
            )
            self._set_balance(account, account.balance - amount)
            self._payments[payment_id] = payment
            logger.info(
                "Payment created: id=%s account=%d amount=%d category=%s",
                payment_id, account_id, amount, category,
            )
            return payment

    def find_payment_by_id(self, payment_id: str) -> Payment:
        with self._lock:
            payment = self._payments.get(payment_id)
            if payment is None:
                raise PaymentNotFoundError(payment_id)
            return payment

    def list_payments(self, account_id: int) -> list[Payment]:
        with self._lock:
            self.find_account_by_id(account_id)
            return [p for p in self._payments.values() if p.account_id == account_id]

    def reject(self, payment_id: str) -> None:
        """Fail a payment and refund its amount. A FAILED payment cannot be rejected again."""
        with self._lock:
            payment = self.find_payment_by_id(payment_id)
            account = self.find_account_by_id(payment.account_id)
            if payment.is_failed:
                logger.warning("Reject refused, payment already failed: id=%s", payment_id)
                raise PaymentNotRejectableError(payment_id, payment.status.value)

            self._payments[payment_id] = replace(payment, status=PaymentStatus.FAILED)
            self._set_balance(account, account.balance + payment.amount)
            logger.info(
                "Payment rejected: id=%s account=%d refunded=%d",
                payment_id, account.id, payment.amount,
            )

    def repeat(self, payment_id: str) -> Payment:
        """Pay again with the original payment's account, amount and category."""
        with self._lock:
            original = self.find_payment_by_id(payment_id)
            return self.pay(original.account_id, original.amount, original.category)

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def favorite_payment(self, payment_id: str, name: str) -> Favorite:
        with self._lock:
            payment = self.find_payment_by_id(payment_id)
            account = self.find_account_by_id(payment.account_id)
            favorite_id = self._ids.next_id()
            if favorite_id in self._favorites:
                logger.error("Favorite refused, id generator repeated id=%s", favorite_id)
                raise DuplicateIdError(favorite_id)

            favorite = Favorite(
                id=favorite_id,
                account_id=account.id,
                name=name,
                amount=payment.amount,
                category=payment.category,
                created_at=utc_now(),
            )
            self._favorites[favorite_id] = favorite
            logger.info("Favorite created: id=%s from payment=%s", favorite_id, payment_id)
            return favorite

    def find_favorite_by_id(self, favorite_id: str) -> Favorite:
        with self._lock:
            favorite = self._favorites.get(favorite_id)
            if favorite is None:
                raise FavoriteNotFoundError(favorite_id)
            return favorite

    def list_favorites(self, account_id: int) -> list[Favorite]:
        with self._lock:
            self.find_account_by_id(account_id)
            return [f for f in self._favorites.values() if f.account_id == account_id]

    def pay_from_favorite(self, favorite_id: str) -> Payment:
        with self._lock:
            favorite = self.find_favorite_by_id(favorite_id)
            return self.pay(favorite.account_id, favorite.amount, favorite.category)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def check_invariants(self) -> list[str]:
        with self._lock:
            return verify_ledger_invariants(
                self._accounts.values(), self._payments.values(), self._total_deposited
            )
