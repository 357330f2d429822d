"""Domain models for pm_wallet — frozen dataclasses, no business logic.

WalletService stores and returns immutable snapshots; state changes replace
the stored instance via dataclasses.replace.
"""

from dataclasses import dataclass
from datetime import datetime

from src.pm_common.enums import PaymentStatus


@dataclass(frozen=True)
class Account:
    id: int
    phone: str
    balance: int  # cents, never negative


@dataclass(frozen=True)
class Payment:
    id: str
    account_id: int
    amount: int  # cents, > 0
    category: str
    status: PaymentStatus = PaymentStatus.IN_PROGRESS
    created_at: datetime | None = None

    @property
    def is_failed(self) -> bool:
        return self.status == PaymentStatus.FAILED


@dataclass(frozen=True)
class Favorite:
    """Payment template; amount/category/account are copied from the source payment."""

    id: str
    account_id: int
    name: str
    amount: int  # cents, > 0
    category: str
    created_at: datetime | None = None
