"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Account
  2xxx: Payment
  3xxx: Favorite
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 1xxx: Account ---

class PhoneAlreadyRegisteredError(AppError):
    def __init__(self, phone: str) -> None:
        super().__init__(1001, f"Phone already registered: {phone}")


class AccountNotFoundError(AppError):
    def __init__(self, account_id: int) -> None:
        super().__init__(1002, f"Account not found: {account_id}")


class AmountMustBePositiveError(AppError):
    def __init__(self, amount: object) -> None:
        super().__init__(1003, f"Amount must be a positive integer of cents, got {amount!r}")


class InsufficientBalanceError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            1004,
            f"Insufficient balance: required {required} cents, available {available} cents",
        )


# --- 2xxx: Payment ---

class PaymentNotFoundError(AppError):
    def __init__(self, payment_id: str, code: int = 2001, kind: str = "Payment") -> None:
        super().__init__(code, f"{kind} not found: {payment_id}")


class PaymentNotRejectableError(AppError):
    def __init__(self, payment_id: str, status: str) -> None:
        super().__init__(2002, f"Payment {payment_id} in status {status} cannot be rejected")


# --- 3xxx: Favorite ---

class FavoriteNotFoundError(PaymentNotFoundError):
    """Missing favorite.

    Subclasses PaymentNotFoundError so `except PaymentNotFoundError` keeps
    catching it, while carrying its own code.
    """

    def __init__(self, favorite_id: str) -> None:
        super().__init__(favorite_id, code=3001, kind="Favorite")


# --- 9xxx: System ---

class DuplicateIdError(AppError):
    def __init__(self, entity_id: str) -> None:
        super().__init__(9001, f"Generated id already in use: {entity_id}")
