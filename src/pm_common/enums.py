"""Global enums — string-valued so they serialise as-is."""

from enum import Enum


class PaymentStatus(str, Enum):
    IN_PROGRESS = "INPROGRESS"
    DONE = "DONE"  # reserved: nothing in the ledger settles a payment yet
    FAILED = "FAIL"
