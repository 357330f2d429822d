"""Ledger-wide invariant verification (INV-1..INV-4)."""

import logging
from collections.abc import Iterable

from src.pm_common.enums import PaymentStatus
from src.pm_wallet.domain.models import Account, Payment

logger = logging.getLogger(__name__)


def verify_ledger_invariants(
    accounts: Iterable[Account],
    payments: Iterable[Payment],
    total_deposited: int,
) -> list[str]:
    """Check the wallet ledger state. Returns list of violation strings.

    INV-1: every balance >= 0
    INV-2: phones are unique
    INV-3: sum(balances) + sum(live payment amounts) == total_deposited
    INV-4: every payment references a known account
    """
    accounts = list(accounts)
    payments = list(payments)
    violations: list[str] = []

    seen_phones: dict[str, int] = {}
    for acc in accounts:
        if acc.balance < 0:
            violations.append(f"INV-1 violated: account {acc.id} balance={acc.balance} < 0")
        if acc.phone in seen_phones:
            violations.append(
                f"INV-2 violated: phone {acc.phone} shared by accounts "
                f"{seen_phones[acc.phone]} and {acc.id}"
            )
        else:
            seen_phones[acc.phone] = acc.id

    balances = sum(acc.balance for acc in accounts)
    live = sum(p.amount for p in payments if p.status != PaymentStatus.FAILED)
    if balances + live != total_deposited:
        violations.append(
            f"INV-3 violated: balances({balances}) + live_payments({live}) "
            f"= {balances + live} != total_deposited={total_deposited}"
        )

    account_ids = {acc.id for acc in accounts}
    for p in payments:
        if p.account_id not in account_ids:
            violations.append(
                f"INV-4 violated: payment {p.id} references unknown account {p.account_id}"
            )

    for msg in violations:
        logger.error(msg)
    if not violations:
        logger.debug(
            "Invariants OK: accounts=%d, payments=%d, deposited=%d",
            len(accounts), len(payments), total_deposited,
        )
    return violations
