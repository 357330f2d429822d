"""Shared test fixtures."""

import pytest

from src.pm_wallet.application.service import WalletApplicationService
from src.pm_wallet.domain.service import WalletService
from tests.wallet_helpers import SequentialIdGenerator, WalletHarness


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def wallet(id_generator: SequentialIdGenerator) -> WalletService:
    return WalletService(id_generator=id_generator)


@pytest.fixture
def harness(wallet: WalletService) -> WalletHarness:
    return WalletHarness(wallet)


@pytest.fixture
def app_service(wallet: WalletService) -> WalletApplicationService:
    return WalletApplicationService(service=wallet)
