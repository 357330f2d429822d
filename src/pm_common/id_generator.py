"""Unique ID generators for payment and favorite IDs.

WalletService depends only on IdGeneratorProtocol; the snowflake generator is
the default, the uuid generator matches the id format of older wallet data.
"""

import threading
import time
import uuid
from typing import Protocol


class IdGeneratorProtocol(Protocol):
    def next_id(self) -> str: ...


class SnowflakeIdGenerator:
    """Snowflake-style ID generator, unique per instance for the process lifetime.

    Layout (64 bits):
      - 41 bits: millisecond timestamp (since custom epoch)
      - 10 bits: machine_id (0-1023)
      - 12 bits: sequence (0-4095 per millisecond)

    A wall clock that steps backwards is clamped to the last issued
    millisecond, so IDs keep increasing.
    """

    _EPOCH_MS = 1_700_000_000_000  # 2023-11-14 approx
    _MACHINE_BITS = 10
    _SEQUENCE_BITS = 12
    _MAX_SEQUENCE = (1 << _SEQUENCE_BITS) - 1

    def __init__(self, machine_id: int = 0) -> None:
        if not (0 <= machine_id < (1 << self._MACHINE_BITS)):
            raise ValueError(f"machine_id must be 0-{(1 << self._MACHINE_BITS) - 1}")
        self._machine_id = machine_id
        self._sequence = 0
        self._last_timestamp_ms = -1
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            ts = max(self._current_ms(), self._last_timestamp_ms)
            if ts == self._last_timestamp_ms:
                self._sequence = (self._sequence + 1) & self._MAX_SEQUENCE
                if self._sequence == 0:
                    ts = self._wait_next_ms(ts)
            else:
                self._sequence = 0

            self._last_timestamp_ms = ts
            id_int = (
                ((ts - self._EPOCH_MS) << (self._MACHINE_BITS + self._SEQUENCE_BITS))
                | (self._machine_id << self._SEQUENCE_BITS)
                | self._sequence
            )
            return str(id_int)

    def _current_ms(self) -> int:
        return int(time.time() * 1000)

    def _wait_next_ms(self, last_ts: int) -> int:
        # Sequence exhausted within last_ts; borrow the next millisecond if the clock lags
        ts = self._current_ms()
        return ts if ts > last_ts else last_ts + 1


class UuidIdGenerator:
    """Random uuid4 string IDs."""

    def next_id(self) -> str:
        return str(uuid.uuid4())
