# honeyscan/core/recent.py
# Purpose: Bounded, newest-first, case-insensitively deduplicated scan history.
from __future__ import annotations

import json
import logging
import time
from typing import Callable, List, Optional

from pydantic import TypeAdapter, ValidationError

from honeyscan.models import RecentScanEntry
from honeyscan.utils.storage import KeyValueStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "honeypot_recent_scans"
MAX_RECENT_SCANS = 5

_ENTRIES = TypeAdapter(List[RecentScanEntry])


def _now_ms() -> int:
    return int(time.time() * 1000)


class RecentScanCache:
    """
    Whole-list read-modify-write on a single store slot.
    Not safe for concurrent writers; one scan runs at a time.
    """

    def __init__(self, store: KeyValueStore, clock: Optional[Callable[[], int]] = None,
                 key: str = STORAGE_KEY, capacity: int = MAX_RECENT_SCANS):
        self.store = store
        self.clock = clock or _now_ms
        self.key = key
        self.capacity = capacity

    def list(self) -> List[RecentScanEntry]:
        """Stored entries, newest first. Corrupt state reads as empty."""
        try:
            blob = self.store.read(self.key)
            if not blob:
                return []
            stored = _ENTRIES.validate_python(json.loads(blob))
        except (OSError, ValueError, ValidationError) as e:
            # UnicodeDecodeError is a ValueError
            logger.error("[RECENT] corrupt history under %r, treating as empty: %s", self.key, e)
            return []

        # hand-edited or foreign state may break the bound or the dedup
        seen = set()
        entries = []
        for entry in stored:
            addr = entry.address.lower()
            if addr in seen:
                continue
            seen.add(addr)
            entries.append(entry)
        if len(entries) != len(stored) or len(entries) > self.capacity:
            logger.warning("[RECENT] stored history had %d entries, keeping %d",
                           len(stored), min(len(entries), self.capacity))
        return entries[: self.capacity]

    def record(self, address: str, network: str) -> List[RecentScanEntry]:
        entries = [e for e in self.list() if e.address.lower() != address.lower()]
        entries.insert(0, RecentScanEntry(address=address, network=network, timestamp=self.clock()))
        entries = entries[: self.capacity]

        self.store.write(self.key, _ENTRIES.dump_json(entries).decode("utf-8"))
        logger.debug("[RECENT] recorded %s on %s (%d kept)", address, network, len(entries))
        return entries


__all__ = ["RecentScanCache", "STORAGE_KEY", "MAX_RECENT_SCANS"]
