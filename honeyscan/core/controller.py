# honeyscan/core/controller.py
# Purpose: Command handlers for a front end. Keeps exactly one view state visible.
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, List, Optional, Protocol, Tuple

from honeyscan.core.analyze import Scanner
from honeyscan.errors import HoneyscanError, ScanFailedError
from honeyscan.models import RecentScanEntry
from honeyscan.utils.addr import INVALID_ADDRESS_MESSAGE

logger = logging.getLogger(__name__)


class ViewState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULTS = "results"
    ERROR = "error"


class PresentationPort(Protocol):
    def show(self, state: ViewState, payload: Any = None) -> None:
        """Make `state` the only visible panel. Payload: ScanResult for RESULTS, str for ERROR."""

    def render_recent(self, entries: List[RecentScanEntry]) -> None: ...


class ScanController:
    def __init__(self, scanner: Scanner, port: PresentationPort):
        self.scanner = scanner
        self.port = port
        self._state = ViewState.IDLE

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def busy(self) -> bool:
        """True while a scan is running; the scan trigger should be disabled."""
        return self._state is ViewState.LOADING

    def _set(self, state: ViewState, payload: Any = None) -> None:
        self._state = state
        self.port.show(state, payload)

    def start(self) -> None:
        self._set(ViewState.IDLE)
        self.port.render_recent(self.scanner.recent_scans())

    def handle_scan(self, address: str, network: str) -> None:
        if self.busy:
            logger.debug("[CONTROLLER] scan ignored, one already running")
            return

        address = (address or "").strip()
        if not self.scanner.validate(address):
            self._set(ViewState.ERROR, INVALID_ADDRESS_MESSAGE)
            return

        self._set(ViewState.LOADING)
        try:
            result = self.scanner.scan(address, network)
        except HoneyscanError as e:
            self._set(ViewState.ERROR, str(e) or ScanFailedError.DEFAULT_MESSAGE)
        except Exception as e:
            logger.exception("[CONTROLLER] unexpected scan error: %s", e)
            self._set(ViewState.ERROR, ScanFailedError.DEFAULT_MESSAGE)
        else:
            self._set(ViewState.RESULTS, result)
            self.port.render_recent(self.scanner.recent_scans())
        finally:
            # loading never survives an exit path (e.g. KeyboardInterrupt)
            if self._state is ViewState.LOADING:
                self._set(ViewState.IDLE)

    def dismiss(self) -> None:
        self._set(ViewState.IDLE)

    def select_recent(self, index: int) -> Optional[Tuple[str, str]]:
        """(address, network) of a history entry, to refill the form."""
        entries = self.scanner.recent_scans()
        if 0 <= index < len(entries):
            entry = entries[index]
            return entry.address, entry.network
        return None


__all__ = ["ViewState", "PresentationPort", "ScanController"]
