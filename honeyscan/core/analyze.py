# honeyscan/core/analyze.py
# Purpose: validate -> gateway -> evaluator -> history, with the user-facing error policy.
from __future__ import annotations

import logging
from typing import List, Optional

from honeyscan.config import Settings
from honeyscan.core.recent import RecentScanCache
from honeyscan.core.score import evaluate
from honeyscan.errors import ScanFailedError
from honeyscan.models import RecentScanEntry, ScanResult
from honeyscan.networks import get_network
from honeyscan.utils.addr import format_address, require_address, to_checksum, validate_address
from honeyscan.utils.honeypot import HoneypotGateway
from honeyscan.utils.storage import JsonFileStore

logger = logging.getLogger(__name__)


class Scanner:
    def __init__(self, gateway: HoneypotGateway, cache: RecentScanCache):
        self.gateway = gateway
        self.cache = cache

    def validate(self, address: str) -> bool:
        return validate_address(address)

    def scan(self, address: str, network: str) -> ScanResult:
        """
        Scan one contract and record it in the history.

        Raises InvalidAddressError / UnknownNetworkError for bad input (nothing
        is fetched or recorded), ScanFailedError for anything else.
        """
        address = require_address(address)
        net = get_network(network)
        logger.info("[SCAN] start chain=%s addr=%s", net.key, address)

        try:
            analysis = self.gateway.fetch(address, net.key)
            assessment, findings = evaluate(analysis)
            result = ScanResult(
                address=address,
                checksum_address=to_checksum(address),
                short_address=format_address(address),
                network=net.key,
                network_name=net.name,
                explorer_link=net.explorer_link(address),
                source="fallback" if analysis.is_fallback else "api",
                assessment=assessment,
                findings=findings,
            )
        except Exception as e:
            logger.exception("[SCAN] FAIL chain=%s addr=%s -> %s", net.key, address, e)
            raise ScanFailedError() from e

        try:
            self.cache.record(address, net.key)
        except Exception as e:
            logger.exception("[SCAN] history write FAIL addr=%s -> %s", address, e)
            raise ScanFailedError() from e

        logger.info("[SCAN] done chain=%s addr=%s score=%d level=%s source=%s",
                    net.key, address, assessment.score, assessment.level, result.source)
        return result

    def recent_scans(self) -> List[RecentScanEntry]:
        return self.cache.list()


def build_scanner(settings: Optional[Settings] = None) -> Scanner:
    """Wire gateway, on-disk history and scanner from settings."""
    settings = settings or Settings.from_env()
    gateway = HoneypotGateway(
        api_url=settings.api_url,
        timeout=settings.api_timeout,
        fallback_enabled=settings.fallback_enabled,
    )
    cache = RecentScanCache(JsonFileStore(settings.data_dir))
    return Scanner(gateway, cache)


__all__ = ["Scanner", "build_scanner"]
