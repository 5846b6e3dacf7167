# honeyscan/utils/honeypot.py
# Purpose: One GET to the honeypot.is risk API, with a deterministic offline profile.
#
# When the API cannot be reached (or answers garbage) the gateway synthesizes a
# demo document from the address instead of failing the scan. That degraded mode
# is always logged as "[GATEWAY] FALLBACK" and the document is marked with
# is_fallback, so it never passes for a real API answer.
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from honeyscan.config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from honeyscan.errors import TransportError
from honeyscan.models import HoneypotAnalysis, parse_analysis
from honeyscan.networks import get_network
from honeyscan.utils.http import http_get_json

logger = logging.getLogger(__name__)

# last address char that selects the honeypot demo profile
HONEYPOT_SUFFIXES = {"a", "b", "c", "d"}

HttpGet = Callable[..., Any]


def create_fallback_data(address: str) -> HoneypotAnalysis:
    """Demo document derived from the address: honeypot iff it ends in a-d."""
    is_honeypot = address[-1:].lower() in HONEYPOT_SUFFIXES

    doc: Dict[str, Any] = {
        "honeypotResult": {
            "isHoneypot": is_honeypot,
        },
        "simulationResult": {
            "buyTax": 10 if is_honeypot else 2,
            "sellTax": 99 if is_honeypot else 2,
            "transferTax": 0,
        },
        "holderAnalysis": {
            "holders": 50 if is_honeypot else 1000,
            "successful": not is_honeypot,
            "highRiskHolders": 10 if is_honeypot else 0,
        },
        "contractCode": {
            "openSource": not is_honeypot,
            "isProxy": False,
            "hasProxyCalls": is_honeypot,
        },
        "token": {
            "name": "Sample Token",
            "symbol": "SMPL",
            "decimals": 18,
            "totalSupply": "1000000000000000000000000",
        },
    }
    return parse_analysis(doc).mark_fallback()


class HoneypotGateway:
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        fallback_enabled: bool = True,
        http_get: Optional[HttpGet] = None,
    ):
        self.api_url = api_url
        self.timeout = timeout
        self.fallback_enabled = fallback_enabled
        self._http_get = http_get or http_get_json

    def fetch(self, address: str, network_key: str) -> HoneypotAnalysis:
        """Fetch the analysis for a pre-validated address on the given network."""
        network = get_network(network_key)
        params = {"address": address, "chainID": network.chain_id}
        logger.debug("[GATEWAY] GET %s params=%s timeout=%ss", self.api_url, params, self.timeout)

        try:
            body = self._http_get(self.api_url, params=params, timeout=self.timeout)
            analysis = parse_analysis(body)
        except (TransportError, ValueError) as e:
            if not self.fallback_enabled:
                logger.error("[GATEWAY] API FAIL (fallback disabled) address=%s chain=%s -> %s",
                             address, network.key, e)
                if isinstance(e, TransportError):
                    raise
                raise TransportError(str(e)) from e
            logger.warning("[GATEWAY] FALLBACK address=%s chain=%s reason=%s",
                           address, network.key, e)
            return create_fallback_data(address)

        logger.info("[GATEWAY] API OK address=%s chain=%s honeypot=%s",
                    address, network.key, analysis.honeypot_result.is_honeypot)
        return analysis


__all__ = ["HoneypotGateway", "create_fallback_data", "HONEYPOT_SUFFIXES"]
