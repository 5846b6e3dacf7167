# honeyscan/networks.py
# Purpose: Static network registry (key -> chain id + block explorer).

import logging
from typing import Dict, List

from honeyscan.errors import UnknownNetworkError
from honeyscan.models import NetworkDescriptor

logger = logging.getLogger(__name__)

NETWORKS: Dict[str, NetworkDescriptor] = {
    "eth": NetworkDescriptor(
        key="eth",
        name="Ethereum",
        chain_id=1,
        explorer_url="https://etherscan.io/address/",
    ),
    "bsc": NetworkDescriptor(
        key="bsc",
        name="Binance Smart Chain",
        chain_id=56,
        explorer_url="https://bscscan.com/address/",
    ),
    "base": NetworkDescriptor(
        key="base",
        name="Base",
        chain_id=8453,
        explorer_url="https://basescan.org/address/",
    ),
}

DEFAULT_NETWORK = "eth"


def get_network(key: str) -> NetworkDescriptor:
    """Look up a network by key. Unknown keys are a caller error."""
    try:
        return NETWORKS[key]
    except (KeyError, TypeError):
        logger.debug("[NETWORKS] unknown network key %r", key)
        raise UnknownNetworkError(
            f"Unknown network: {key!r}. Expected one of: {', '.join(NETWORKS)}"
        ) from None


def network_keys() -> List[str]:
    return list(NETWORKS)


__all__ = ["NETWORKS", "DEFAULT_NETWORK", "get_network", "network_keys"]
