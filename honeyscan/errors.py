# honeyscan/errors.py
# Purpose: Error taxonomy shared by the scanner, the API and the CLI.


class HoneyscanError(Exception):
    """Base class for every error raised on purpose by honeyscan."""


class InvalidAddressError(HoneyscanError, ValueError):
    """User input is not a 0x-prefixed 40-hex-char contract address."""


class UnknownNetworkError(HoneyscanError, ValueError):
    """Network key is not in the registry."""


class TransportError(HoneyscanError):
    """Outbound call to the risk API failed (network, status or body)."""


class ScanFailedError(HoneyscanError):
    """Anything else that went wrong while scanning; message is user-safe."""

    DEFAULT_MESSAGE = "Failed to scan contract. Please try again."

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)


__all__ = [
    "HoneyscanError",
    "InvalidAddressError",
    "UnknownNetworkError",
    "TransportError",
    "ScanFailedError",
]
