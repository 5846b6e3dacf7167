# honeyscan/utils/addr.py
import re

from web3 import Web3

from honeyscan.errors import InvalidAddressError

_ADDRESS_RE = re.compile(r"0x[0-9a-fA-F]{40}")

INVALID_ADDRESS_MESSAGE = (
    "Please enter a valid contract address (0x followed by 40 hexadecimal characters)"
)


def validate_address(raw) -> bool:
    """True iff raw is exactly '0x' + 40 hex chars. Never raises."""
    if not isinstance(raw, str):
        return False
    return _ADDRESS_RE.fullmatch(raw) is not None


def require_address(raw) -> str:
    s = raw.strip() if isinstance(raw, str) else raw
    if not validate_address(s):
        raise InvalidAddressError(INVALID_ADDRESS_MESSAGE)
    return s


def autoprefix(raw: str) -> str:
    """Prepend '0x' to a non-empty value typed without it."""
    s = (raw or "").strip()
    if s and not s.startswith("0x"):
        return "0x" + s
    return s


def format_address(address: str) -> str:
    """Shorten for display: 0x1234...abcd"""
    return f"{address[:6]}...{address[-4:]}"


def to_checksum(address: str) -> str:
    return Web3.to_checksum_address(address)
