# honeyscan/utils/http.py
from typing import Any, Optional

import requests

from honeyscan.errors import TransportError

DEFAULT_TIMEOUT = 10.0


def http_get_json(url: str, params: Optional[dict] = None, timeout: float = DEFAULT_TIMEOUT) -> Any:
    """
    Single GET with a bounded timeout. Returns the decoded JSON body.
    Raises TransportError on connection errors, non-2xx status or a body
    that is not JSON. No retries.
    """
    try:
        resp = requests.get(url, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(f"request failed: {e}") from e

    if not 200 <= resp.status_code < 300:
        raise TransportError(f"API request failed with status {resp.status_code}")

    try:
        return resp.json()
    except ValueError as e:
        raise TransportError(f"malformed JSON body: {e}") from e
