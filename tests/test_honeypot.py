import logging

import pytest
import requests

from conftest import HONEYPOT_ADDR, SAFE_ADDR, FakeHttp
from honeyscan.errors import TransportError, UnknownNetworkError
from honeyscan.utils import http
from honeyscan.utils.honeypot import HoneypotGateway, create_fallback_data

API_BODY = {
    "token": {"name": "Real", "symbol": "REAL", "decimals": 18, "totalSupply": "5"},
    "honeypotResult": {"isHoneypot": False},
    "simulationResult": {"buyTax": 0, "sellTax": 0, "transferTax": 0},
    "holderAnalysis": {"holders": "4000", "successful": "3990", "highRiskHolders": 0},
    "contractCode": {"openSource": True, "rootOpenSource": True, "isProxy": False, "hasProxyCalls": False},
}


@pytest.mark.parametrize("last", list("abcdABCD"))
def test_fallback_honeypot_profile(last):
    a = create_fallback_data("0x" + "1" * 39 + last)
    assert a.is_fallback
    assert a.honeypot_result.is_honeypot is True
    assert a.simulation_result.sell_tax == 99
    assert a.simulation_result.buy_tax == 10
    assert a.holder_analysis.holders == 50
    assert a.contract_code.open_source is False
    assert a.contract_code.has_proxy_calls is True


@pytest.mark.parametrize("last", list("0123456789efEF"))
def test_fallback_safe_profile(last):
    a = create_fallback_data("0x" + "1" * 39 + last)
    assert a.honeypot_result.is_honeypot is False
    assert a.simulation_result.sell_tax == 2
    assert a.holder_analysis.holders == 1000
    assert a.contract_code.open_source is True
    assert a.contract_code.has_proxy_calls is False
    assert a.token.symbol == "SMPL"


def test_fallback_is_deterministic():
    assert create_fallback_data(HONEYPOT_ADDR) == create_fallback_data(HONEYPOT_ADDR)


def test_fetch_sends_address_and_chain_id():
    fake = FakeHttp(body=API_BODY)
    gw = HoneypotGateway(api_url="https://example.test/IsHoneypot", timeout=3, http_get=fake)
    a = gw.fetch(SAFE_ADDR, "bsc")

    assert fake.calls == [{
        "url": "https://example.test/IsHoneypot",
        "params": {"address": SAFE_ADDR, "chainID": 56},
        "timeout": 3,
    }]
    assert a.is_fallback is False
    assert a.token.name == "Real"
    assert a.holder_analysis.holders == 4000


def test_transport_failure_uses_fallback_and_logs(caplog, offline_http):
    gw = HoneypotGateway(http_get=offline_http)
    with caplog.at_level(logging.WARNING, logger="honeyscan.utils.honeypot"):
        a = gw.fetch(HONEYPOT_ADDR, "eth")
    assert a.is_fallback
    assert a.honeypot_result.is_honeypot is True
    assert "[GATEWAY] FALLBACK" in caplog.text


@pytest.mark.parametrize("body", [None, [], "oops"])
def test_non_object_body_uses_fallback(body):
    gw = HoneypotGateway(http_get=FakeHttp(body=body))
    assert gw.fetch(SAFE_ADDR, "eth").is_fallback


def test_fallback_disabled_raises(offline_http):
    gw = HoneypotGateway(fallback_enabled=False, http_get=offline_http)
    with pytest.raises(TransportError):
        gw.fetch(SAFE_ADDR, "eth")


def test_fallback_disabled_bad_body_raises():
    gw = HoneypotGateway(fallback_enabled=False, http_get=FakeHttp(body=[1]))
    with pytest.raises(TransportError):
        gw.fetch(SAFE_ADDR, "eth")


def test_unknown_network_is_not_absorbed():
    fake = FakeHttp(body=API_BODY)
    with pytest.raises(UnknownNetworkError):
        HoneypotGateway(http_get=fake).fetch(SAFE_ADDR, "polygon")
    assert fake.calls == []


class FakeResponse:
    def __init__(self, status_code=200, body=None, bad_json=False):
        self.status_code = status_code
        self._body = body
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value")
        return self._body


def test_http_get_json_ok(monkeypatch):
    seen = {}

    def fake_get(url, params=None, timeout=None):
        seen.update(url=url, params=params, timeout=timeout)
        return FakeResponse(body={"ok": 1})

    monkeypatch.setattr(http.requests, "get", fake_get)
    assert http.http_get_json("https://x.test", {"a": 1}, timeout=2) == {"ok": 1}
    assert seen == {"url": "https://x.test", "params": {"a": 1}, "timeout": 2}


@pytest.mark.parametrize("response", [
    FakeResponse(status_code=404),
    FakeResponse(status_code=500),
    FakeResponse(status_code=200, bad_json=True),
])
def test_http_get_json_failures(monkeypatch, response):
    monkeypatch.setattr(http.requests, "get", lambda *a, **k: response)
    with pytest.raises(TransportError):
        http.http_get_json("https://x.test")


def test_http_get_json_connection_error(monkeypatch):
    def boom(*a, **k):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(http.requests, "get", boom)
    with pytest.raises(TransportError):
        http.http_get_json("https://x.test")
