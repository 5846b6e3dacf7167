import pytest

from honeyscan.models import HoneypotAnalysis, parse_analysis


def test_parses_api_shape():
    a = parse_analysis({
        "honeypotResult": {"isHoneypot": True},
        "simulationResult": {"buyTax": 1.5, "sellTax": 99, "transferTax": 0},
        "holderAnalysis": {"holders": "1234", "successful": True, "highRiskHolders": 3},
        "contractCode": {"openSource": True, "isProxy": False, "hasProxyCalls": True},
        "token": {"name": "Foo", "symbol": "FOO", "decimals": 18, "totalSupply": "1000"},
        "summary": {"risk": "high"},
    })
    assert a.honeypot_result.is_honeypot is True
    assert a.simulation_result.sell_tax == 99
    assert a.holder_analysis.holders == 1234
    assert a.contract_code.has_proxy_calls is True
    assert a.token.symbol == "FOO"
    assert a.is_fallback is False


def test_empty_document_defaults():
    a = parse_analysis({})
    assert a.honeypot_result.is_honeypot is False
    assert a.simulation_result.buy_tax == 0
    assert a.simulation_result.sell_tax == 0
    assert a.holder_analysis.holders == 0
    assert a.contract_code.open_source is False
    assert a.token is None


def test_nulls_and_wrong_types_fall_back_to_defaults():
    a = parse_analysis({
        "honeypotResult": None,
        "simulationResult": {"buyTax": None, "sellTax": "lots"},
        "holderAnalysis": [1, 2, 3],
        "contractCode": "closed",
        "token": None,
    })
    assert a.honeypot_result.is_honeypot is False
    assert a.simulation_result.buy_tax == 0
    assert a.simulation_result.sell_tax == 0
    assert a.holder_analysis.holders == 0
    assert a.contract_code.open_source is False
    assert a.token is None


def test_numeric_total_supply_becomes_text():
    a = parse_analysis({"token": {"totalSupply": 10 ** 24}})
    assert a.token.total_supply == str(10 ** 24)


def test_snake_case_names_also_accepted():
    a = parse_analysis({"contract_code": {"open_source": True}})
    assert a.contract_code.open_source is True


@pytest.mark.parametrize("body", [None, [], "text", 42])
def test_non_object_is_rejected(body):
    with pytest.raises(ValueError):
        parse_analysis(body)


def test_parse_passes_through_models():
    a = HoneypotAnalysis()
    assert parse_analysis(a) is a
