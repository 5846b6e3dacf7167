# honeyscan/core/score.py
from __future__ import annotations

from typing import List, Tuple, Union

from honeyscan.models import Finding, HoneypotAnalysis, RiskAssessment

# score >= threshold -> (level, label); checked high to low
LEVELS = [
    (50, "danger", "High Risk"),
    (20, "warning", "Medium Risk"),
    (0, "safe", "Low Risk"),
]

HOLDER_WARN_BELOW = 100


def risk_score(analysis: HoneypotAnalysis) -> int:
    """Additive heuristic score, unclamped."""
    score = 0

    # Honeypot verdict
    if analysis.honeypot_result.is_honeypot:
        score += 50

    # Sell tax
    sell_tax = analysis.simulation_result.sell_tax
    if sell_tax > 50:
        score += 30
    elif sell_tax > 10:
        score += 15

    # Buy tax
    if analysis.simulation_result.buy_tax > 10:
        score += 10

    # Source not verified (unknown counts as closed)
    if not analysis.contract_code.open_source:
        score += 10

    if analysis.contract_code.has_proxy_calls:
        score += 10

    return score


def level_for_score(score: int) -> Tuple[str, str]:
    for threshold, level, label in LEVELS:
        if score >= threshold:
            return level, label
    return LEVELS[-1][1], LEVELS[-1][2]


def calculate_risk(analysis: HoneypotAnalysis) -> RiskAssessment:
    score = risk_score(analysis)
    level, label = level_for_score(score)
    return RiskAssessment(score=score, level=level, label=label)


def meter_percent(score: int) -> int:
    """Fill of the risk meter: the score capped at 100."""
    return min(score, 100)


def _pct(value: Union[int, float]) -> Union[int, float]:
    # 99.0 -> 99 so descriptions read "99%"
    return int(value) if float(value).is_integer() else value


def generate_findings(analysis: HoneypotAnalysis) -> List[Finding]:
    """Human-readable findings in fixed display order."""
    findings: List[Finding] = []

    if analysis.honeypot_result.is_honeypot:
        findings.append(Finding(
            severity="danger",
            title="Honeypot Detected",
            description="This token shows characteristics of a honeypot scam. "
                        "You may not be able to sell after buying.",
        ))
    else:
        findings.append(Finding(
            severity="success",
            title="Not a Honeypot",
            description="Initial analysis suggests this is not a honeypot token.",
        ))

    buy_tax = analysis.simulation_result.buy_tax
    sell_tax = analysis.simulation_result.sell_tax
    taxes = f"Buy tax: {_pct(buy_tax)}%, Sell tax: {_pct(sell_tax)}%."
    worst = max(buy_tax, sell_tax)
    if worst > 50:
        findings.append(Finding(
            severity="danger",
            title="Extreme Tax Detected",
            description=f"{taxes} Extremely high taxes detected.",
        ))
    elif worst > 10:
        findings.append(Finding(
            severity="warning",
            title="High Tax",
            description=f"{taxes} Higher than typical taxes.",
        ))
    else:
        findings.append(Finding(
            severity="success",
            title="Reasonable Taxes",
            description=f"{taxes} Taxes are within normal range.",
        ))

    if analysis.contract_code.open_source:
        findings.append(Finding(
            severity="success",
            title="Verified Contract",
            description="Contract source code is verified and publicly available.",
        ))
    else:
        findings.append(Finding(
            severity="warning",
            title="Unverified Contract",
            description="Contract source code is not verified. Exercise caution.",
        ))

    # no matching success finding when absent
    if analysis.contract_code.has_proxy_calls:
        findings.append(Finding(
            severity="warning",
            title="Proxy Calls Detected",
            description="Contract contains proxy calls which could be used maliciously.",
        ))

    holders = analysis.holder_analysis.holders
    if holders < HOLDER_WARN_BELOW:
        findings.append(Finding(
            severity="warning",
            title="Low Holder Count",
            description=f"Only {holders} holders detected. Low liquidity risk.",
        ))
    else:
        findings.append(Finding(
            severity="success",
            title="Good Distribution",
            description=f"{holders}+ holders detected. Reasonable token distribution.",
        ))

    token = analysis.token
    if token is not None:
        findings.append(Finding(
            severity="success",
            title="Token Information",
            description=f"Name: {token.name or 'Unknown'}, Symbol: {token.symbol or 'Unknown'}",
        ))

    return findings


def evaluate(analysis: HoneypotAnalysis) -> Tuple[RiskAssessment, List[Finding]]:
    return calculate_risk(analysis), generate_findings(analysis)


__all__ = [
    "LEVELS",
    "risk_score",
    "level_for_score",
    "calculate_risk",
    "meter_percent",
    "generate_findings",
    "evaluate",
]
