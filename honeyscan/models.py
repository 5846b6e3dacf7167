# honeyscan/models.py
# Purpose: pydantic models for the risk API document, scan results and history.
#
# The API document is parsed leniently: missing sections, nulls, wrong-typed
# sections and wrong-typed fields all collapse to neutral defaults here, so the
# evaluator never has to re-check for absence.
from __future__ import annotations

from typing import Any, List, Literal, Mapping, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationError,
    field_validator,
    model_validator,
)

Severity = Literal["success", "warning", "danger"]
RiskLevel = Literal["safe", "warning", "danger"]


class NetworkDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    chain_id: int
    explorer_url: str  # address-page prefix, address is appended

    def explorer_link(self, address: str) -> str:
        return f"{self.explorer_url}{address}"


# ---------- API document ----------

class _Section(BaseModel):
    """Base for API sub-objects: nulls dropped, bad values fall back to defaults."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_bad_value(cls, value, handler, info):
        try:
            return handler(value)
        except ValidationError:
            field = cls.model_fields[info.field_name]
            return field.get_default(call_default_factory=True)


class HoneypotResult(_Section):
    is_honeypot: bool = Field(False, alias="isHoneypot")


class SimulationResult(_Section):
    buy_tax: float = Field(0.0, alias="buyTax")
    sell_tax: float = Field(0.0, alias="sellTax")
    transfer_tax: float = Field(0.0, alias="transferTax")


class HolderAnalysis(_Section):
    holders: int = 0
    successful: bool = False
    high_risk_holders: int = Field(0, alias="highRiskHolders")


class ContractCode(_Section):
    open_source: bool = Field(False, alias="openSource")
    is_proxy: bool = Field(False, alias="isProxy")
    has_proxy_calls: bool = Field(False, alias="hasProxyCalls")


class TokenInfo(_Section):
    name: Optional[str] = None
    symbol: Optional[str] = None
    decimals: Optional[int] = None
    total_supply: Optional[str] = Field(None, alias="totalSupply")

    @field_validator("total_supply", mode="before")
    @classmethod
    def _supply_as_text(cls, v: Any) -> Any:
        # raw supplies overflow JS numbers, the API sends them as strings but not always
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


_SECTIONS = {
    "honeypotResult": "honeypot_result",
    "simulationResult": "simulation_result",
    "holderAnalysis": "holder_analysis",
    "contractCode": "contract_code",
    "token": "token",
}


class HoneypotAnalysis(BaseModel):
    """Risk API answer with every field optional and defaulted."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    honeypot_result: HoneypotResult = Field(default_factory=HoneypotResult, alias="honeypotResult")
    simulation_result: SimulationResult = Field(default_factory=SimulationResult, alias="simulationResult")
    holder_analysis: HolderAnalysis = Field(default_factory=HolderAnalysis, alias="holderAnalysis")
    contract_code: ContractCode = Field(default_factory=ContractCode, alias="contractCode")
    # stays None when absent: the token finding is only emitted when present
    token: Optional[TokenInfo] = None

    _fallback: bool = PrivateAttr(default=False)

    @model_validator(mode="before")
    @classmethod
    def _sections_only(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        section_names = set(_SECTIONS) | set(_SECTIONS.values())
        return {
            k: v for k, v in data.items()
            if k not in section_names or isinstance(v, Mapping)
        }

    @property
    def is_fallback(self) -> bool:
        return self._fallback

    def mark_fallback(self) -> "HoneypotAnalysis":
        self._fallback = True
        return self


def parse_analysis(doc: Any) -> HoneypotAnalysis:
    """Parse a decoded JSON body. Raises ValueError only if it is not an object."""
    if isinstance(doc, HoneypotAnalysis):
        return doc
    if not isinstance(doc, Mapping):
        raise ValueError(f"expected a JSON object, got {type(doc).__name__}")
    return HoneypotAnalysis.model_validate(doc)


# ---------- derived ----------

class RiskAssessment(BaseModel):
    score: int = Field(ge=0)
    level: RiskLevel
    label: str

    @property
    def meter_percent(self) -> int:
        return min(self.score, 100)


class Finding(BaseModel):
    severity: Severity
    title: str
    description: str


class RecentScanEntry(BaseModel):
    address: str
    network: str
    timestamp: int  # epoch ms


class ScanResult(BaseModel):
    address: str
    checksum_address: str
    short_address: str
    network: str
    network_name: str
    explorer_link: str
    source: Literal["api", "fallback"]
    assessment: RiskAssessment
    findings: List[Finding]


__all__ = [
    "NetworkDescriptor",
    "HoneypotResult",
    "SimulationResult",
    "HolderAnalysis",
    "ContractCode",
    "TokenInfo",
    "HoneypotAnalysis",
    "parse_analysis",
    "RiskAssessment",
    "Finding",
    "RecentScanEntry",
    "ScanResult",
]
