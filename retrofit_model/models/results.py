"""Immutable input and result records for retrofit analysis."""

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

import pandas as pd

from retrofit_model.templates.retrofit_defaults import SIGNAL_RECOMMENDATIONS


class InvestmentSignal(Enum):
    """Decision signal derived from IRR and simple payback."""

    HIGHLY_FAVORABLE = "HIGHLY_FAVORABLE"
    FAVORABLE = "FAVORABLE"
    MARGINAL = "MARGINAL"
    REVIEW_REQUIRED = "REVIEW_REQUIRED"

    @property
    def label(self) -> str:
        """Human-readable signal label, e.g. 'Highly Favorable'."""
        return SIGNAL_RECOMMENDATIONS[self.value]["label"]

    @property
    def recommendation(self) -> str:
        """Recommendation text for reports."""
        return SIGNAL_RECOMMENDATIONS[self.value]["recommendation"]


class SolverMethod(Enum):
    """Root-finding stage that produced the IRR."""

    NEWTON_RAPHSON = "newton_raphson"
    BISECTION = "bisection"
    NOT_COMPUTABLE = "not_computable"


@dataclass(frozen=True)
class InputParameters:
    """
    Operating and cost parameters for one retrofit analysis.

    Powers are in kW, electricity cost in currency/kWh, discount rate
    in percent (e.g. 10.0 for 10%). Values are assumed to be validated
    by the caller; see ``retrofit_model.models.validation``.
    """

    equipment_name: str
    existing_power: float
    proposed_power: float
    operating_hours_per_day: float
    operating_days_per_year: float
    electricity_cost: float
    initial_investment: float
    project_life: int
    discount_rate: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InputParameters":
        """
        Build parameters from a mapping, coercing numeric fields.

        Unknown keys are ignored.

        Raises:
            KeyError: If a required field is missing.
        """
        return cls(
            equipment_name=str(data["equipment_name"]).strip(),
            existing_power=float(data["existing_power"]),
            proposed_power=float(data["proposed_power"]),
            operating_hours_per_day=float(data["operating_hours_per_day"]),
            operating_days_per_year=float(data["operating_days_per_year"]),
            electricity_cost=float(data["electricity_cost"]),
            initial_investment=float(data["initial_investment"]),
            project_life=int(float(data["project_life"])),
            discount_rate=float(data["discount_rate"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class EnergyCostResult:
    """Annual energy, cost and emission figures for baseline and retrofit."""

    existing_annual_consumption: float  # kWh/yr
    proposed_annual_consumption: float  # kWh/yr
    annual_energy_savings: float  # kWh/yr
    existing_annual_cost: float
    proposed_annual_cost: float
    annual_cost_savings: float
    existing_carbon_emissions: float  # t CO2/yr
    proposed_carbon_emissions: float  # t CO2/yr
    co2_reduction_tons: float  # t CO2/yr
    grid_emission_factor: float  # kg CO2/kWh

    @property
    def co2_reduction_kg(self) -> float:
        return self.co2_reduction_tons * 1000.0

    def to_dict(self) -> dict[str, Any]:
        result = asdict(self)
        result["co2_reduction_kg"] = self.co2_reduction_kg
        return result


@dataclass(frozen=True)
class CashFlowPoint:
    """Cumulative undiscounted savings at the end of a project year."""

    year: int
    cumulative_savings: float


@dataclass(frozen=True)
class IRRSolution:
    """
    Outcome of the IRR root search.

    Attributes:
        rate: IRR as a decimal (0.15 for 15%), or None if not computable.
        method: Solver stage that produced the rate.
        iterations: Total iterations spent across both stages.
    """

    rate: float | None
    method: SolverMethod
    iterations: int = 0

    @property
    def is_computable(self) -> bool:
        return self.rate is not None

    @property
    def percent(self) -> float | None:
        """IRR in percent, or None if not computable."""
        if self.rate is None:
            return None
        return self.rate * 100.0


@dataclass(frozen=True)
class FinancialResult:
    """
    Investment metrics derived from annual cost savings.

    ``simple_payback_period`` is ``math.inf`` when savings are not
    positive. ``irr`` is in percent and None when not computable.
    """

    simple_payback_period: float
    npv: float
    irr: float | None
    irr_method: SolverMethod
    cash_flow_series: tuple[CashFlowPoint, ...]
    investment_signal: InvestmentSignal

    @property
    def irr_computable(self) -> bool:
        return self.irr is not None

    @property
    def payback_year(self) -> int | None:
        """First year after year 0 where cumulative savings are non-negative."""
        for point in self.cash_flow_series[1:]:
            if point.cumulative_savings >= 0:
                return point.year
        return None

    def cash_flow_frame(self) -> pd.DataFrame:
        """Cash-flow series as a DataFrame with 'year' and 'cumulative_savings'."""
        return pd.DataFrame(
            {
                "year": [p.year for p in self.cash_flow_series],
                "cumulative_savings": [
                    p.cumulative_savings for p in self.cash_flow_series
                ],
            }
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly mapping. Infinite payback becomes None."""
        payback = self.simple_payback_period
        return {
            "simple_payback_period": payback if math.isfinite(payback) else None,
            "npv": self.npv,
            "irr": self.irr,
            "irr_method": self.irr_method.value,
            "cash_flow_series": [asdict(p) for p in self.cash_flow_series],
            "investment_signal": self.investment_signal.value,
        }


@dataclass(frozen=True)
class ImpactSummary:
    """Lifetime carbon impact and decision insight for one analysis."""

    lifetime_co2_reduction_tons: float
    trees_equivalent: int
    total_lifetime_savings: float
    roi_multiple: float
    payback_vs_benchmark_pct: float | None
    beats_benchmark: bool
    recommendation: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AnalysisResult:
    """Complete output of one retrofit analysis."""

    inputs: InputParameters
    energy: EnergyCostResult
    financial: FinancialResult
    impact: ImpactSummary

    def to_dict(self) -> dict[str, Any]:
        """Flat results mapping used by the history store and exporters."""
        result: dict[str, Any] = {}
        result.update(self.energy.to_dict())
        result.update(self.financial.to_dict())
        result.update(self.impact.to_dict())
        return result

