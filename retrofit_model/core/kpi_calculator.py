"""KPI calculator for payback, cash-flow series, investment signal and impact."""

import math

import numpy as np

from retrofit_model.models.results import (
    CashFlowPoint,
    EnergyCostResult,
    ImpactSummary,
    InputParameters,
    InvestmentSignal,
)
from retrofit_model.templates.retrofit_defaults import (
    RETROFIT_DEFAULTS,
    SIGNAL_THRESHOLDS,
)


class KPICalculator:
    """
    Calculates retrofit KPIs that do not need root finding.

    Provides simple payback, the cumulative savings series used for
    charting, the investment signal decision table, and lifetime
    carbon/benchmark figures.

    Args:
        trees_per_ton_co2: Trees needed to absorb one tonne CO2 per year.
        industry_avg_payback_years: Payback benchmark for comparisons.
    """

    def __init__(
        self,
        trees_per_ton_co2: float | None = None,
        industry_avg_payback_years: float | None = None,
    ) -> None:
        """Initialize KPI calculator with optional benchmark overrides."""
        self.trees_per_ton_co2 = (
            trees_per_ton_co2
            if trees_per_ton_co2 is not None
            else RETROFIT_DEFAULTS["trees_per_ton_co2"]
        )
        self.industry_avg_payback_years = (
            industry_avg_payback_years
            if industry_avg_payback_years is not None
            else RETROFIT_DEFAULTS["industry_avg_payback_years"]
        )
        if self.trees_per_ton_co2 < 0:
            raise ValueError(
                f"trees_per_ton_co2 must be >= 0, got {self.trees_per_ton_co2}"
            )
        if not self.industry_avg_payback_years > 0:
            raise ValueError(
                "industry_avg_payback_years must be > 0, "
                f"got {self.industry_avg_payback_years}"
            )

    @staticmethod
    def calculate_payback_simple(
        initial_investment: float, annual_cost_savings: float
    ) -> float:
        """
        Calculate simple (undiscounted) payback period.

        Args:
            initial_investment: Upfront cost.
            annual_cost_savings: Flat annual savings.

        Returns:
            Payback period in years. math.inf if savings are not positive.
        """
        if annual_cost_savings <= 0:
            return math.inf
        return initial_investment / annual_cost_savings

    @staticmethod
    def calculate_cash_flow_series(
        initial_investment: float,
        annual_cost_savings: float,
        n_years: int,
    ) -> tuple[CashFlowPoint, ...]:
        """
        Cumulative undiscounted savings for years 0..n_years.

        Year 0 holds ``-initial_investment``; every later year adds
        ``annual_cost_savings``.

        Returns:
            Tuple of n_years + 1 CashFlowPoint entries.
        """
        cash_flows = np.full(n_years + 1, float(annual_cost_savings))
        cash_flows[0] = -float(initial_investment)
        cumulative = np.cumsum(cash_flows)

        return tuple(
            CashFlowPoint(year=year, cumulative_savings=float(value))
            for year, value in enumerate(cumulative)
        )

    @staticmethod
    def classify_signal(
        irr: float | None, payback_period: float
    ) -> InvestmentSignal:
        """
        Classify an investment from IRR (percent) and simple payback.

        Rows of ``SIGNAL_THRESHOLDS`` are evaluated top-down and the first
        match wins. A non-computable IRR never satisfies an IRR threshold.

        Args:
            irr: IRR in percent, or None if not computable.
            payback_period: Simple payback in years (may be math.inf).

        Returns:
            InvestmentSignal.
        """
        for signal_name, min_irr, max_payback in SIGNAL_THRESHOLDS:
            if min_irr is not None and (irr is None or not irr > min_irr):
                continue
            if max_payback is not None and not payback_period < max_payback:
                continue
            return InvestmentSignal[signal_name]

        return InvestmentSignal.REVIEW_REQUIRED

    def calculate_impact(
        self,
        params: InputParameters,
        energy: EnergyCostResult,
        payback_period: float,
        signal: InvestmentSignal,
    ) -> ImpactSummary:
        """
        Lifetime carbon impact and benchmark comparison.

        Args:
            params: Retrofit input parameters.
            energy: Annual energy and cost figures.
            payback_period: Simple payback in years.
            signal: Investment signal for the recommendation text.

        Returns:
            ImpactSummary.
        """
        lifetime_co2 = energy.co2_reduction_tons * params.project_life
        total_savings = energy.annual_cost_savings * params.project_life
        benchmark = self.industry_avg_payback_years

        if math.isfinite(payback_period):
            payback_vs_benchmark = (benchmark - payback_period) / benchmark * 100
        else:
            payback_vs_benchmark = None

        return ImpactSummary(
            lifetime_co2_reduction_tons=lifetime_co2,
            trees_equivalent=int(round(lifetime_co2 * self.trees_per_ton_co2)),
            total_lifetime_savings=total_savings,
            roi_multiple=total_savings / params.initial_investment,
            payback_vs_benchmark_pct=payback_vs_benchmark,
            beats_benchmark=payback_period < benchmark,
            recommendation=signal.recommendation,
        )
