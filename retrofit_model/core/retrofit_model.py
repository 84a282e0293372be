"""Main RetrofitModel class orchestrating all calculations."""

import logging
from typing import Any

from retrofit_model.core.dcf_engine import DCFEngine
from retrofit_model.core.kpi_calculator import KPICalculator
from retrofit_model.models.energy_cost_model import EnergyCostModel
from retrofit_model.models.results import (
    AnalysisResult,
    EnergyCostResult,
    FinancialResult,
    InputParameters,
)
from retrofit_model.models.validation import InputValidationError, validate_inputs

logger = logging.getLogger(__name__)


class RetrofitModel:
    """
    Main orchestrator for retrofit investment analysis.

    Runs the energy and cost reduction model, then derives payback,
    NPV, IRR, the cumulative cash-flow series and the investment signal.
    Holds no state between calls, so one instance can serve concurrent
    callers.

    Args:
        grid_emission_factor: kg CO2/kWh. Defaults to the template value.
        solver_config: Overrides for the IRR solver settings.
        trees_per_ton_co2: Override for the tree-equivalent conversion.
        industry_avg_payback_years: Override for the payback benchmark.

    Example:
        >>> model = RetrofitModel()
        >>> params = InputParameters(
        ...     equipment_name="Compressor #3",
        ...     existing_power=37.3,
        ...     proposed_power=29.8,
        ...     operating_hours_per_day=16,
        ...     operating_days_per_year=300,
        ...     electricity_cost=7.5,
        ...     initial_investment=185000,
        ...     project_life=10,
        ...     discount_rate=10,
        ... )
        >>> result = model.analyze(params)
        >>> result.financial.investment_signal
        <InvestmentSignal.HIGHLY_FAVORABLE: 'HIGHLY_FAVORABLE'>
    """

    def __init__(
        self,
        grid_emission_factor: float | None = None,
        solver_config: dict[str, Any] | None = None,
        trees_per_ton_co2: float | None = None,
        industry_avg_payback_years: float | None = None,
    ) -> None:
        """Initialize the sub-models."""
        self.energy_cost_model = EnergyCostModel(grid_emission_factor)
        self.dcf_engine = DCFEngine(solver_config)
        self.kpi_calculator = KPICalculator(
            trees_per_ton_co2=trees_per_ton_co2,
            industry_avg_payback_years=industry_avg_payback_years,
        )

    def compute_energy_cost(self, params: InputParameters) -> EnergyCostResult:
        """Annual energy, cost and emission deltas for the retrofit."""
        return self.energy_cost_model.calculate(params)

    def compute_financials(
        self,
        params: InputParameters,
        energy_cost: EnergyCostResult,
    ) -> FinancialResult:
        """
        Calculate investment metrics from annual cost savings.

        Args:
            params: Retrofit input parameters.
            energy_cost: Result of ``compute_energy_cost``.

        Returns:
            FinancialResult with payback, NPV, IRR (percent or None),
            cash-flow series and investment signal.
        """
        savings = energy_cost.annual_cost_savings
        n_years = params.project_life

        payback = self.kpi_calculator.calculate_payback_simple(
            params.initial_investment, savings
        )

        npv = self.dcf_engine.calculate_annuity_npv(
            initial_investment=params.initial_investment,
            annual_amount=savings,
            discount_rate=params.discount_rate / 100,
            n_years=n_years,
        )

        irr_solution = self.dcf_engine.calculate_irr(
            initial_investment=params.initial_investment,
            annual_amount=savings,
            n_years=n_years,
        )
        irr = irr_solution.percent

        cash_flow_series = self.kpi_calculator.calculate_cash_flow_series(
            params.initial_investment, savings, n_years
        )

        signal = self.kpi_calculator.classify_signal(irr, payback)

        return FinancialResult(
            simple_payback_period=payback,
            npv=npv,
            irr=irr,
            irr_method=irr_solution.method,
            cash_flow_series=cash_flow_series,
            investment_signal=signal,
        )

    def analyze(self, params: InputParameters) -> AnalysisResult:
        """
        Run the full analysis for pre-validated parameters.

        Args:
            params: Retrofit input parameters.

        Returns:
            AnalysisResult with energy, financial and impact records.
        """
        energy = self.compute_energy_cost(params)
        financial = self.compute_financials(params, energy)
        impact = self.kpi_calculator.calculate_impact(
            params,
            energy,
            financial.simple_payback_period,
            financial.investment_signal,
        )

        logger.info(
            "Analyzed '%s': payback=%.2f yr, npv=%.2f, irr=%s, signal=%s",
            params.equipment_name,
            financial.simple_payback_period,
            financial.npv,
            "n/a" if financial.irr is None else f"{financial.irr:.2f}%",
            financial.investment_signal.value,
        )

        return AnalysisResult(
            inputs=params,
            energy=energy,
            financial=financial,
            impact=impact,
        )

    def analyze_form(self, form_data: dict[str, Any]) -> AnalysisResult:
        """
        Validate raw form values and run the analysis.

        Args:
            form_data: Mapping of field names to raw values.

        Returns:
            AnalysisResult.

        Raises:
            InputValidationError: If any field violates its rule.
        """
        errors = validate_inputs(form_data)
        if errors:
            raise InputValidationError(errors)
        return self.analyze(InputParameters.from_dict(form_data))


def compute_financials(
    params: InputParameters, energy_cost: EnergyCostResult
) -> FinancialResult:
    """Functional shortcut using default model settings."""
    return RetrofitModel().compute_financials(params, energy_cost)
