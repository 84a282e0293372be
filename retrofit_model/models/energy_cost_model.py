"""Energy and cost reduction model for equipment retrofits."""

import logging

from retrofit_model.models.results import EnergyCostResult, InputParameters
from retrofit_model.templates.retrofit_defaults import RETROFIT_DEFAULTS

logger = logging.getLogger(__name__)


class EnergyCostModel:
    """
    Converts power, schedule and tariff inputs into annual deltas.

    Consumption is power × hours/day × days/year. Costs apply a flat
    tariff and emissions a flat grid emission factor. No validation is
    performed: a retrofit that does not reduce power yields non-positive
    savings and the caller decides what to do with it.

    Args:
        grid_emission_factor: kg CO2 per kWh delivered by the grid.
            Defaults to ``RETROFIT_DEFAULTS['grid_emission_factor']``.

    Example:
        >>> model = EnergyCostModel()
        >>> result = model.calculate(params)
        >>> result.annual_energy_savings
        36000.0
    """

    def __init__(self, grid_emission_factor: float | None = None) -> None:
        """Initialize with an optional grid emission factor override."""
        if grid_emission_factor is None:
            grid_emission_factor = RETROFIT_DEFAULTS["grid_emission_factor"]
        if grid_emission_factor < 0:
            raise ValueError(
                f"grid_emission_factor must be >= 0, got {grid_emission_factor}"
            )
        self.grid_emission_factor = float(grid_emission_factor)

    def calculate(self, params: InputParameters) -> EnergyCostResult:
        """
        Calculate annual consumption, cost and emissions.

        Args:
            params: Retrofit input parameters.

        Returns:
            EnergyCostResult with baseline, retrofit and saved quantities.
        """
        existing_consumption = self.annual_consumption(
            params.existing_power,
            params.operating_hours_per_day,
            params.operating_days_per_year,
        )
        proposed_consumption = self.annual_consumption(
            params.proposed_power,
            params.operating_hours_per_day,
            params.operating_days_per_year,
        )
        energy_savings = existing_consumption - proposed_consumption

        existing_cost = existing_consumption * params.electricity_cost
        proposed_cost = proposed_consumption * params.electricity_cost
        cost_savings = energy_savings * params.electricity_cost

        existing_emissions = self._emissions_tons(existing_consumption)
        proposed_emissions = self._emissions_tons(proposed_consumption)
        co2_reduction = self._emissions_tons(energy_savings)

        if energy_savings <= 0:
            logger.warning(
                "Retrofit of '%s' does not reduce consumption "
                "(existing %.2f kW, proposed %.2f kW)",
                params.equipment_name,
                params.existing_power,
                params.proposed_power,
            )

        return EnergyCostResult(
            existing_annual_consumption=existing_consumption,
            proposed_annual_consumption=proposed_consumption,
            annual_energy_savings=energy_savings,
            existing_annual_cost=existing_cost,
            proposed_annual_cost=proposed_cost,
            annual_cost_savings=cost_savings,
            existing_carbon_emissions=existing_emissions,
            proposed_carbon_emissions=proposed_emissions,
            co2_reduction_tons=co2_reduction,
            grid_emission_factor=self.grid_emission_factor,
        )

    @staticmethod
    def annual_consumption(
        power_kw: float, hours_per_day: float, days_per_year: float
    ) -> float:
        """Annual energy consumption in kWh."""
        return power_kw * hours_per_day * days_per_year

    def _emissions_tons(self, energy_kwh: float) -> float:
        """Convert kWh to tonnes of CO2 using the grid emission factor."""
        return energy_kwh * self.grid_emission_factor / 1000


def compute_energy_cost(
    params: InputParameters, grid_emission_factor: float | None = None
) -> EnergyCostResult:
    """Functional shortcut for ``EnergyCostModel(...).calculate(params)``."""
    return EnergyCostModel(grid_emission_factor).calculate(params)
