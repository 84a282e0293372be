"""Tests for the EnergyCostModel."""

from dataclasses import replace

import pytest

from retrofit_model.models.energy_cost_model import EnergyCostModel, compute_energy_cost
from retrofit_model.models.results import InputParameters


class TestEnergyCostModel:
    """Tests for annual energy, cost and emission calculations."""

    @pytest.fixture
    def model(self) -> EnergyCostModel:
        """Create EnergyCostModel with the default grid factor."""
        return EnergyCostModel()

    def test_annual_consumption(
        self, model: EnergyCostModel, compressor_params: InputParameters
    ) -> None:
        """Consumption is power × hours/day × days/year."""
        result = model.calculate(compressor_params)

        assert result.existing_annual_consumption == pytest.approx(37.3 * 16 * 300)
        assert result.proposed_annual_consumption == pytest.approx(29.8 * 16 * 300)

    def test_scenario_savings(
        self, model: EnergyCostModel, compressor_params: InputParameters
    ) -> None:
        """Compressor case saves 36,000 kWh and 270,000 per year."""
        result = model.calculate(compressor_params)

        assert result.annual_energy_savings == pytest.approx(36000.0)
        assert result.annual_cost_savings == pytest.approx(270000.0)
        cost_delta = result.existing_annual_cost - result.proposed_annual_cost
        assert cost_delta == pytest.approx(result.annual_cost_savings)

    def test_default_emission_factor(
        self, model: EnergyCostModel, compressor_params: InputParameters
    ) -> None:
        """Emissions use 0.82 kg CO2/kWh by default."""
        result = model.calculate(compressor_params)

        assert result.grid_emission_factor == pytest.approx(0.82)
        # 36000 kWh × 0.82 kg/kWh / 1000 = 29.52 t
        assert result.co2_reduction_tons == pytest.approx(29.52)
        assert result.co2_reduction_kg == pytest.approx(29520.0)
        emission_delta = (
            result.existing_carbon_emissions - result.proposed_carbon_emissions
        )
        assert emission_delta == pytest.approx(result.co2_reduction_tons)

    def test_custom_emission_factor(self, compressor_params: InputParameters) -> None:
        """An injected grid factor replaces the default."""
        result = EnergyCostModel(grid_emission_factor=0.5).calculate(compressor_params)

        assert result.grid_emission_factor == pytest.approx(0.5)
        assert result.co2_reduction_tons == pytest.approx(18.0)

    def test_zero_emission_factor(self, compressor_params: InputParameters) -> None:
        """A carbon-free grid yields zero emissions but unchanged savings."""
        result = EnergyCostModel(grid_emission_factor=0.0).calculate(compressor_params)

        assert result.co2_reduction_tons == 0.0
        assert result.annual_cost_savings == pytest.approx(270000.0)

    def test_negative_emission_factor_rejected(self) -> None:
        """Negative grid factors raise ValueError."""
        with pytest.raises(ValueError, match="grid_emission_factor"):
            EnergyCostModel(grid_emission_factor=-0.1)

    def test_no_power_reduction_does_not_raise(
        self, model: EnergyCostModel, compressor_params: InputParameters
    ) -> None:
        """A retrofit drawing more power gives negative savings, not an error."""
        params = replace(compressor_params, proposed_power=40.0)
        result = model.calculate(params)

        assert result.annual_energy_savings < 0
        assert result.annual_cost_savings < 0
        assert result.co2_reduction_tons < 0

    def test_deterministic(
        self, model: EnergyCostModel, compressor_params: InputParameters
    ) -> None:
        """Identical inputs give identical results."""
        assert model.calculate(compressor_params) == model.calculate(compressor_params)

    def test_functional_shortcut(self, compressor_params: InputParameters) -> None:
        """compute_energy_cost matches the class API."""
        assert compute_energy_cost(compressor_params) == EnergyCostModel().calculate(
            compressor_params
        )
        assert compute_energy_cost(compressor_params, 0.5).grid_emission_factor == 0.5
