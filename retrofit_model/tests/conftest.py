"""Shared fixtures for retrofit model tests."""

import pytest

from retrofit_model.models.results import InputParameters


@pytest.fixture
def compressor_params() -> InputParameters:
    """Compressor retrofit used as the regression case."""
    return InputParameters(
        equipment_name="Air Compressor Line 2",
        existing_power=37.3,
        proposed_power=29.8,
        operating_hours_per_day=16,
        operating_days_per_year=300,
        electricity_cost=7.5,
        initial_investment=185000,
        project_life=10,
        discount_rate=10,
    )


@pytest.fixture
def compressor_form() -> dict:
    """Raw form values for the compressor retrofit."""
    return {
        "equipment_name": "Air Compressor Line 2",
        "existing_power": "37.3",
        "proposed_power": "29.8",
        "operating_hours_per_day": "16",
        "operating_days_per_year": "300",
        "electricity_cost": "7.5",
        "initial_investment": "185000",
        "project_life": "10",
        "discount_rate": "10",
    }
