"""
Retrofit Investment Model for Energy-Efficiency Upgrades.

A small, deterministic engine that:
- Converts baseline and retrofit power draw into annual energy, cost and CO2 savings
- Calculates simple payback, NPV and IRR (Newton-Raphson with bisection fallback)
- Produces the cumulative cash-flow series for charting
- Classifies each project into a single canonical investment signal
"""

from retrofit_model.core.retrofit_model import RetrofitModel, compute_financials
from retrofit_model.models.energy_cost_model import compute_energy_cost
from retrofit_model.models.results import (
    AnalysisResult,
    EnergyCostResult,
    FinancialResult,
    InputParameters,
    InvestmentSignal,
)
from retrofit_model.templates.retrofit_defaults import RETROFIT_DEFAULTS

__version__ = "1.0.0"
__all__ = [
    "RetrofitModel",
    "compute_energy_cost",
    "compute_financials",
    "AnalysisResult",
    "EnergyCostResult",
    "FinancialResult",
    "InputParameters",
    "InvestmentSignal",
    "RETROFIT_DEFAULTS",
]
