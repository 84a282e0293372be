"""Default parameter tables for retrofit analysis, solver tuning, and signals."""

from typing import Any

RETROFIT_DEFAULTS: dict[str, Any] = {
    "grid_emission_factor": 0.82,  # kg CO2/kWh, Indian grid (CEA baseline)
    "trees_per_ton_co2": 45,  # trees absorbing one tonne CO2 per year
    "industry_avg_payback_years": 4.5,
}

SOLVER_DEFAULTS: dict[str, Any] = {
    "initial_guess": 0.10,
    "tolerance": 1e-4,  # absolute NPV, currency units
    "max_iterations": 100,
    "newton_rate_bounds": (-0.99, 10.0),
    "bisection_bracket": (-0.99, 5.0),
}

# Evaluated top-down, first match wins.
# (signal name, IRR must exceed [%], payback must be below [years] or None)
SIGNAL_THRESHOLDS: list[tuple[str, float | None, float | None]] = [
    ("HIGHLY_FAVORABLE", 25.0, 3.0),
    ("FAVORABLE", 12.0, 5.0),
    ("MARGINAL", 6.0, None),
    ("REVIEW_REQUIRED", None, None),
]

SIGNAL_RECOMMENDATIONS: dict[str, dict[str, str]] = {
    "HIGHLY_FAVORABLE": {
        "label": "Highly Favorable",
        "status": "excellent",
        "recommendation": (
            "This investment demonstrates exceptional returns with a rapid "
            "payback period. Strong recommendation to proceed."
        ),
    },
    "FAVORABLE": {
        "label": "Favorable",
        "status": "good",
        "recommendation": (
            "This investment shows favorable returns. Recommended for "
            "implementation with standard due diligence."
        ),
    },
    "MARGINAL": {
        "label": "Marginal",
        "status": "marginal",
        "recommendation": (
            "This investment shows marginal returns. Consider optimization "
            "opportunities or alternative solutions."
        ),
    },
    "REVIEW_REQUIRED": {
        "label": "Review Required",
        "status": "poor",
        "recommendation": (
            "This investment requires further review. Returns may not "
            "justify the capital outlay."
        ),
    },
}
