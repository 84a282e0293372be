"""Utility functions for financial calculations, formatting and export."""

from retrofit_model.utils.financial_utils import (
    build_annuity_cash_flows,
    calculate_annuity_factor,
    calculate_discount_factors,
)
from retrofit_model.utils.currency_utils import format_inr, parse_inr
from retrofit_model.utils.export_utils import (
    export_analysis_csv,
    export_comparison_csv,
)

__all__ = [
    "build_annuity_cash_flows",
    "calculate_annuity_factor",
    "calculate_discount_factors",
    "format_inr",
    "parse_inr",
    "export_analysis_csv",
    "export_comparison_csv",
]
