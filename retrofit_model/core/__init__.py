"""Core retrofit model components."""

from retrofit_model.core.retrofit_model import RetrofitModel
from retrofit_model.core.dcf_engine import DCFEngine
from retrofit_model.core.kpi_calculator import KPICalculator

__all__ = ["RetrofitModel", "DCFEngine", "KPICalculator"]
