"""Sub-models, result records, validation and storage."""

from retrofit_model.models.energy_cost_model import EnergyCostModel
from retrofit_model.models.json_analysis_repository import (
    AnalysisNotFoundError,
    JsonAnalysisRepository,
)
from retrofit_model.models.validation import InputValidationError

__all__ = [
    "EnergyCostModel",
    "JsonAnalysisRepository",
    "AnalysisNotFoundError",
    "InputValidationError",
]
