"""Abstract interfaces for external dependencies."""

from retrofit_model.interfaces.analysis_repository import AnalysisRepositoryInterface

__all__ = ["AnalysisRepositoryInterface"]
