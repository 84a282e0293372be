"""Abstract interface for analysis history storage."""

from abc import ABC, abstractmethod
from typing import Any

from retrofit_model.models.results import AnalysisResult


class AnalysisRepositoryInterface(ABC):
    """
    Abstract interface for persisting completed analyses.

    The RetrofitModel never touches storage itself. Callers save the
    AnalysisResult they received and load history through an
    implementation of this interface.

    Stored records are plain dictionaries with the keys:
        - id: Unique analysis identifier
        - timestamp: ISO-8601 UTC creation time
        - project_name: Display name
        - inputs: Input parameters as a mapping
        - results: Flattened results (``AnalysisResult.to_dict()``)
        - key_metrics: npv, irr, payback_period, annual_savings,
          investment_signal

    Example implementations:
        - JsonAnalysisRepository: Single JSON file on disk
    """

    @abstractmethod
    def save(
        self,
        result: AnalysisResult,
        project_name: str | None = None,
    ) -> str:
        """
        Store a completed analysis as the newest record.

        Args:
            result: Analysis to persist.
            project_name: Display name. Falls back to the equipment name.

        Returns:
            Identifier of the stored record.
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, analysis_id: str) -> dict[str, Any] | None:
        """Return the record with this id, or None."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[dict[str, Any]]:
        """Return all records, newest first."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, analysis_id: str) -> bool:
        """Delete a record. Returns False if it did not exist."""
        raise NotImplementedError

    @abstractmethod
    def update(self, analysis_id: str, **changes: Any) -> dict[str, Any]:
        """
        Merge top-level changes (e.g. project_name) into a record.

        Returns:
            The updated record.
        """
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """Remove all records."""
        raise NotImplementedError

    def recent(self, count: int = 3) -> list[dict[str, Any]]:
        """Return the ``count`` newest records."""
        return self.list_all()[:count]
