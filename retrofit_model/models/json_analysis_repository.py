"""JSON file based analysis history repository."""

import json
import logging
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from retrofit_model.interfaces.analysis_repository import AnalysisRepositoryInterface
from retrofit_model.models.results import AnalysisResult

logger = logging.getLogger(__name__)


class AnalysisNotFoundError(KeyError):
    """Raised when an analysis id is not in the repository."""

    pass


class JsonAnalysisRepository(AnalysisRepositoryInterface):
    """
    Analysis history kept in a single JSON file.

    Records are stored newest first and only the latest ``max_analyses``
    are kept. A missing file is an empty history; a corrupt file is
    logged and treated as empty, and is overwritten on the next write.

    Args:
        path: JSON file location. Parent directories are created.
        max_analyses: Number of records to retain.

    Example:
        >>> repo = JsonAnalysisRepository("history.json")
        >>> analysis_id = repo.save(model.analyze(params))
        >>> repo.get(analysis_id)["key_metrics"]["investment_signal"]
        'HIGHLY_FAVORABLE'
    """

    DEFAULT_PROJECT_NAME = "Unnamed Project"

    def __init__(self, path: str | Path, max_analyses: int = 10) -> None:
        """Initialize the repository."""
        if max_analyses < 1:
            raise ValueError(f"max_analyses must be >= 1, got {max_analyses}")
        self.path = Path(path)
        self.max_analyses = max_analyses
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def save(
        self,
        result: AnalysisResult,
        project_name: str | None = None,
    ) -> str:
        """Store a completed analysis and trim history to ``max_analyses``."""
        record = self._build_record(result, project_name)
        records = [record] + self._load()
        self._write(records[: self.max_analyses])

        logger.info("Saved analysis %s (%s)", record["id"], record["project_name"])
        return record["id"]

    def get(self, analysis_id: str) -> dict[str, Any] | None:
        for record in self._load():
            if record.get("id") == analysis_id:
                return record
        return None

    def list_all(self) -> list[dict[str, Any]]:
        return self._load()

    def delete(self, analysis_id: str) -> bool:
        records = self._load()
        remaining = [r for r in records if r.get("id") != analysis_id]
        if len(remaining) == len(records):
            return False
        self._write(remaining)
        logger.info("Deleted analysis %s", analysis_id)
        return True

    def update(self, analysis_id: str, **changes: Any) -> dict[str, Any]:
        """
        Merge top-level changes into a record.

        Raises:
            AnalysisNotFoundError: If no record has this id.
            ValueError: If changes try to replace the id.
        """
        if "id" in changes:
            raise ValueError("The id of an analysis cannot be changed")

        records = self._load()
        for index, record in enumerate(records):
            if record.get("id") == analysis_id:
                records[index] = {**record, **changes}
                self._write(records)
                return records[index]

        raise AnalysisNotFoundError(analysis_id)

    def clear(self) -> None:
        self._write([])
        logger.info("Cleared analysis history at %s", self.path)

    def _build_record(
        self, result: AnalysisResult, project_name: str | None
    ) -> dict[str, Any]:
        """Assemble the stored representation of an analysis."""
        financial = result.financial
        results = result.to_dict()
        name = (
            project_name
            or result.inputs.equipment_name
            or self.DEFAULT_PROJECT_NAME
        )

        return {
            "id": self._generate_id(),
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "project_name": name,
            "inputs": result.inputs.to_dict(),
            "results": results,
            "key_metrics": {
                "npv": financial.npv,
                "irr": financial.irr,
                "payback_period": results["simple_payback_period"],
                "annual_savings": result.energy.annual_cost_savings,
                "investment_signal": financial.investment_signal.value,
            },
        }

    @staticmethod
    def _generate_id() -> str:
        """Unique id of the form analysis_<epoch ms>_<9 hex chars>."""
        return f"analysis_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"

    def _load(self) -> list[dict[str, Any]]:
        """Read all records. Missing or corrupt files give an empty list."""
        if not self.path.exists():
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not read analysis history %s: %s", self.path, e)
            return []

        if not isinstance(data, list):
            logger.warning(
                "Analysis history %s is not a list, ignoring contents", self.path
            )
            return []
        return data

    def _write(self, records: list[dict[str, Any]]) -> None:
        """Replace the history file with ``records``."""
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, allow_nan=False)
            tmp_path.replace(self.path)
        finally:
            tmp_path.unlink(missing_ok=True)
