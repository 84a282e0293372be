"""CSV export of stored analyses."""

import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any

import pandas as pd

from retrofit_model.models.results import InvestmentSignal

logger = logging.getLogger(__name__)

REPORT_TITLE = "EnergyROI Pro - Investment Analysis Report"

INPUT_ROWS = [
    ("Equipment Name", "equipment_name"),
    ("Baseline Power (kW)", "existing_power"),
    ("Target Power (kW)", "proposed_power"),
    ("Daily Runtime (hours)", "operating_hours_per_day"),
    ("Annual Operating Days", "operating_days_per_year"),
    ("Energy Rate (₹/kWh)", "electricity_cost"),
    ("Capital Investment (₹)", "initial_investment"),
    ("Asset Life (years)", "project_life"),
    ("Discount Rate (%)", "discount_rate"),
]

RESULT_ROWS = [
    ("Annual Energy Savings (kWh)", "annual_energy_savings", None),
    ("Annual Cost Savings (₹)", "annual_cost_savings", None),
    ("Simple Payback Period (years)", "simple_payback_period", 2),
    ("Net Present Value (₹)", "npv", 2),
    ("Internal Rate of Return (%)", "irr", 2),
    ("CO₂ Reduction (tonnes/year)", "co2_reduction_tons", 2),
]


def _format_value(value: Any, decimals: int | None) -> Any:
    """Round for display. None (infinite payback, undefined IRR) is 'N/A'."""
    if value is None:
        return "N/A"
    if decimals is None:
        return value
    return f"{value:.{decimals}f}"


def _signal_label(record: dict[str, Any]) -> str:
    signal = record.get("key_metrics", {}).get("investment_signal")
    if signal is None:
        return "N/A"
    return InvestmentSignal(signal).label


def _file_stem(record_name: str | None) -> str:
    name = record_name or "Analysis"
    return re.sub(r"\s+", "_", name.strip())


def build_report_table(record: dict[str, Any]) -> pd.DataFrame:
    """
    Build a Section/Parameter/Value table for one stored analysis.

    Args:
        record: Record as returned by an analysis repository.

    Returns:
        DataFrame with columns 'section', 'parameter', 'value'.
    """
    inputs = record["inputs"]
    results = record["results"]
    rows = []

    for label, key in INPUT_ROWS:
        value = inputs.get(key)
        rows.append(
            ("Equipment Details", label, "N/A" if value in (None, "") else value)
        )
    for label, key, decimals in RESULT_ROWS:
        rows.append(
            ("Financial Results", label, _format_value(results.get(key), decimals))
        )
    rows.append(("Investment Signal", "Investment Signal", _signal_label(record)))

    return pd.DataFrame(rows, columns=["section", "parameter", "value"])


def export_analysis_csv(record: dict[str, Any], directory: str | Path) -> Path:
    """
    Write a single-analysis CSV report.

    The file name is ``EnergyROI_<project_name>_<YYYY-MM-DD>.csv`` with
    whitespace in the project name replaced by underscores.

    Returns:
        Path of the written file.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / (
        f"EnergyROI_{_file_stem(record.get('project_name'))}_"
        f"{date.today().isoformat()}.csv"
    )

    generated = record.get("timestamp") or datetime.now().isoformat()
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(f"{REPORT_TITLE}\n")
        f.write(f"Generated,{generated}\n")
        build_report_table(record).to_csv(f, index=False)

    logger.info("Exported analysis %s to %s", record.get("id"), path)
    return path


def build_comparison_table(records: list[dict[str, Any]]) -> pd.DataFrame:
    """One row per analysis with the headline metrics."""
    rows = []
    for record in records:
        inputs = record["inputs"]
        results = record["results"]
        payback = results.get("simple_payback_period")
        irr = results.get("irr")
        rows.append(
            {
                "Project Name": record.get("project_name"),
                "Date": str(record.get("timestamp", ""))[:10],
                "Equipment": inputs.get("equipment_name"),
                "Baseline Power (kW)": inputs.get("existing_power"),
                "Target Power (kW)": inputs.get("proposed_power"),
                "Annual Savings (₹)": round(results["annual_cost_savings"]),
                "Payback (years)": "N/A" if payback is None else round(payback, 2),
                "NPV (₹)": round(results["npv"]),
                "IRR (%)": "N/A" if irr is None else round(irr, 2),
                "CO₂ Reduction (t/yr)": round(results["co2_reduction_tons"], 2),
                "Signal": _signal_label(record),
            }
        )
    return pd.DataFrame(rows)


def export_comparison_csv(
    records: list[dict[str, Any]], directory: str | Path
) -> Path | None:
    """
    Write all analyses side by side into one CSV.

    Returns:
        Path of the written file, or None if there is nothing to export.
    """
    if not records:
        return None

    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"EnergyROI_AllAnalyses_{date.today().isoformat()}.csv"
    build_comparison_table(records).to_csv(path, index=False)

    logger.info("Exported %d analyses to %s", len(records), path)
    return path
