"""Input validation rules for retrofit analysis requests."""

import math
from typing import Any

VALIDATION_RULES: dict[str, dict[str, Any]] = {
    "equipment_name": {
        "label": "Equipment Name",
        "min_length": 3,
    },
    "existing_power": {
        "label": "Baseline Power",
        "min": 0.01,
        "max": 1000,
        "unit": "kW",
    },
    "proposed_power": {
        "label": "Target Power",
        "min": 0.01,
        "max": 1000,
        "unit": "kW",
        "less_than_field": "existing_power",
    },
    "operating_hours_per_day": {
        "label": "Daily Runtime",
        "min": 0.01,
        "max": 24,
        "unit": "hours",
    },
    "operating_days_per_year": {
        "label": "Annual Days",
        "min": 1,
        "max": 365,
        "unit": "days",
    },
    "electricity_cost": {
        "label": "Energy Rate",
        "min": 0.01,
        "max": 100,
        "unit": "per kWh",
    },
    "initial_investment": {
        "label": "Capital Investment",
        "min": 1,
    },
    "project_life": {
        "label": "Asset Life",
        "min": 1,
        "max": 50,
        "unit": "years",
        "integer": True,
    },
    "discount_rate": {
        "label": "Discount Rate",
        "min": 0,
        "max": 50,
        "unit": "%",
    },
}


class InputValidationError(ValueError):
    """Raised when analysis inputs violate the field rules."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        details = ", ".join(f"{name}: {message}" for name, message in errors.items())
        super().__init__(f"Invalid analysis inputs ({details})")

def _to_number(value: Any) -> float | None:
    """Parse a form value to a finite float. None for anything else."""
    """Parse a form value to float. None for empty, non-numeric or non-finite input."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def validate_field(
    field_name: str,
    value: Any,
    all_values: dict[str, Any] | None = None,
) -> str | None:
    """
    Validate a single field value against its rule.

    Args:
        field_name: Name of the field.
        value: Raw value (number or string).
        all_values: All form values, used for cross-field rules.

    Returns:
        Error message, or None if the value is valid or the field unknown.
    """
    rules = VALIDATION_RULES.get(field_name)
    if rules is None:
        return None
    all_values = all_values or {}

    if field_name == "equipment_name":
        text = str(value or "").strip()
        if not text:
            return "Required"
        if len(text) < rules["min_length"]:
            return f"Min {rules['min_length']} characters"
        return None

    number = _to_number(value)
    if number is None:
        return "Required"

    if "min" in rules and number < rules["min"]:
        return "Must be ≥ 0" if rules["min"] == 0 else f"Must be ≥ {rules['min']}"
    if "max" in rules and number > rules["max"]:
        return f"Max {rules['max']}"
    if rules.get("integer") and not number.is_integer():
        return "Must be a whole number"

    other_field = rules.get("less_than_field")
    if other_field:
        other = _to_number(all_values.get(other_field))
        if other is not None and number >= other:
            return "Must be < baseline"

    return None


def validate_inputs(form_data: dict[str, Any]) -> dict[str, str]:
    """
    Validate all fields of an analysis request.

    Returns:
        Mapping of field name to error message. Empty if valid.
    """
    errors = {}
    for field_name in VALIDATION_RULES:
        error = validate_field(field_name, form_data.get(field_name), form_data)
        if error:
            errors[field_name] = error
    return errors


def is_valid(form_data: dict[str, Any]) -> bool:
    return not validate_inputs(form_data)


def get_field_rules(field_name: str) -> dict[str, Any] | None:
    return VALIDATION_RULES.get(field_name)


def get_field_help_text(field_name: str) -> str:
    """Describe the accepted range of a field, e.g. '≥ 0.01, ≤ 24'."""
    rules = VALIDATION_RULES.get(field_name)
    if rules is None:
        return ""

    if field_name == "equipment_name":
        return f"Min {rules['min_length']} characters"

    parts = []
    if "min" in rules:
        parts.append(f"≥ {rules['min']}")
    if "max" in rules:
        parts.append(f"≤ {rules['max']}")
    if "less_than_field" in rules:
        parts.append("< baseline power")
    return ", ".join(parts)
