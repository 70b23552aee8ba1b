"""Configuration validation utilities."""

from dataclasses import dataclass
from datetime import date
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_provider_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate provider identity parameters."""
        errors = []

        for name in ("description", "symbol_description"):
            if name in params and not _is_non_empty_str(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a non-empty string",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_query_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate query parameters."""
        errors = []

        if "supported_field" in params:
            value = params["supported_field"]
            if not _is_non_empty_str(value):
                errors.append(ValidationError(
                    field="supported_field",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_connectivity_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate connectivity self-test parameters."""
        errors = []

        if "probe_ticker" in params:
            value = params["probe_ticker"]
            if not _is_non_empty_str(value):
                errors.append(ValidationError(
                    field="probe_ticker",
                    message="Must be a non-empty string",
                    value=value
                ))

        # YAML may already have parsed the date
        if "probe_date" in params:
            value = params["probe_date"]
            if not isinstance(value, date):
                try:
                    date.fromisoformat(str(value))
                except ValueError:
                    errors.append(ValidationError(
                        field="probe_date",
                        message="Must be an ISO date (YYYY-MM-DD)",
                        value=value
                    ))

        if "expected_rows" in params:
            value = params["expected_rows"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="expected_rows",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_symbol_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate ticker pre-parsing parameters."""
        errors = []

        if "strip_prefixes" in params:
            value = params["strip_prefixes"]
            if not isinstance(value, (list, tuple)) or not all(isinstance(p, str) for p in value):
                errors.append(ValidationError(
                    field="strip_prefixes",
                    message="Must be a list of strings",
                    value=value
                ))

        if "uppercase" in params:
            value = params["uppercase"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="uppercase",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "provider" in config:
            errors.extend(ConfigValidator.validate_provider_params(config["provider"]))

        if "query" in config:
            errors.extend(ConfigValidator.validate_query_params(config["query"]))

        if "connectivity" in config:
            errors.extend(ConfigValidator.validate_connectivity_params(config["connectivity"]))

        if "symbols" in config:
            errors.extend(ConfigValidator.validate_symbol_params(config["symbols"]))

        return errors
