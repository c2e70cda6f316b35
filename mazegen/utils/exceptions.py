"""
Exception classes for mazegen with helpful error messages.

Only two failure kinds exist during generation and rendering:
- resource exhaustion while allocating a buffer (fatal, never retried)
- an invalid render state, meaning the grid violates the maze invariant

Configuration problems on the public API are reported with
ConfigurationError before any buffer is allocated.
"""

from __future__ import annotations

from typing import Any


class MazeError(Exception):
    """
    Base exception for mazegen errors with context and suggestions.

    Provides structured error information including:
    - Clear error description
    - Component that raised the error
    - Suggested action for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component = component or "mazegen"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class ResourceExhaustedError(MazeError):
    """Raised when a grid, frontier or raster buffer cannot be allocated."""

    def __init__(self, resource: str, requested_elements: int, component: str | None = None):
        diagnostic_data = {
            "resource": resource,
            "requested_elements": requested_elements,
        }

        super().__init__(
            message=f"Out of memory while allocating {resource}",
            component=component,
            suggested_action="Request a smaller maze",
            error_code="RESOURCE_EXHAUSTED",
            diagnostic_data=diagnostic_data,
        )


class InvalidRenderStateError(MazeError, AssertionError):
    """Raised when a wall cell has no wall neighbour in any direction."""

    def __init__(self, x: int, y: int, component: str | None = None):
        self.position = (x, y)
        diagnostic_data = {
            "cell": f"({x}, {y})",
            "neighbour_mask": 0,
        }

        super().__init__(
            message=f"Wall cell at ({x}, {y}) is isolated; the grid is not a valid maze",
            component=component,
            suggested_action="Render only grids produced by a maze generator",
            error_code="INVALID_RENDER_STATE",
            diagnostic_data=diagnostic_data,
        )


class ConfigurationError(MazeError, ValueError):
    """Raised when a public API parameter is invalid."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        expected_type: type | None = None,
        valid_range: tuple | None = None,
        component: str | None = None,
    ):
        self.parameter_name = parameter_name
        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if expected_type:
            diagnostic_data["expected_type"] = expected_type.__name__

        if valid_range:
            diagnostic_data["valid_range"] = f"[{valid_range[0]}, {valid_range[1]}]"

        suggested_action = _generate_configuration_suggestions(parameter_name, expected_type, valid_range)

        super().__init__(
            message=f"Invalid configuration for parameter '{parameter_name}'",
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_CONFIGURATION",
            diagnostic_data=diagnostic_data,
        )


def _generate_configuration_suggestions(
    parameter_name: str,
    expected_type: type | None,
    valid_range: tuple | None,
) -> str:
    if valid_range and valid_range[1] is None:
        return f"Set {parameter_name} to at least {valid_range[0]}"
    if valid_range:
        return f"Set {parameter_name} between {valid_range[0]} and {valid_range[1]}"
    if expected_type:
        return f"Pass {parameter_name} as {expected_type.__name__}"
    return f"Check the value of {parameter_name}"


def validate_parameter_value(
    value: Any,
    parameter_name: str,
    expected_type: type | None = None,
    valid_range: tuple | None = None,
    component: str | None = None,
):
    """Validate parameter value and type."""
    # bool is an int subclass but never a valid dimension or delay
    if expected_type and (not isinstance(value, expected_type) or isinstance(value, bool)):
        raise ConfigurationError(
            parameter_name=parameter_name,
            provided_value=value,
            expected_type=expected_type,
            component=component,
        )

    if valid_range and isinstance(value, (int, float)):
        low, high = valid_range
        if (low is not None and value < low) or (high is not None and value > high):
            raise ConfigurationError(
                parameter_name=parameter_name,
                provided_value=value,
                valid_range=valid_range,
                component=component,
            )
