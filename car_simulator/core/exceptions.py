"""Custom exceptions used throughout the car simulator package.

Gameplay results (a crash into an obstacle, an ignored button press) are
status values, not exceptions. Only defects and bad configuration raise.
"""

from typing import Any, Optional


class SimulatorError(Exception):
    """Base exception for all simulator errors.

    All simulator-specific exceptions should inherit from this class.
    This allows catching all simulator errors with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(SimulatorError):
    """Raised when there's an error in configuration.

    This includes:
    - Invalid configuration value
    - Missing required configuration
    - Placement counts that cannot fit on the board
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class ScenarioError(SimulatorError):
    """Raised when a scenario violates its placement invariants.

    Examples:
    - A special cell lies outside the board
    - Start, goal, food or obstacle cells coincide
    - Entities present that the scenario's mode does not use
    """

    def __init__(
        self,
        message: str,
        cell: Optional[object] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if cell is not None:
            details = details or {}
            details["cell"] = str(cell)

        super().__init__(message=message, details=details)
        self.cell = cell
