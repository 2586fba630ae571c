"""Custom exceptions for datetime-select."""


class ConfigurationError(ValueError):
    """Raised when a selection is configured with malformed or inconsistent values."""


class InternalConsistencyError(RuntimeError):
    """Raised when calendar arithmetic reaches a state that should be impossible.

    This signals a defect in the selection logic, not bad user input, so it
    is never caught inside the package.
    """
