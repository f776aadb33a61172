"""Custom exceptions for the prompt optimizer."""


class OptimizerError(ValueError):
    """Base exception for prompt optimizer failures."""


class InvalidOption(OptimizerError):
    """Raised in strict mode when an option value is outside its enum."""

    def __init__(self, name: str, value: object, allowed) -> None:
        self.name = name
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid value {value!r} for option '{name}'; "
            f"expected one of {', '.join(self.allowed)}"
        )


class ConfigurationError(OptimizerError):
    """Raised when a configuration file cannot be loaded or parsed."""


class HistoryError(OptimizerError):
    """Raised when persisted history cannot be decoded."""
