"""Error types raised by config infrastructure."""

from pathlib import Path

from ca_eval.core.errors import CaEvalError


class MissingEnvVarsError(CaEvalError):
    """Raised when a config references environment variables that are not set."""

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        super().__init__(
            "Failed to load config: missing environment variables: "
            + ", ".join(sorted(missing_vars))
        )


class ConfigValidationError(CaEvalError):
    """Raised when the parsed config does not match the ConsoleConfig schema."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(CaEvalError):
    """Raised when the config file is missing or is not valid YAML."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        super().__init__(f"Failed to load config: {reason}: {path}")
