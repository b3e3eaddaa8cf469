"""Effort scoring exceptions."""


class EffortError(Exception):
    """Base exception for all effort scoring errors."""


class ConfigurationError(EffortError):
    """Score providers are not bound to an analysis context."""


class InvalidArgumentError(EffortError):
    """Argument is missing or cannot be resolved in the bound context."""


class InvalidArgumentCountError(InvalidArgumentError):
    """Template method was called with the wrong number of arguments."""

    def __init__(self, method_name: str, expected: int, actual: int) -> None:
        self.method_name = method_name
        self.expected = expected
        self.actual = actual

        noun = "argument" if expected == 1 else "arguments"
        count = "one" if expected == 1 else str(expected)
        super().__init__(
            f"Error, method {method_name} expects {count} {noun} (FileModel), "
            f"got {actual}"
        )


class InvalidArgumentTypeError(InvalidArgumentError):
    """Template argument does not wrap the expected domain type."""

    def __init__(self, expected: str, actual: object) -> None:
        self.expected = expected
        self.actual_type = type(actual).__name__
        super().__init__(
            f"Error, expected argument of type {expected}, got {self.actual_type}"
        )


class GraphLookupError(EffortError):
    """Base exception for failed lookups against the analysis graph."""


class FileNotInGraphError(GraphLookupError):
    """File vertex does not exist in the analysis graph."""

    def __init__(self, file_id: str) -> None:
        self.file_id = file_id
        super().__init__(f"File not found in analysis graph: {file_id}")


class InvalidScoreError(EffortError):
    """Score provider returned something other than a non-negative int."""

    def __init__(self, provider: str, value: object) -> None:
        self.provider = provider
        self.value = value
        super().__init__(
            f"Score provider {provider} returned invalid effort points: {value!r}"
        )
