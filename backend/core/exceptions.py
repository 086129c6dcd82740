from __future__ import annotations


class AppError(Exception):
    """Base app error."""


class InvalidInputError(AppError):
    """Raised when the top-level payload is not an array."""


class MissingFieldError(AppError):
    """Raised when a feature lacks one of its required fields."""

    def __init__(self, field: str, path: str):
        self.field = field
        self.path = path
        super().__init__(f"Feature at {path}: Missing required '{field}' field")


class InvalidJSONTextError(AppError):
    """Raised when user-supplied JSON text cannot be decoded."""

    def __init__(self, message: str, line: int, column: int, source_line: str = ""):
        self.line = line
        self.column = column
        self.source_line = source_line
        super().__init__(
            f"JSON Syntax Error at line {line}, column {column}:\n{message}"
            f'\n\nProblematic line: "{source_line}"'
        )
