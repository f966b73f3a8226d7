"""Exception hierarchy shared by the parser, the classifiers and the API layer."""

from __future__ import annotations

from typing import Optional


class SonarError(Exception):
    """Base class for every error surfaced to the user."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class InputValidationError(SonarError):
    """Raised when the submitted features cannot be turned into a valid vector."""


class EmptyInputError(InputValidationError):
    """Raised when nothing was submitted."""

    def __init__(self, message: str = "Please enter some data before predicting.") -> None:
        super().__init__(message)


class ParseError(InputValidationError):
    """A token could not be read as a finite number."""

    def __init__(self, token: str, position: int) -> None:
        self.token = token
        self.position = position
        shown = token if token else "<empty>"
        super().__init__(f"Value {position} is not a number: '{shown}'.")


class ShapeError(InputValidationError):
    """The vector does not hold the expected number of values."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected exactly {expected} values, got {actual}.")


class RangeError(InputValidationError):
    """A value lies outside the closed interval [0, 1]."""

    def __init__(self, position: int, value: float) -> None:
        self.position = position
        self.value = value
        super().__init__(f"Value {position} is out of range [0, 1]: {value!r}.")


class ClassifierError(SonarError):
    """Base class for failures while obtaining a prediction."""


class NetworkError(ClassifierError):
    """The prediction request failed before a usable response arrived."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ResponseError(ClassifierError):
    """The prediction service answered with an unexpected payload."""
