"""
Exceptions raised by the credit checker.

The evaluation engine itself never raises for partially invalid data.
These exceptions are reserved for the load boundary, where malformed
files are rejected before they reach the engine.
"""


class CreditCheckError(Exception):
    """Base class for all credit checker errors."""


class DataValidationError(CreditCheckError):
    """
    A catalog, requirement or records file failed schema validation.

    Attributes:
        source: Path or label of the offending input
        errors: List of error dicts as reported by pydantic
    """

    def __init__(self, source, errors=None):
        self.source = str(source)
        self.errors = list(errors or [])
        details = "; ".join(_format_error(e) for e in self.errors)
        message = f"Invalid data in {self.source}"
        if details:
            message = f"{message}: {details}"
        super().__init__(message)


def _format_error(error: dict) -> str:
    location = ".".join(str(p) for p in error.get("loc", ()))
    message = error.get("msg", "")
    return f"{location}: {message}" if location else message
