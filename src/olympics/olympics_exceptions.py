"""
Olympics Exception Hierarchy

Exceptions raised while loading the Olympic dataset or when a statistics
query has no valid answer.

Exception Hierarchy:
    OlympicsException (base)
    ├── EmptyDatasetException
    ├── DataLoadException
    └── InconsistentDataException

Lookups by name never raise; they return None.
"""

from typing import Any, Dict, Optional
from datetime import datetime


class OlympicsException(Exception):
    """
    Base exception for all Olympic dataset errors.

    Attributes:
        message: Human-readable error message
        error_code: Unique error code
        context: Extra information (file, line, athlete, ...)
        operation: What operation was being performed
        original_exception: Wrapped exception if from try/except
    """

    def __init__(
        self,
        message: str,
        error_code: str = "OLYMPICS_000",
        context: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.operation = operation
        self.original_exception = original_exception
        self.timestamp = datetime.now().isoformat()

        super().__init__(self._build_error_message())

    def _build_error_message(self) -> str:
        """Build error message with all context"""
        lines = [f"[{self.error_code}] {self.message}"]

        if self.operation:
            lines.append(f"Operation: {self.operation}")

        if self.context:
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.original_exception:
            lines.append(f"Original Error: {type(self.original_exception).__name__}: {self.original_exception}")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "operation": self.operation,
            "context": self.context,
            "timestamp": self.timestamp,
            "original_error": str(self.original_exception) if self.original_exception else None
        }


class EmptyDatasetException(OlympicsException):
    """
    Raised when a query needs at least one athlete and there are none.

    Examples:
    - all_terrain_athlete() on an empty athlete collection
    """

    def __init__(self, operation: str, message: Optional[str] = None):
        super().__init__(
            message=message or f"No athletes available for {operation}",
            error_code="OLYMPICS_EMPTY_001",
            operation=operation,
        )


class DataLoadException(OlympicsException):
    """
    Raised when the source data file cannot be read or parsed.

    Examples:
    - File does not exist
    - Header is missing required columns
    - Year is not an integer
    - Unknown gender or medal value
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        line_number: Optional[int] = None,
        original_exception: Optional[Exception] = None
    ):
        context = {}
        if file_path is not None:
            context["file_path"] = file_path
        if line_number is not None:
            context["line_number"] = line_number

        super().__init__(
            message=message,
            error_code="OLYMPICS_LOAD_002",
            context=context,
            operation="load_data",
            original_exception=original_exception
        )

        self.file_path = file_path
        self.line_number = line_number


class InconsistentDataException(OlympicsException):
    """
    Raised when rows for the same athlete disagree.

    Examples:
    - Athlete listed under two different countries
    - Athlete listed with two different genders
    """

    def __init__(
        self,
        athlete_name: str,
        field_name: str,
        expected: Any,
        found: Any,
        line_number: Optional[int] = None
    ):
        context = {
            "athlete": athlete_name,
            "field": field_name,
            "expected": expected,
            "found": found,
        }
        if line_number is not None:
            context["line_number"] = line_number

        super().__init__(
            message=f"Athlete {athlete_name!r} has conflicting {field_name}: {expected!r} vs {found!r}",
            error_code="OLYMPICS_DATA_003",
            context=context,
            operation="load_data",
        )

        self.athlete_name = athlete_name
        self.field_name = field_name
