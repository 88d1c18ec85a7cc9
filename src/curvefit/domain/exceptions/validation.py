"""Input validation exceptions."""

from typing import Any, Optional

from .base import CurveFitError


class ValidationError(CurveFitError):
    """Base class for rejected inputs; records which field was at fault."""

    default_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        *,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if field_name:
            self.add_context('field_name', field_name)
        if field_value is not None:
            self.add_context('field_value', str(field_value))


class InvalidInput(ValidationError):
    """Fit arguments that cannot produce a result."""

    default_code = "INVALID_INPUT"


class ProjectionLimitError(InvalidInput):
    """A ceiling-driven projection ran past the safety cap."""

    default_code = "PROJECTION_LIMIT_EXCEEDED"

    def __init__(self, ceiling: float, max_points: int, **kwargs):
        super().__init__(
            f"Trend did not reach ceiling {ceiling} within {max_points} points",
            field_name="ceiling",
            field_value=ceiling,
            **kwargs
        )
        self.add_context('max_points', max_points)
        self.add_suggestion("Lower the ceiling or raise projection.max_points")


class FileValidationError(ValidationError):
    default_code = "FILE_VALIDATION_FAILED"

    def __init__(
        self,
        message: str,
        *,
        file_path: Optional[str] = None,
        validation_type: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if file_path:
            self.add_context('file_path', file_path)
        if validation_type:
            self.add_context('validation_type', validation_type)


class XYFileNotFoundError(FileValidationError):
    """An XY data file does not exist."""

    default_code = "FILE_NOT_FOUND"

    def __init__(self, file_path: str, **kwargs):
        super().__init__(
            f"XY data file not found: {file_path}",
            file_path=file_path,
            validation_type="existence_check",
            **kwargs
        )
        self.add_suggestion("Check the data file path, or create it with 'curvefit append'")
