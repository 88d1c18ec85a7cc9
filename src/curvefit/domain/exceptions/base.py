"""Root of the curvefit error hierarchy and resource errors."""

import logging
from abc import ABC
from datetime import datetime
from typing import Any, ClassVar, Dict, List, Optional

logger = logging.getLogger(__name__)


class CurveFitError(Exception, ABC):
    """
    Base exception for all curvefit errors.

    Every error carries a machine-readable ``error_code`` (``default_code``
    unless overridden), a ``context`` dict and a list of ``suggestions``.
    ``add_context`` and ``add_suggestion`` return the error so they chain
    onto a ``raise``.
    """

    default_code: ClassVar[str] = "CURVEFIT_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        recoverable: bool = False
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.context: Dict[str, Any] = dict(context or {})
        self.suggestions: List[str] = list(suggestions or [])
        self.recoverable = recoverable
        self.timestamp = datetime.now()

    def add_context(self, key: str, value: Any) -> "CurveFitError":
        if key:
            self.context[key] = value
        return self

    def add_suggestion(self, suggestion: str) -> "CurveFitError":
        if suggestion:
            self.suggestions.append(suggestion)
        return self

    def _headline(self) -> str:
        return self.message or ""

    def __str__(self) -> str:
        text = self._headline()
        if self.suggestions:
            text += f" -- Suggestions: {'; '.join(self.suggestions)}"
        return text


class ConfigurationError(CurveFitError):
    """A setting is missing, malformed or inconsistent."""

    default_code = "CONFIGURATION_ERROR"

    def __init__(self, message: str, *, config_field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.config_field = config_field
        if config_field:
            self.add_context('config_field', config_field)

    def _headline(self) -> str:
        if self.config_field:
            return f"[{self.config_field}] {self.message}"
        return super()._headline()


class ResourceError(CurveFitError):
    default_code = "RESOURCE_ERROR"


class FileSystemError(ResourceError):
    default_code = "FILE_SYSTEM_ERROR"


class ExternalToolError(ResourceError):
    """An external program could not be run or misbehaved."""

    default_code = "EXTERNAL_TOOL_ERROR"

    def __init__(
        self,
        message: str,
        *,
        tool_name: Optional[str] = None,
        command: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if tool_name:
            self.add_context('tool_name', tool_name)
        if command:
            self.add_context('command', command)
