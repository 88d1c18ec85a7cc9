"""Core configuration settings for curvefit."""

import logging
from pathlib import Path
from typing import Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum

from curvefit.domain.exceptions import ConfigurationError, InvalidInput
from curvefit.models.shapes import get_shape

logger = logging.getLogger(__name__)

class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

@dataclass
class SolverSettings:
    """External solver configuration."""
    executable: str = "cfityk"
    timeout_seconds: float = 60
    extra_args: Tuple[str, ...] = ()

    def validate(self) -> None:
        """Validate solver settings."""
        if not self.executable:
            raise ConfigurationError(
                "executable must not be empty",
                config_field="solver.executable"
            ).add_suggestion("Point --solver at the cfityk binary")

        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ConfigurationError(
                "timeout_seconds must be positive",
                config_field="solver.timeout_seconds"
            )

@dataclass
class FitSettings:
    """Which shapes are tried, in order."""
    shapes: Tuple[str, ...] = ("Linear", "Quadratic")
    show_progress: bool = False

    def validate(self) -> None:
        """Validate fit settings."""
        if not self.shapes:
            raise ConfigurationError(
                "At least one shape must be configured",
                config_field="fit.shapes"
            )
        for name in self.shapes:
            try:
                get_shape(name)
            except InvalidInput as e:
                raise ConfigurationError(
                    e.message,
                    config_field="fit.shapes",
                    suggestions=list(e.suggestions),
                ) from e

@dataclass
class ProjectionSettings:
    """Ceiling projection configuration."""
    max_points: int = 100_000

    def validate(self) -> None:
        """Validate projection settings."""
        if self.max_points <= 0:
            raise ConfigurationError(
                "max_points must be positive",
                config_field="projection.max_points"
            )

@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: LogLevel = LogLevel.INFO
    file_path: Optional[Path] = None
    console_output: bool = True

    def validate(self) -> None:
        """Validate logging settings."""
        if self.file_path and not self.file_path.parent.exists():
            raise ConfigurationError(
                f"Log directory does not exist: {self.file_path.parent}",
                config_field="logging.file_path"
            ).add_suggestion("Create the directory or use console logging only")

@dataclass
class Settings:
    """Main configuration settings for curvefit."""

    solver: SolverSettings = field(default_factory=SolverSettings)
    fit: FitSettings = field(default_factory=FitSettings)
    projection: ProjectionSettings = field(default_factory=ProjectionSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    # Runtime settings
    input_file: Optional[Path] = None
    ceiling: Optional[float] = None
    output_path: Optional[Path] = None

    debug_mode: bool = False
    dry_run: bool = False

    def validate(self) -> None:
        """Validate all configuration settings."""
        try:
            self.solver.validate()
            self.fit.validate()
            self.projection.validate()
            self.logging.validate()

            self._validate_paths()

        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Configuration validation failed: {str(e)}"
            ) from e

    def _validate_paths(self) -> None:
        """Validate input file and output location."""
        if self.input_file is not None and not self.input_file.is_file():
            raise ConfigurationError(
                f"Input file does not exist: {self.input_file}",
                config_field="input_file"
            ).add_suggestion("Check the data file path")

        if self.output_path is not None and not self.output_path.parent.exists():
            raise ConfigurationError(
                f"Output directory does not exist: {self.output_path.parent}",
                config_field="output_path"
            ).add_suggestion("Create the directory or use a different path")

    def to_dict(self) -> dict:
        """Convert settings to dictionary for debugging."""
        return {
            'solver': {
                'executable': self.solver.executable,
                'timeout_seconds': self.solver.timeout_seconds,
                'extra_args': list(self.solver.extra_args),
            },
            'fit': {
                'shapes': list(self.fit.shapes),
            },
            'projection': {
                'max_points': self.projection.max_points,
            },
            'runtime': {
                'input_file': str(self.input_file) if self.input_file else None,
                'ceiling': self.ceiling,
                'output_path': str(self.output_path) if self.output_path else None,
                'debug_mode': self.debug_mode,
                'dry_run': self.dry_run,
            }
        }

# Global settings instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get the current global settings instance."""
    if _settings is None:
        raise ConfigurationError(
            "Settings not initialized. Call set_settings() first."
        ).add_suggestion("Initialize settings in your application startup")
    return _settings

def has_settings() -> bool:
    """Whether set_settings() has been called."""
    return _settings is not None

def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    settings.validate()
    _settings = settings
    logger.info("Configuration loaded and validated successfully")

def reset_settings() -> None:
    """Forget the global settings instance."""
    global _settings
    _settings = None
