"""Configuration loading from CLI and programmatic sources."""

import logging
from pathlib import Path
from dataclasses import replace
from curvefit.config.settings import (
    Settings, SolverSettings, FitSettings,
    ProjectionSettings, LoggingSettings, LogLevel
)
from curvefit.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

class ConfigurationLoader:
    """Loads configuration from CLI args and system defaults."""

    def load_from_cli_args(self, args) -> Settings:
        """Load configuration from CLI arguments."""
        try:
            settings = self.load_defaults()

            solver_updates = {}
            if getattr(args, 'solver', None):
                solver_updates['executable'] = args.solver
            if getattr(args, 'timeout', None):
                solver_updates['timeout_seconds'] = args.timeout

            fit_updates = {}
            if getattr(args, 'shape', None):
                # keep first occurrence order
                fit_updates['shapes'] = tuple(dict.fromkeys(args.shape))
            if getattr(args, 'progress', False):
                fit_updates['show_progress'] = True

            projection_updates = {}
            if getattr(args, 'max_points', None):
                projection_updates['max_points'] = args.max_points

            logging_updates = {}
            if getattr(args, 'log_file', None):
                logging_updates['file_path'] = Path(args.log_file)
            if getattr(args, 'debug', False):
                logging_updates['level'] = LogLevel.DEBUG

            input_file = Path(args.datafile) if getattr(args, 'datafile', None) else None
            output_path = Path(args.output) if getattr(args, 'output', None) else None

            return replace(
                settings,
                solver=replace(settings.solver, **solver_updates),
                fit=replace(settings.fit, **fit_updates),
                projection=replace(settings.projection, **projection_updates),
                logging=replace(settings.logging, **logging_updates),
                input_file=input_file,
                ceiling=getattr(args, 'ceiling', None),
                output_path=output_path,
                debug_mode=getattr(args, 'debug', False),
                dry_run=getattr(args, 'dry_run', False),
            )

        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Failed to load configuration from CLI arguments: {str(e)}"
            ) from e

    def load_defaults(self) -> Settings:
        """Load default configuration settings."""
        return Settings(
            solver=SolverSettings(
                executable="cfityk",
                timeout_seconds=60,
                extra_args=(),
            ),
            fit=FitSettings(
                shapes=("Linear", "Quadratic"),
                show_progress=False,
            ),
            projection=ProjectionSettings(
                max_points=100_000,
            ),
            logging=LoggingSettings(
                level=LogLevel.INFO,
                file_path=None,
                console_output=True,
            ),
            debug_mode=False,
            dry_run=False,
        )

def configure_from_cli(args) -> Settings:
    """Main entry point to configure settings from CLI args."""
    loader = ConfigurationLoader()
    settings = loader.load_from_cli_args(args)
    settings.validate()
    return settings
