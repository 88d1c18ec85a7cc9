"""Configuration management."""

from .settings import (
    Settings,
    SolverSettings,
    FitSettings,
    ProjectionSettings,
    LoggingSettings,
    LogLevel,
    get_settings,
    has_settings,
    set_settings,
    reset_settings,
)
from .loader import ConfigurationLoader, configure_from_cli
from .integration import resolve_settings

__all__ = [
    "Settings",
    "SolverSettings",
    "FitSettings",
    "ProjectionSettings",
    "LoggingSettings",
    "LogLevel",
    "get_settings",
    "has_settings",
    "set_settings",
    "reset_settings",
    "ConfigurationLoader",
    "configure_from_cli",
    "resolve_settings",
]
