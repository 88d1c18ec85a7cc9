"""Helpers that hand settings to library code."""
from typing import Optional
from curvefit.config.settings import Settings, get_settings, has_settings
from curvefit.config.loader import ConfigurationLoader

def resolve_settings(settings: Optional[Settings] = None) -> Settings:
    """Explicit settings first, then the global ones, then defaults."""
    if settings is not None:
        return settings
    if has_settings():
        return get_settings()
    return ConfigurationLoader().load_defaults()
