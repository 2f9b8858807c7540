"""Settings module - how a harness drives generation."""

from shrinkwrap.settings.base import GenerationSettings, SettingsBuilder
from shrinkwrap.settings.loader import SettingsLoader, load_settings

__all__ = [
    "GenerationSettings",
    "SettingsBuilder",
    "SettingsLoader",
    "load_settings",
]
