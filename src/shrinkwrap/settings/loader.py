"""Settings Loader for loading generation settings from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from shrinkwrap.settings.base import GenerationSettings


class SettingsLoader:
    """Loads generation settings from YAML files."""

    def load_file(self, path: Path | str) -> GenerationSettings:
        """Load settings from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Loaded GenerationSettings instance
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return self._parse_settings(data)

    def load_from_string(self, content: str) -> GenerationSettings:
        """Load settings from a YAML string.

        Args:
            content: YAML content as string

        Returns:
            Loaded GenerationSettings instance
        """
        data = yaml.safe_load(content)
        return self._parse_settings(data)

    def _parse_settings(self, data: Any) -> GenerationSettings:
        """Parse settings data from YAML structure.

        Settings may sit at the top level or under a ``generation`` key. A
        log_level in the file takes effect as soon as it is loaded.
        """
        if data is None:
            return GenerationSettings()
        if not isinstance(data, dict):
            raise ValueError("Settings must be a YAML mapping")

        section = data.get("generation", data)
        if not isinstance(section, dict):
            raise ValueError("'generation' must be a YAML mapping")

        settings = GenerationSettings.model_validate(section)
        settings.apply_logging()
        return settings

    def save_file(self, settings: GenerationSettings, path: Path | str) -> None:
        """Save settings to a YAML file.

        Args:
            settings: The settings to save
            path: Path for the output file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(
                {"generation": settings.model_dump()},
                f,
                default_flow_style=False,
                sort_keys=False,
            )


def load_settings(path: Path | str) -> GenerationSettings:
    """Convenience function to load settings from a file.

    Args:
        path: Path to the YAML file

    Returns:
        Loaded GenerationSettings instance
    """
    loader = SettingsLoader()
    return loader.load_file(path)
