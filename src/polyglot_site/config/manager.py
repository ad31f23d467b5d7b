"""Configuration manager for Polyglot Site.

This module provides functionality for loading and validating YAML
configuration files with Pydantic model validation. Every load failure is
reported as a ``ConfigurationError``.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..config.schema import SiteConfig
from ..utils.core.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Loads site.yml and holds the validated site configuration.

    Keeps the most recently loaded configuration so the build and the CLI
    share one validated object.
    """

    def __init__(self) -> None:
        """Initialize the configuration manager."""
        self.current_config: SiteConfig | None = None
        self.config_file_path: Path | None = None

    @staticmethod
    def load_config(config_path: Path) -> SiteConfig:
        """
        Read a site configuration file.

        Args:
            config_path: The site.yml to read

        Returns:
            SiteConfig: Validated configuration object

        Raises:
            ConfigurationError: If the file is missing or unreadable, is not
                valid YAML, is not a mapping, or a section does not match
                its schema
        """
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}", context=config_path)

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}", context=config_path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read {config_path}: {e}", context=config_path) from e

        if raw_config_data is None:
            config_data: dict[str, object] = {}
        elif isinstance(raw_config_data, dict):
            config_data = raw_config_data
        else:
            raise ConfigurationError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}",
                context=config_path,
            )

        parsed_data = ConfigManager._parse_config_data(config_data)

        try:
            config = SiteConfig(**parsed_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed for {config_path}: {e}", context=config_path
            ) from e
        logger.debug(f"Loaded configuration from {config_path}")
        return config

    @staticmethod
    def _parse_config_data(config_data: dict[str, object]) -> dict[str, object]:
        """
        Normalize raw YAML values before validation.

        Locale codes written as ``fr_FR`` are rewritten to ``fr-FR`` and bare
        two-letter codes are lowercased.

        Args:
            config_data: Mapping as read from YAML

        Returns:
            dict[str, object]: Parsed configuration data
        """
        parsed_data = config_data.copy()

        i18n = config_data.get("i18n")
        if not isinstance(i18n, dict):
            return parsed_data

        parsed_i18n: dict[str, object] = dict(i18n)
        for key, value in i18n.items():
            match key:
                case "default_locale":
                    match value:
                        case str():
                            parsed_i18n[key] = _normalize_locale(value)
                        case _:
                            parsed_i18n[key] = value

                case "supported_languages":
                    match value:
                        case list():
                            parsed_i18n[key] = [
                                _normalize_locale(item) if isinstance(item, str) else item
                                for item in value
                            ]
                        case _:
                            parsed_i18n[key] = value

                case "contentful_locale":
                    match value:
                        case dict():
                            parsed_i18n[key] = {
                                _normalize_locale(k) if isinstance(k, str) else k: v
                                for k, v in value.items()
                            }
                        case _:
                            parsed_i18n[key] = value

                case _:
                    parsed_i18n[key] = value

        parsed_data["i18n"] = parsed_i18n
        return parsed_data

    def load_and_set(self, config_path: Path) -> SiteConfig:
        """
        Load a configuration file and make it the active configuration.

        The previous configuration stays active when loading fails.
        """
        config = self.load_config(config_path)
        self.current_config = config
        self.config_file_path = config_path
        return config


def _normalize_locale(code: str) -> str:
    code = code.strip().replace("_", "-")
    if "-" in code:
        lang, _, region = code.partition("-")
        return f"{lang.lower()}-{region.upper()}"
    return code.lower()
