"""Configuration file loading and management"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class PathsConfig:
    """Locations of the screensaver config files"""
    xscreensaver: str = "~/.xscreensaver"
    kscreensaverrc: str = "~/.kde/share/config/kscreensaverrc"

    def xscreensaverPath_get(self) -> Path:
        """Expanded path of the xscreensaver config file"""
        return Path(self.xscreensaver).expanduser()

    def kscreensaverrcPath_get(self) -> Path:
        """Expanded path of the KDE screensaver config file"""
        return Path(self.kscreensaverrc).expanduser()


@dataclass
class CommandsConfig:
    """External command execution settings"""
    timeout_seconds: Optional[float] = None  # None blocks until the command exits


@dataclass
class LoggingConfig:
    """Logging configuration settings"""
    level: str = "WARNING"
    file: Optional[str] = None
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class Config:
    """Complete application configuration"""
    desktop: Optional[str] = None  # Forced desktop hint, None means detect
    paths: PathsConfig = field(default_factory=PathsConfig)
    commands: CommandsConfig = field(default_factory=CommandsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """Loads and parses configuration from YAML files"""

    DEFAULT_CONFIG_PATHS = [
        "sstimeout.yml",
        "~/.config/sstimeout/config.yml",
        "/etc/sstimeout/config.yml",
    ]

    @staticmethod
    def configFile_find() -> Optional[Path]:
        """
        Find configuration file in standard locations

        Returns:
            Path to config file, or None if not found
        """
        for config_path in ConfigLoader.DEFAULT_CONFIG_PATHS:
            path = Path(config_path).expanduser().resolve()
            if path.exists() and path.is_file():
                return path
        return None

    @staticmethod
    def yaml_load(file_path: Path) -> Dict[str, Any]:
        """
        Load YAML configuration file

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed configuration dictionary (empty for an empty file)

        Raises:
            FileNotFoundError: If file does not exist
            yaml.YAMLError: If file is not valid YAML
            ValueError: If the document is not a mapping
        """
        with open(file_path, "r") as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {file_path} must contain a YAML dictionary")

        return data

    @staticmethod
    def config_parse(data: Dict[str, Any]) -> Config:
        """
        Parse configuration dictionary into Config object

        Every section and key is optional; omitted values fall back to
        the dataclass defaults.

        Args:
            data: Raw configuration dictionary

        Returns:
            Parsed Config object

        Raises:
            ValueError: If a section is present but not a mapping
        """
        defaults = Config()

        paths_data = ConfigLoader._section_get(data, "paths")
        paths = PathsConfig(
            xscreensaver=paths_data.get("xscreensaver", defaults.paths.xscreensaver),
            kscreensaverrc=paths_data.get("kscreensaverrc", defaults.paths.kscreensaverrc),
        )

        commands_data = ConfigLoader._section_get(data, "commands")
        timeout_seconds = commands_data.get("timeout_seconds")
        commands = CommandsConfig(
            timeout_seconds=float(timeout_seconds) if timeout_seconds is not None else None,
        )

        logging_data = ConfigLoader._section_get(data, "logging")
        logging = LoggingConfig(
            level=logging_data.get("level", defaults.logging.level),
            file=logging_data.get("file"),
            format=logging_data.get("format", defaults.logging.format),
        )

        return Config(
            desktop=data.get("desktop"),
            paths=paths,
            commands=commands,
            logging=logging,
        )

    @staticmethod
    def _section_get(data: Dict[str, Any], name: str) -> Dict[str, Any]:
        """Return a config section as a dict, {} when absent"""
        section = data.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ValueError(f"Config section '{name}' must be a mapping")
        return section

    @staticmethod
    def config_load(file_path: Optional[Path] = None) -> Config:
        """
        Load configuration from file

        Unlike an explicitly given path, a missing file in the standard
        locations is not an error: built-in defaults are used.

        Args:
            file_path: Optional path to config file. If None, searches standard locations.

        Returns:
            Parsed Config object

        Raises:
            FileNotFoundError: If an explicit config file does not exist
            ValueError: If config file is invalid
        """
        if file_path is None:
            file_path = ConfigLoader.configFile_find()
            if file_path is None:
                return Config()

        data = ConfigLoader.yaml_load(file_path)
        return ConfigLoader.config_parse(data)

    @staticmethod
    def configWithOverrides_load(
        file_path: Optional[Path] = None,
        **overrides: Any
    ) -> Config:
        """
        Load configuration and apply command-line overrides

        Args:
            file_path: Optional path to config file
            **overrides: Key-value pairs to override config values

        Returns:
            Config object with overrides applied

        Example:
            config = ConfigLoader.configWithOverrides_load(
                desktop="kde-plasma",
                log_level="DEBUG",
            )
        """
        config = ConfigLoader.config_load(file_path)

        if overrides.get("desktop") is not None:
            config.desktop = overrides["desktop"]
        if overrides.get("xscreensaver_path") is not None:
            config.paths.xscreensaver = overrides["xscreensaver_path"]
        if overrides.get("kscreensaverrc_path") is not None:
            config.paths.kscreensaverrc = overrides["kscreensaverrc_path"]
        if overrides.get("log_level") is not None:
            config.logging.level = overrides["log_level"]

        return config
