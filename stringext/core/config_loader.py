"""
Configuration loader for stringext.

Loads settings from config.json and provides typed access via dataclasses.
Supports singleton pattern for global access and runtime reload capability.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError


@dataclass
class PathsConfig:
    """Configuration for file system paths."""
    logs_directory: Optional[Path]


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str
    format: str
    max_file_size_mb: int
    backup_count: int


@dataclass
class TextConfig:
    """Configuration for the text utilities."""
    stream_encoding: str


@dataclass
class Config:
    """
    Main configuration container holding all config sections.

    Provides singleton access via get_config() function.
    """
    paths: PathsConfig
    logging: LoggingConfig
    text: TextConfig
    project_root: Path = field(default_factory=Path)

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the config.json file.

        Returns:
            Populated Config instance.

        Raises:
            ConfigurationError: If file is missing or invalid.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)}
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                {"path": str(config_path)}
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Config file must contain a JSON object",
                {"path": str(config_path)}
            )

        project_root = config_path.parent.parent

        return cls._parse_config(data, project_root)

    @classmethod
    def defaults(cls, project_root: Path = None) -> "Config":
        """Build a Config holding only default values."""
        return cls._parse_config({}, project_root or Path.cwd())

    @classmethod
    def _parse_config(cls, data: dict, project_root: Path) -> "Config":
        """Parse raw config dict into typed Config object."""
        paths_data = cls._section(data, "paths")
        logs_directory = paths_data.get("logs_directory")
        paths = PathsConfig(
            logs_directory=cls._resolve_path(logs_directory, project_root) if logs_directory else None
        )

        log_data = cls._section(data, "logging")
        logging_cfg = LoggingConfig(
            level=log_data.get("level", "WARNING"),
            format=log_data.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            max_file_size_mb=log_data.get("max_file_size_mb", 10),
            backup_count=log_data.get("backup_count", 5)
        )

        text_data = cls._section(data, "text")
        text = TextConfig(
            stream_encoding=text_data.get("stream_encoding", "utf-8")
        )

        return cls(
            paths=paths,
            logging=logging_cfg,
            text=text,
            project_root=project_root
        )

    @staticmethod
    def _section(data: dict, name: str) -> dict:
        """Return a config section, rejecting anything but a JSON object."""
        section = data.get(name, {})
        if not isinstance(section, dict):
            raise ConfigurationError(
                f"Config section '{name}' must be a JSON object",
                {"section": name, "type": type(section).__name__}
            )
        return section

    @staticmethod
    def _resolve_path(path_str: str, project_root: Path) -> Path:
        """Resolve a path string, making relative paths absolute."""
        path = Path(path_str)
        if path.is_absolute():
            return path
        return project_root / path


_config_instance: Optional[Config] = None


def get_config(config_path: Path = None) -> Config:
    """
    Get the singleton Config instance.

    Args:
        config_path: Optional path to config file. If not provided,
                    searches upward from current directory and falls
                    back to defaults when nothing is found.

    Returns:
        The global Config instance.

    Raises:
        ConfigurationError: If an existing config cannot be loaded.
    """
    global _config_instance

    if _config_instance is None or config_path is not None:
        if config_path is None:
            config_path = _find_config_file()
        if config_path is None:
            _config_instance = Config.defaults()
        else:
            _config_instance = Config.from_file(config_path)

    return _config_instance


def _find_config_file() -> Optional[Path]:
    """Search upward from current directory to find config/config.json."""
    current = Path.cwd()

    for _ in range(10):
        config_path = current / "config" / "config.json"
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def get_loaded_config() -> Optional[Config]:
    """
    Return the Config if one has been loaded, without searching for a file.

    Library functions use this so that nothing on disk is read unless the
    caller asked for it through get_config() or reload_config().
    """
    return _config_instance


def reload_config(config_path: Path = None) -> Config:
    """
    Force reload of configuration.

    Args:
        config_path: Optional path to config file.

    Returns:
        Fresh Config instance.
    """
    global _config_instance
    _config_instance = None
    return get_config(config_path)


if __name__ == "__main__":
    try:
        config = get_config()
        print(f"Project root: {config.project_root}")
        print(f"Logs directory: {config.paths.logs_directory}")
        print(f"Log level: {config.logging.level}")
        print(f"Stream encoding: {config.text.stream_encoding}")
    except ConfigurationError as e:
        print(f"Config error: {e.message}")
