"""Configuration management for genericfile.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

CONFIG_FILENAME = "genericfile.toml"

OUTPUT_FORMATS = ("text", "json")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class OutputConfig:
    """Command line output configuration."""

    format: str = "text"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    output: OutputConfig
    logging: LoggingConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for genericfile.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls.default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def default(cls) -> Config:
        """Create config with all defaults."""
        return cls(
            server=ServerConfig(),
            output=OutputConfig(),
            logging=LoggingConfig(),
        )

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        return cls(
            server=cls._parse_server(data.get("server")),
            output=cls._parse_output(data.get("output")),
            logging=cls._parse_logging(data.get("logging")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section."""
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        # bool is an int subclass
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_output(cls, data: object) -> OutputConfig:
        """Parse output configuration section."""
        if data is None:
            return OutputConfig()

        if not isinstance(data, dict):
            raise ValueError("output section must be a dictionary")

        output_format = data.get("format", "text")
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output.format must be one of: {', '.join(OUTPUT_FORMATS)}"
            )

        return OutputConfig(format=output_format)

    @classmethod
    def _parse_logging(cls, data: object) -> LoggingConfig:
        """Parse logging configuration section."""
        if data is None:
            return LoggingConfig()

        if not isinstance(data, dict):
            raise ValueError("logging section must be a dictionary")

        level = data.get("level", "WARNING")
        if not isinstance(level, str):
            raise ValueError("logging.level must be a string")

        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of: {', '.join(LOG_LEVELS)}")

        return LoggingConfig(level=level)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        output_format: str | None = None,
        log_level: str | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            output_format: Override output.format
            log_level: Override logging.level

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        output = self.output
        if output_format is not None:
            output = replace(self.output, format=output_format)

        logging = self.logging
        if log_level is not None:
            logging = replace(self.logging, level=log_level)

        return replace(self, server=server, output=output, logging=logging)
