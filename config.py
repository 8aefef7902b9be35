#!/usr/bin/env python3
"""
Configuration loader for Tagger
Loads configuration from config.yaml file. Every setting has a default, so
the file is optional.
"""

import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field


DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Get a config section, treating a missing or empty one as {}"""
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' section in config.yaml must be a mapping")
    return section


@dataclass
class ServerConfig:
    """HTTP server configuration"""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    auto_port: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ServerConfig':
        """Create ServerConfig from dictionary"""
        # Fall back to environment variables when not set in the file
        host = data.get('host') or os.getenv('TAGGER_HOST', DEFAULT_HOST)
        port = data.get('port')
        if port is None:
            port = os.getenv('TAGGER_PORT', DEFAULT_PORT)

        try:
            port = int(port)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid server port: {port!r}")
        if not 0 < port < 65536:
            raise ValueError(f"Server port out of range: {port}")

        return cls(
            host=host,
            port=port,
            auto_port=bool(data.get('auto_port', False))
        )


@dataclass
class CorsConfig:
    """CORS configuration"""
    allow_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CorsConfig':
        """Create CorsConfig from dictionary"""
        origins = data.get('allow_origins', ["*"])
        if isinstance(origins, str):
            origins = [origins]
        elif not isinstance(origins, list):
            raise ValueError("cors.allow_origins must be a list of origins")
        return cls(allow_origins=[str(origin) for origin in origins])


@dataclass
class LoggingConfig:
    """Logging configuration"""
    verbose: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LoggingConfig':
        """Create LoggingConfig from dictionary"""
        # Empty string and 'null' both mean no log file
        log_file = data.get('log_file')
        if log_file == '' or log_file == 'null':
            log_file = None
        return cls(
            verbose=bool(data.get('verbose', False)),
            log_file=log_file
        )


@dataclass
class Config:
    """Complete application configuration"""
    server: ServerConfig = field(default_factory=ServerConfig)
    cors: CorsConfig = field(default_factory=CorsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create Config from dictionary"""
        return cls(
            server=ServerConfig.from_dict(_section(data, 'server')),
            cors=CorsConfig.from_dict(_section(data, 'cors')),
            logging=LoggingConfig.from_dict(_section(data, 'logging'))
        )


def find_config_file() -> Optional[Path]:
    """Look for config.yaml in the current directory, then the script directory"""
    for directory in (Path.cwd(), Path(__file__).parent):
        config_file = directory / 'config.yaml'
        if config_file.exists():
            return config_file
    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load complete configuration from YAML file

    Args:
        config_path: Path to config.yaml file. If None, looks for config.yaml
                     in the current directory or script directory, and uses
                     the defaults when there isn't one.

    Returns:
        Config object with server, CORS and logging settings

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        ValueError: If a configuration value is invalid
    """
    if config_path is None:
        config_file = find_config_file()
        if config_file is None:
            return Config.from_dict({})
    else:
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

    # Load and parse YAML file
    with open(config_file, 'r', encoding='utf-8') as f:
        config_data = yaml.safe_load(f)

    # An empty file means all defaults
    if config_data is None:
        config_data = {}
    if not isinstance(config_data, dict):
        raise ValueError("Configuration file must contain a mapping at the top level")

    return Config.from_dict(config_data)
