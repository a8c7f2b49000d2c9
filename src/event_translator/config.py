"""
Service configuration management.

This module loads configuration from multiple sources with a clear
priority order:

    1. Environment variables (highest priority) - for containerized deployments
    2. Config file (config/server.ini) - for static deployments
    3. Built-in defaults (lowest priority) - sensible fallbacks

Configuration is loaded once at module import time and cached. The
ServiceConfig dataclass provides typed access to all settings.

Usage:
    from event_translator.config import config

    print(config.server.port)
    print(config.translator.endpoint)

Environment Variable Mapping:
    EVT_HOST                     -> server.host
    EVT_PORT                     -> server.port
    EVT_CORS_ORIGINS             -> security.cors_origins
    EVT_LOG_LEVEL                -> logging.level
    EVT_TRANSLATOR_ENDPOINT      -> translator.endpoint
    EVT_TRANSLATOR_API_VERSION   -> translator.api_version
    EVT_TRANSLATOR_REGION        -> translator.region
    EVT_TRANSLATOR_KEY           -> translator.subscription_key
    EVT_TRANSLATOR_TIMEOUT       -> translator.timeout_seconds
    EVT_TRANSLATOR_MAX_WORKERS   -> translator.max_workers
"""

import configparser
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

# Project root directory (contains src/, config/)
PROJECT_ROOT = Path(__file__).parent.parent.parent

CONFIG_DIR = PROJECT_ROOT / "config"
CONFIG_FILE = CONFIG_DIR / "server.ini"
CONFIG_EXAMPLE = CONFIG_DIR / "server.example.ini"

_LOG_FORMATS = {
    "simple": "%(levelname)s %(message)s",
    "detailed": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
}


# =============================================================================
# CONFIGURATION DATACLASSES
# =============================================================================


@dataclass
class ServerSettings:
    """Network server configuration."""

    host: str = "0.0.0.0"  # nosec B104 - intentional for server binding
    port: int = 8080


@dataclass
class SecuritySettings:
    """Security-related configuration."""

    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "INFO"
    format: Literal["simple", "detailed"] = "detailed"


@dataclass
class TranslatorSettings:
    """Text-translation backend configuration.

    ``subscription_key`` is a credential: it is never printed or logged,
    only reported as set/unset.
    """

    endpoint: str = "https://api.cognitive.microsofttranslator.com"
    api_version: str = "3.0"
    region: str = "eastus"
    subscription_key: str = ""
    timeout_seconds: float = 10.0
    max_workers: int = 1


@dataclass
class ServiceConfig:
    """
    Complete service configuration.

    Aggregates all settings sections. Access via the module-level
    `config` singleton.
    """

    server: ServerSettings = field(default_factory=ServerSettings)
    security: SecuritySettings = field(default_factory=SecuritySettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    translator: TranslatorSettings = field(default_factory=TranslatorSettings)


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _parse_list(value: str) -> list[str]:
    """Parse a comma-separated string to list, stripping whitespace."""
    if not value or value.strip() == "":
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _load_from_ini(parser: configparser.ConfigParser, cfg: ServiceConfig) -> None:
    """Load configuration from parsed INI file into ServiceConfig."""
    # Server section
    if parser.has_section("server"):
        if parser.has_option("server", "host"):
            cfg.server.host = parser.get("server", "host")
        if parser.has_option("server", "port"):
            cfg.server.port = parser.getint("server", "port")

    # Security section
    if parser.has_section("security"):
        if parser.has_option("security", "cors_origins"):
            cfg.security.cors_origins = _parse_list(parser.get("security", "cors_origins"))

    # Logging section
    if parser.has_section("logging"):
        if parser.has_option("logging", "level"):
            cfg.logging.level = parser.get("logging", "level").upper()
        if parser.has_option("logging", "format"):
            val = parser.get("logging", "format").lower()
            if val in _LOG_FORMATS:
                cfg.logging.format = val  # type: ignore[assignment]

    # Translator section
    if parser.has_section("translator"):
        if parser.has_option("translator", "endpoint"):
            cfg.translator.endpoint = parser.get("translator", "endpoint")
        if parser.has_option("translator", "api_version"):
            cfg.translator.api_version = parser.get("translator", "api_version")
        if parser.has_option("translator", "region"):
            cfg.translator.region = parser.get("translator", "region")
        if parser.has_option("translator", "subscription_key"):
            cfg.translator.subscription_key = parser.get("translator", "subscription_key")
        if parser.has_option("translator", "timeout_seconds"):
            cfg.translator.timeout_seconds = parser.getfloat("translator", "timeout_seconds")
        if parser.has_option("translator", "max_workers"):
            cfg.translator.max_workers = parser.getint("translator", "max_workers")


def _apply_env_overrides(cfg: ServiceConfig) -> None:
    """Apply environment variable overrides to configuration."""
    # Server settings
    if env_host := os.getenv("EVT_HOST"):
        cfg.server.host = env_host
    if env_port := os.getenv("EVT_PORT"):
        cfg.server.port = int(env_port)

    # Security settings
    if env_cors := os.getenv("EVT_CORS_ORIGINS"):
        cfg.security.cors_origins = _parse_list(env_cors)

    # Logging settings
    if env_log := os.getenv("EVT_LOG_LEVEL"):
        cfg.logging.level = env_log.upper()

    # Translator settings
    if env_endpoint := os.getenv("EVT_TRANSLATOR_ENDPOINT"):
        cfg.translator.endpoint = env_endpoint
    if env_api_version := os.getenv("EVT_TRANSLATOR_API_VERSION"):
        cfg.translator.api_version = env_api_version
    if env_region := os.getenv("EVT_TRANSLATOR_REGION"):
        cfg.translator.region = env_region
    if env_key := os.getenv("EVT_TRANSLATOR_KEY"):
        cfg.translator.subscription_key = env_key
    if env_timeout := os.getenv("EVT_TRANSLATOR_TIMEOUT"):
        cfg.translator.timeout_seconds = float(env_timeout)
    if env_workers := os.getenv("EVT_TRANSLATOR_MAX_WORKERS"):
        cfg.translator.max_workers = int(env_workers)


def load_config() -> ServiceConfig:
    """
    Load configuration from all sources with proper priority.

    Priority (highest wins):
        1. Environment variables
        2. config/server.ini
        3. config/server.example.ini (fallback for development)
        4. Built-in defaults

    Returns:
        ServiceConfig: Fully populated configuration object.
    """
    cfg = ServiceConfig()

    config_file = None
    if CONFIG_FILE.exists():
        config_file = CONFIG_FILE
    elif CONFIG_EXAMPLE.exists():
        config_file = CONFIG_EXAMPLE

    if config_file:
        parser = configparser.ConfigParser()
        parser.read(config_file)
        _load_from_ini(parser, cfg)

    _apply_env_overrides(cfg)

    return cfg


def reload_config() -> "ServiceConfig":
    """
    Reload configuration from disk and environment.

    This updates the module-level `config` singleton. Already-created
    applications keep the configuration they were built with.

    Returns:
        ServiceConfig: The newly loaded configuration.
    """
    global config
    config = load_config()
    return config


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

config = load_config()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Apply the logging level and format to the root logger.

    Called once by the CLI before serving.  ``force=True`` replaces any
    handlers installed earlier in the process.
    """
    settings = settings or config.logging
    level = getattr(logging, settings.level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=_LOG_FORMATS.get(settings.format, _LOG_FORMATS["detailed"]),
        force=True,
    )


def get_config_status() -> dict:
    """
    Get configuration status for diagnostics.

    The subscription key itself is never included; only whether it is set.
    """
    return {
        "config_file_exists": CONFIG_FILE.exists(),
        "config_file_path": str(CONFIG_FILE),
        "using_example": not CONFIG_FILE.exists() and CONFIG_EXAMPLE.exists(),
        "translator_endpoint": config.translator.endpoint,
        "translator_region": config.translator.region,
        "translator_key_set": bool(config.translator.subscription_key),
        "cors_origins_count": len(config.security.cors_origins),
    }


def print_config_summary() -> None:
    """Print a summary of current configuration to stdout."""
    status = get_config_status()
    print("\n" + "=" * 60)
    print("SERVICE CONFIGURATION")
    print("=" * 60)
    print(f"Config file: {status['config_file_path']}")
    print(f"File exists: {status['config_file_exists']}")
    if status["using_example"]:
        print("WARNING: Using example config (copy to server.ini for production)")
    print("-" * 60)
    print(f"Server:       {config.server.host}:{config.server.port}")
    print(f"CORS origins: {config.security.cors_origins}")
    print(f"Log level:    {config.logging.level}")
    print(f"Translator:   {config.translator.endpoint} (api-version {config.translator.api_version})")
    print(f"Region:       {config.translator.region}")
    print(f"Key set:      {status['translator_key_set']}")
    print(f"Timeout:      {config.translator.timeout_seconds}s")
    print(f"Max workers:  {config.translator.max_workers}")
    print("=" * 60 + "\n")
