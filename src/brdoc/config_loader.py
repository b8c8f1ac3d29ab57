"""Configuration loader with Pydantic validation for document processing.

This module provides type-safe configuration loading from YAML files using
Pydantic models for validation and default values. The core validators in
:mod:`brdoc.documents` take no configuration; these settings only drive
:class:`brdoc.processor.DocumentProcessor` and the command line.
"""

import logging
from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, Field, field_validator

from .types import DocumentKind


class DocumentsConfig(BaseModel):
    """Document kind selection.

    Attributes:
        enabled: Kinds the processor accepts, in the order ``identify`` tries them
    """

    enabled: List[DocumentKind] = Field(default_factory=lambda: list(DocumentKind))

    @field_validator("enabled", mode="before")
    @classmethod
    def _resolve_kinds(cls, value):
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            # Left for the List[DocumentKind] check to reject
            return value
        # Repeated kinds are kept once, in first-seen order
        return list(dict.fromkeys(DocumentKind.from_value(kind) for kind in value))


class HealthCardConfig(BaseModel):
    """Health card (CNS) configuration.

    Attributes:
        accept_provisional: Accept provisional numbers (leading 7, 8 or 9)
    """

    accept_provisional: bool = True


class OutputConfig(BaseModel):
    """Output configuration.

    Attributes:
        include_digits: Include extracted digits in validation results
    """

    include_digits: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration used by the command line.

    Attributes:
        level: Root logging level name
        format: Log record format string
    """

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {value}")
        return level


class ValidationModuleConfig(BaseModel):
    """Complete validation module configuration.

    Attributes:
        documents: Enabled document kinds
        health_card: Health card options
        output: Result formatting options
        logging: Logging options
    """

    documents: DocumentsConfig = Field(default_factory=DocumentsConfig)
    health_card: HealthCardConfig = HealthCardConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()


class Config(BaseModel):
    """Root configuration container.

    Attributes:
        validation: Validation module configuration
    """

    validation: ValidationModuleConfig = Field(default_factory=ValidationModuleConfig)


def load_config(config_path: Path) -> Config:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated Config object with all settings

    Raises:
        FileNotFoundError: If config file does not exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If configuration validation fails

    Example:
        >>> config = load_config(Path("src/brdoc/config.yaml"))
        >>> print(config.validation.health_card.accept_provisional)
        True
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    # Wrap flat YAML structure in 'validation' key for Config model
    return Config(validation=ValidationModuleConfig(**config_dict))


def get_default_config() -> Config:
    """Get default configuration from bundled config.yaml file.

    Returns:
        Config object loaded from the package's config.yaml
    """
    default_config_path = Path(__file__).parent / "config.yaml"
    if default_config_path.exists():
        return load_config(default_config_path)
    else:
        # Fallback to hardcoded defaults if config file is missing
        return Config()
