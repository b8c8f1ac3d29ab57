"""Unit tests for document validation configuration loader."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from brdoc.config_loader import (
    Config,
    DocumentsConfig,
    HealthCardConfig,
    LoggingConfig,
    OutputConfig,
    ValidationModuleConfig,
    get_default_config,
    load_config,
)
from brdoc.types import DocumentKind


class TestDocumentsConfig:
    """Test DocumentsConfig model."""

    def test_default_enables_all_kinds(self):
        """Test every kind is enabled by default."""
        config = DocumentsConfig()
        assert config.enabled == list(DocumentKind)

    def test_kinds_from_strings(self):
        """Test kinds given as strings are resolved."""
        config = DocumentsConfig(enabled=["cpf", "CNPJ"])
        assert config.enabled == [DocumentKind.CPF, DocumentKind.CNPJ]

    def test_single_kind_string(self):
        """Test a single string is accepted as a one-item list."""
        config = DocumentsConfig(enabled="pis")
        assert config.enabled == [DocumentKind.PIS]

    def test_unknown_kind(self):
        """Test unknown kinds fail validation."""
        with pytest.raises(ValidationError):
            DocumentsConfig(enabled=["cpf", "passport"])

    def test_not_a_list(self):
        """Test null and scalar values fail validation."""
        with pytest.raises(ValidationError):
            DocumentsConfig(enabled=None)

        with pytest.raises(ValidationError):
            DocumentsConfig(enabled=5)

    def test_duplicate_kinds_kept_once(self):
        """Test repeated kinds collapse, keeping first-seen order."""
        config = DocumentsConfig(enabled=["pis", "cpf", "PIS", "cpf"])
        assert config.enabled == [DocumentKind.PIS, DocumentKind.CPF]


class TestSmallConfigs:
    """Test the leaf configuration models."""

    def test_defaults(self):
        """Test default values."""
        assert HealthCardConfig().accept_provisional is True
        assert OutputConfig().include_digits is True
        assert LoggingConfig().level == "INFO"

    def test_logging_level_normalized(self):
        """Test level names are upper-cased."""
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_logging_level_unknown(self):
        """Test unknown level names fail validation."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")


class TestLoadConfig:
    """Test loading configuration from YAML files."""

    def test_load_full_config(self, write_config):
        """Test every section is read."""
        path = write_config(
            "documents:\n"
            "  enabled: [cpf, health_card]\n"
            "health_card:\n"
            "  accept_provisional: false\n"
            "output:\n"
            "  include_digits: false\n"
            "logging:\n"
            "  level: warning\n"
        )
        config = load_config(path)

        assert isinstance(config, Config)
        validation = config.validation
        assert validation.documents.enabled == [DocumentKind.CPF, DocumentKind.HEALTH_CARD]
        assert validation.health_card.accept_provisional is False
        assert validation.output.include_digits is False
        assert validation.logging.level == "WARNING"

    def test_partial_config_keeps_defaults(self, write_config):
        """Test omitted sections fall back to defaults."""
        config = load_config(write_config("output:\n  include_digits: false\n"))
        assert config.validation.output.include_digits is False
        assert config.validation.documents.enabled == list(DocumentKind)
        assert config.validation.health_card.accept_provisional is True

    def test_empty_file(self, write_config):
        """Test an empty file yields the default configuration."""
        config = load_config(write_config(""))
        assert config == Config()

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, write_config):
        """Test malformed YAML raises a YAML error."""
        with pytest.raises(yaml.YAMLError):
            load_config(write_config("documents: [cpf\n"))

    def test_invalid_value(self, write_config):
        """Test values of the wrong type fail validation."""
        with pytest.raises(ValidationError):
            load_config(write_config("health_card:\n  accept_provisional: maybe\n"))

    def test_enabled_not_a_list(self, write_config):
        """Test an empty or scalar enabled list fails validation."""
        with pytest.raises(ValidationError):
            load_config(write_config("documents:\n  enabled:\n"))

        with pytest.raises(ValidationError):
            load_config(write_config("documents:\n  enabled: 5\n"))


class TestDefaultConfig:
    """Test the bundled default configuration."""

    def test_bundled_config(self):
        """Test the bundled file enables every kind."""
        config = get_default_config()
        assert set(config.validation.documents.enabled) == set(DocumentKind)
        assert config.validation.documents.enabled[0] == DocumentKind.CPF
        assert config.validation.health_card.accept_provisional is True

    def test_bundled_file_exists(self):
        """Test config.yaml ships next to the loader."""
        import brdoc.config_loader as module

        assert (Path(module.__file__).parent / "config.yaml").exists()

    def test_module_config_defaults(self):
        """Test ValidationModuleConfig builds without arguments."""
        config = ValidationModuleConfig()
        assert config.output.include_digits is True
