"""Tests for factory configuration."""
import json
import logging

import pytest

from rdf_datamodel.config import (
    CONFIG_FILENAME,
    ConfigValidator,
    FactoryConfig,
)
from rdf_datamodel.errors import ConfigValidationError
from rdf_datamodel.roles import Dialect


# ========== FactoryConfig Tests ==========

class TestFactoryConfig:
    def test_defaults(self):
        config = FactoryConfig()
        assert config.dialect is Dialect.STAR
        assert config.variables is True
        assert config.patterns is False
        assert config.blank_node_prefix == "b"
        assert config.validate_language_tags is True

    def test_to_dict(self):
        config = FactoryConfig(dialect=Dialect.PLAIN, blank_node_prefix="n")
        d = config.to_dict()
        assert d["dialect"] == "plain"
        assert d["blank_node_prefix"] == "n"

    def test_from_dict(self):
        config = FactoryConfig.from_dict({"dialect": "plain", "variables": False})
        assert config.dialect is Dialect.PLAIN
        assert config.variables is False
        assert config.patterns is False

    def test_from_dict_invalid_dialect(self, caplog):
        with caplog.at_level(logging.WARNING, logger="rdf_datamodel.config"):
            config = FactoryConfig.from_dict({"dialect": "owl"})
        assert config.dialect is Dialect.STAR  # Default
        assert "owl" in caplog.text

    def test_save_and_load(self, tmp_path):
        config = FactoryConfig(dialect=Dialect.PLAIN, patterns=True)
        config.save(tmp_path)

        assert (tmp_path / CONFIG_FILENAME).exists()
        with open(tmp_path / CONFIG_FILENAME, encoding="utf-8") as f:
            assert json.load(f)["dialect"] == "plain"

        loaded = FactoryConfig.load(tmp_path)
        assert loaded == config

    def test_load_missing_returns_defaults(self, tmp_path):
        assert FactoryConfig.load(tmp_path / "nowhere") == FactoryConfig()


# ========== ConfigValidator Tests ==========

class TestConfigValidator:
    def test_valid_default(self):
        assert ConfigValidator.validate(FactoryConfig()) == []

    def test_patterns_require_variables(self):
        errors = ConfigValidator.validate(FactoryConfig(variables=False, patterns=True))
        assert any("patterns" in e for e in errors)

    @pytest.mark.parametrize("prefix", ["", "_:b", "b n", None])
    def test_bad_prefix(self, prefix):
        errors = ConfigValidator.validate(FactoryConfig(blank_node_prefix=prefix))
        assert len(errors) == 1

    def test_bad_dialect(self):
        errors = ConfigValidator.validate(FactoryConfig(dialect="star"))
        assert errors

    def test_validate_or_raise(self):
        with pytest.raises(ConfigValidationError):
            ConfigValidator.validate_or_raise(FactoryConfig(blank_node_prefix=""))
