"""
Data factory configuration.

A factory is configured once, at construction, and enforces that
configuration for its whole lifetime. Provides:
- FactoryConfig with dict and JSON file round-tripping
- ConfigValidator for consistency checks
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from rdf_datamodel.errors import ConfigValidationError
from rdf_datamodel.roles import Dialect

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "factory.json"


@dataclass
class FactoryConfig:
    """
    Configuration for a DataFactory.

    Attributes:
        dialect: RDF dialect whose role set quad() enforces
        variables: Whether variable() is available
        patterns: Accept Variables in every quad position
        blank_node_prefix: Prefix for generated blank node identifiers
        validate_language_tags: Reject malformed language tags in literal()
    """
    dialect: Dialect = Dialect.STAR
    variables: bool = True
    patterns: bool = False
    blank_node_prefix: str = "b"
    validate_language_tags: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dialect": self.dialect.value,
            "variables": self.variables,
            "patterns": self.patterns,
            "blank_node_prefix": self.blank_node_prefix,
            "validate_language_tags": self.validate_language_tags,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FactoryConfig":
        dialect_str = data.get("dialect", Dialect.STAR.value)
        try:
            dialect = Dialect(dialect_str)
        except ValueError:
            logger.warning(f"Unknown dialect '{dialect_str}', using '{Dialect.STAR.value}'")
            dialect = Dialect.STAR

        return cls(
            dialect=dialect,
            variables=data.get("variables", True),
            patterns=data.get("patterns", False),
            blank_node_prefix=data.get("blank_node_prefix", "b"),
            validate_language_tags=data.get("validate_language_tags", True),
        )

    def save(self, path: Path) -> None:
        """Save configuration to a directory."""
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        with open(path / CONFIG_FILENAME, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Path) -> "FactoryConfig":
        """Load configuration from a directory, or defaults if none saved."""
        config_file = Path(path) / CONFIG_FILENAME
        if config_file.exists():
            with open(config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls.from_dict(data)
        logger.debug(f"No {CONFIG_FILENAME} in {path}, using defaults")
        return cls()


class ConfigValidator:
    """Validates factory configuration."""

    @staticmethod
    def validate(config: FactoryConfig) -> List[str]:
        """
        Validate configuration.

        Returns list of error messages (empty if valid).
        """
        errors = []

        if not isinstance(config.dialect, Dialect):
            errors.append(f"Invalid dialect: {config.dialect!r}")

        if config.patterns and not config.variables:
            errors.append("patterns require variables to be enabled")

        prefix = config.blank_node_prefix
        if not isinstance(prefix, str) or not prefix:
            errors.append("blank_node_prefix must be a non-empty string")
        elif prefix.startswith("_:"):
            errors.append("blank_node_prefix must not include the '_:' serialization prefix")
        elif any(ch.isspace() for ch in prefix):
            errors.append("blank_node_prefix must not contain whitespace")

        return errors

    @staticmethod
    def validate_or_raise(config: FactoryConfig) -> None:
        """Validate configuration, raising on errors."""
        errors = ConfigValidator.validate(config)
        if errors:
            raise ConfigValidationError("; ".join(errors))
