"""Loader for backoff configurations stored as YAML or plain mappings.

A configuration document holds the ``Backoff`` fields either at the top
level or nested under a ``backoff`` key:

    backoff:
      retries: 8
      min: 10ms
      max: 20ms
      factor: 2
      jitter: 0.3
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from exponential_backoff.backoff import Backoff
from exponential_backoff.exceptions import BackoffConfigError

logger = logging.getLogger(__name__)


class BackoffLoader:
    """Loader for backoff configurations.

    Example:
        >>> loader = BackoffLoader()
        >>> backoff = loader.load_from_string("retries: 3\\nmin: 10ms\\n")
        >>> backoff.retries
        3
    """

    SECTION = "backoff"

    def load(self, yaml_path: str | Path) -> Backoff:
        """Load and validate a YAML configuration file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            Validated Backoff instance.

        Raises:
            BackoffConfigError: If the file cannot be read, parsed, or validated.
        """
        path = Path(yaml_path)

        try:
            with path.open("r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise BackoffConfigError(
                f"Configuration file not found: {path}", source=str(path)
            ) from e
        except yaml.YAMLError as e:
            raise BackoffConfigError(
                f"Invalid YAML in {path}: {e}", source=str(path)
            ) from e

        return self._parse_raw_config(raw_config, str(path))

    def load_from_string(self, yaml_content: str) -> Backoff:
        """Load configuration from a YAML string.

        Args:
            yaml_content: YAML configuration as a string.

        Returns:
            Validated Backoff instance.

        Raises:
            BackoffConfigError: If content cannot be parsed or validated.
        """
        try:
            raw_config = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise BackoffConfigError(f"Invalid YAML: {e}", source="<string>") from e

        return self._parse_raw_config(raw_config, "<string>")

    def from_mapping(self, data: Any) -> Backoff:
        """Build a configuration from an already parsed mapping."""
        return self._parse_raw_config(data, "<mapping>")

    def _parse_raw_config(self, raw_config: Any, source: str) -> Backoff:
        """Validate a parsed document into a Backoff.

        Args:
            raw_config: Parsed YAML document.
            source: Source file path or identifier for error messages.

        Returns:
            Validated Backoff.

        Raises:
            BackoffConfigError: On structural or validation errors.
        """
        if not isinstance(raw_config, dict):
            raise BackoffConfigError(
                f"Configuration must be a mapping, got {type(raw_config).__name__}",
                source=source,
            )

        section = raw_config.get(self.SECTION, raw_config)
        if not isinstance(section, dict):
            raise BackoffConfigError(
                f"'{self.SECTION}' section in {source} must be a mapping",
                source=source,
            )

        try:
            backoff = Backoff.model_validate(section)
        except ValidationError as e:
            raise BackoffConfigError(
                f"Configuration validation failed for {source}: {e}", source=source
            ) from e

        logger.debug(
            "Loaded backoff configuration from %s (retries=%d)",
            source,
            backoff.retries,
        )
        return backoff
