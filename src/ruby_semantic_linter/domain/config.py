"""Configuration for linter settings."""

import logging
from typing import Optional

from ruby_semantic_linter.domain.constants import DEFAULT_EXTENSION, REPORT_LEVELS

KNOWN_KEYS: frozenset[str] = frozenset({"directories", "ignore_paths", "extension", "levels", "checks"})


class ConfigurationError(TypeError):
    """Invalid configuration supplied to the linter or one of its services."""


class ConfigurationLoader:
    """
    Typed view of the ``[tool.ruby-semantic-linter]`` table.

    The raw table is read by the infrastructure layer and handed in here;
    values are validated once, on construction.
    """

    def __init__(self, config: Optional[dict[str, object]] = None) -> None:
        self._config: dict[str, object] = dict(config or {})
        self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Validate configuration values."""
        unknown = sorted(set(config) - KNOWN_KEYS)
        if unknown:
            logging.warning("Configuration Warning: unknown keys ignored: %s", ", ".join(unknown))

        for key in ("directories", "ignore_paths", "levels", "checks"):
            value = config.get(key)
            if value is None:
                continue
            if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
                raise ConfigurationError(f"'{key}' must be a list of strings")

        extension = config.get("extension")
        if extension is not None and not isinstance(extension, str):
            raise ConfigurationError("'extension' must be a string")

        levels = config.get("levels")
        if levels:
            invalid = [level for level in levels if level not in REPORT_LEVELS]  # type: ignore[union-attr]
            if invalid:
                raise ConfigurationError(f"Unknown report levels: {', '.join(invalid)}")

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def directories(self) -> Optional[list[str]]:
        """Constant search directories; None means the conventional defaults."""
        value = self._config.get("directories")
        return list(value) if value is not None else None  # type: ignore[call-overload]

    @property
    def ignore_paths(self) -> list[str]:
        return list(self._config.get("ignore_paths") or [])  # type: ignore[call-overload]

    @property
    def extension(self) -> str:
        return str(self._config.get("extension") or DEFAULT_EXTENSION)

    @property
    def levels(self) -> tuple[str, ...]:
        levels = self._config.get("levels")
        return tuple(levels) if levels else REPORT_LEVELS  # type: ignore[arg-type]

    @property
    def checks(self) -> Optional[list[str]]:
        """Names of enabled checks; None enables all of them."""
        value = self._config.get("checks")
        return list(value) if value is not None else None  # type: ignore[call-overload]

    def with_overrides(self, **overrides: object) -> "ConfigurationLoader":
        """A copy with the non-empty ``overrides`` applied (CLI flags win over the file)."""
        merged = dict(self._config)
        for key, value in overrides.items():
            if value:
                merged[key] = value
        return ConfigurationLoader(merged)
