"""Configuration model and loaders for text values.

Responsibilities:
- Define text value behaviour settings as a typed dataclass.
- Provide loader entry points for environment-, YAML- and mapping-based configuration.

Key types:
- `DataTextConfig`: normalized settings shared by text values.
- `ConfigLoader`: static construction helpers for `DataTextConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .cleaner import REPLACE_MODES, CleanOptions
from .conjunction import ConjunctionFormatter

_SWITCH_TOKENS = {"on": True, "true": True, "1": True, "off": False, "false": False, "0": False}


@dataclass(slots=True)
class DataTextConfig:
    """Behaviour settings for text values.

    Attributes:
        punctuation_guard: Reject appends that join punctuation to punctuation.
        conjunction_connector: Word placed before the last item of a conjunction.
        conjunction_penultimate: Also place a separator before the connector.
        replace_mode: Default matching mode for `replace` (`part` or `word`).
    """

    punctuation_guard: bool = True
    conjunction_connector: str = "and"
    conjunction_penultimate: bool = False
    replace_mode: str = "part"

    def validate(self) -> None:
        """Validate settings before they are used by a text value."""

        if not isinstance(self.conjunction_connector, str) or not self.conjunction_connector.strip():
            raise ValueError("`conjunction_connector` must be a non-empty string.")
        if self.replace_mode not in REPLACE_MODES:
            supported = ", ".join(sorted(REPLACE_MODES))
            raise ValueError(
                f"Unsupported `replace_mode` value `{self.replace_mode}`; supported: {supported}."
            )

    def conjunction_formatter(self) -> ConjunctionFormatter:
        """Return the list formatter described by these settings."""

        return ConjunctionFormatter(
            connector=self.conjunction_connector,
            penultimate=self.conjunction_penultimate,
        )

    def clean_options(self) -> CleanOptions:
        """Return the default replace options described by these settings."""

        return CleanOptions(mode=self.replace_mode)


class ConfigLoader:
    """Factory methods for creating `DataTextConfig` from external sources."""

    _SUPPORTED_KEYS = frozenset(
        {
            "punctuation_guard",
            "conjunction_connector",
            "conjunction_penultimate",
            "replace_mode",
        }
    )
    _ENV_PREFIX = "DATATEXT_"

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> DataTextConfig:
        """Create a validated config from `DATATEXT_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload: dict[str, str] = {}
        for key in ConfigLoader._SUPPORTED_KEYS:
            value = env_map.get(f"{ConfigLoader._ENV_PREFIX}{key.upper()}", "").strip()
            if value:
                payload[key] = value
        return ConfigLoader.from_mapping(payload, source_label="environment")

    @staticmethod
    def from_yaml(path: Path) -> DataTextConfig:
        """Create a validated config from a YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader.from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_mapping(
        payload: Mapping[str, Any], source_label: str = "mapping"
    ) -> DataTextConfig:
        """Build a validated config from a mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        defaults = DataTextConfig()
        config = DataTextConfig(
            punctuation_guard=ConfigLoader._optional_boolean(
                payload, "punctuation_guard", defaults.punctuation_guard
            ),
            conjunction_connector=(
                ConfigLoader._optional_text(payload, "conjunction_connector")
                or defaults.conjunction_connector
            ),
            conjunction_penultimate=ConfigLoader._optional_boolean(
                payload, "conjunction_penultimate", defaults.conjunction_penultimate
            ),
            replace_mode=(
                (ConfigLoader._optional_text(payload, "replace_mode") or defaults.replace_mode).lower()
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _optional_text(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional text field, treating blank values as absent."""

        value = payload.get(key)
        if value is None:
            return None
        return str(value).strip() or None

    @staticmethod
    def _optional_boolean(payload: Mapping[str, Any], key: str, default: bool) -> bool:
        """Read an on/off switch, keeping `default` when absent or blank.

        YAML booleans pass through; text accepts `on`/`off`, `true`/`false`
        and `1`/`0` in any case.
        """

        value = payload.get(key)
        if isinstance(value, bool):
            return value
        token = ConfigLoader._optional_text(payload, key)
        if token is None:
            return default
        if token.lower() not in _SWITCH_TOKENS:
            raise ValueError(f"`{key}` must be one of on/off, true/false, 1/0; got `{token}`.")
        return _SWITCH_TOKENS[token.lower()]
