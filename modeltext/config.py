"""Configuration loading for modeltext (.modeltext.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".modeltext.yml"
DISABLED_ENV_VAR = "MODELTEXT_DISABLED_VALIDATORS"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ValidatorConfig:
    """Validator enablement; an empty ``enabled`` list means every validator."""

    enabled: List[str] = field(default_factory=list)
    disabled: List[str] = field(default_factory=list)


@dataclass
class NoninclusiveTermsConfig:
    """Term list for the non-inclusive terms validator."""

    terms: Dict[str, List[str]] = field(default_factory=dict)
    exclude_defaults: bool = False


@dataclass
class ModelTextConfig:
    """Represents the settings defined in .modeltext.yml."""

    root: Path
    validators: ValidatorConfig = field(default_factory=ValidatorConfig)
    noninclusive_terms: NoninclusiveTermsConfig = field(default_factory=NoninclusiveTermsConfig)


def load_config(config_path: Path) -> ModelTextConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    data: Dict[str, Any] = {}
    if config_file.exists():
        loaded = _read_config(config_file)
        if not isinstance(loaded, dict):
            raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")
        data = loaded

    validator_data = _as_dict(data.get("validators"))
    validators = ValidatorConfig(
        enabled=_as_str_list(validator_data.get("enabled")),
        disabled=_as_str_list(validator_data.get("disabled")),
    )
    for name in _env_list(os.getenv(DISABLED_ENV_VAR)):
        if name not in validators.disabled:
            validators.disabled.append(name)

    terms_data = _as_dict(data.get("noninclusive_terms"))
    noninclusive_terms = NoninclusiveTermsConfig()
    if terms_data:
        raw_terms = _as_dict(terms_data.get("terms"))
        noninclusive_terms.terms = {
            str(term): _as_str_list(replacements) for term, replacements in raw_terms.items()
        }
        noninclusive_terms.exclude_defaults = _as_bool(terms_data.get("exclude_defaults")) or False

    return ModelTextConfig(
        root=root,
        validators=validators,
        noninclusive_terms=noninclusive_terms,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _env_list(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ModelTextConfig",
    "NoninclusiveTermsConfig",
    "ValidatorConfig",
    "load_config",
]
