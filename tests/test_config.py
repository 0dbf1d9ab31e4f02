"""Tests for modeltext.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from modeltext.config import ConfigError, ModelTextConfig, load_config


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch) -> None:
    monkeypatch.delenv("MODELTEXT_DISABLED_VALIDATORS", raising=False)


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, ModelTextConfig)
    assert config.root == tmp_path.resolve()
    assert config.validators.enabled == []
    assert config.validators.disabled == []
    assert config.noninclusive_terms.terms == {}
    assert config.noninclusive_terms.exclude_defaults is False


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".modeltext.yml"
    config_file.write_text(
        """
validators:
  enabled: [EnumTraitRecommendedName, NoninclusiveTerms]
  disabled:
    - Spelling
noninclusive_terms:
  exclude_defaults: "yes"
  terms:
    dummy: [placeholder, sample]
    sanity: test
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.validators.enabled == ["EnumTraitRecommendedName", "NoninclusiveTerms"]
    assert config.validators.disabled == ["Spelling"]
    assert config.noninclusive_terms.exclude_defaults is True
    assert config.noninclusive_terms.terms == {"dummy": ["placeholder", "sample"], "sanity": ["test"]}


def test_load_config_resolves_sibling_file(tmp_path: Path) -> None:
    (tmp_path / ".modeltext.yml").write_text("validators:\n  disabled: NoninclusiveTerms\n", encoding="utf-8")

    config = load_config(tmp_path / "model.json")

    assert config.validators.disabled == ["NoninclusiveTerms"]


def test_env_extends_disabled_validators(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("MODELTEXT_DISABLED_VALIDATORS", "NoninclusiveTerms, Other")

    config = load_config(tmp_path)

    assert config.validators.disabled == ["NoninclusiveTerms", "Other"]


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".modeltext.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".modeltext.yml").write_text("validators: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".modeltext.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path).validators.enabled == []
