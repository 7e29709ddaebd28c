"""Tests for AppConfig loading and SylOptions."""

from __future__ import annotations

import json

import pytest

from havarot.config import AppConfig, SylOptions, get_app_config, load_config


@pytest.fixture
def user_config(tmp_path):
    path = tmp_path / "havarot.json"
    path.write_text(json.dumps({
        "syllabification": {"schema": "tiberian"},
        "connector": {"timeout": 3},
    }), encoding="utf-8")
    return path


class TestAppConfig:
    def test_defaults(self):
        cfg = load_config()
        assert cfg.get("connector", "type") == "sefaria"
        assert cfg.get("syllabification", "qamets_qatan") is True
        assert cfg.get("logging", "level") == "WARNING"

    def test_missing_key_returns_default(self):
        cfg = AppConfig({"a": {"b": 1}})
        assert cfg.get("a", "b") == 1
        assert cfg.get("a", "c", default=2) == 2
        assert cfg.get("a", "b", "c") is None

    def test_merge_is_recursive(self):
        cfg = AppConfig({"a": {"b": 1, "c": 2}, "d": 3})
        cfg.merge({"a": {"c": 20}, "e": 5})
        assert cfg.data == {"a": {"b": 1, "c": 20}, "d": 3, "e": 5}

    def test_user_file_overrides_defaults(self, user_config):
        cfg = load_config(user_config)
        assert cfg.get("connector", "timeout") == 3
        assert cfg.get("connector", "type") == "sefaria"
        assert cfg.get("syllabification", "schema") == "tiberian"

    def test_missing_user_file_is_ignored(self, tmp_path):
        cfg = load_config(tmp_path / "missing.json")
        assert cfg.get("connector", "type") == "sefaria"

    def test_environment_variable(self, monkeypatch, user_config):
        monkeypatch.setenv("HAVAROT_CONFIG", str(user_config))
        assert get_app_config().get("connector", "timeout") == 3
        monkeypatch.delenv("HAVAROT_CONFIG")
        assert get_app_config().get("connector", "timeout") == 15.0


class TestSylOptions:
    def test_defaults(self):
        options = SylOptions()
        assert options.sqnmlvy and options.long_vowels and options.waw_shureq
        assert options.qamets_qatan
        assert options.holem_haser is None
        assert options.schema is None
        assert not options.allow_no_niqqud

    def test_tiberian_schema(self):
        options = SylOptions(schema="tiberian")
        assert options.sqnmlvy
        assert not options.long_vowels
        assert not options.waw_shureq
        assert not options.qamets_qatan

    def test_traditional_schema_overrides_booleans(self):
        options = SylOptions(sqnmlvy=False, long_vowels=False, schema="traditional")
        assert options.sqnmlvy and options.long_vowels

    @pytest.mark.parametrize("kwargs", [
        {"schema": "modern"},
        {"holem_haser": "keep"},
        {"sqnmlvy": "yes"},
        {"allow_no_niqqud": 1},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            SylOptions(**kwargs)

    def test_options_are_frozen(self):
        options = SylOptions()
        with pytest.raises(AttributeError):
            options.sqnmlvy = False

    def test_replace(self):
        options = SylOptions().replace(long_vowels=False)
        assert not options.long_vowels
        assert options.sqnmlvy

    def test_from_config(self, user_config):
        options = SylOptions.from_config(load_config(user_config))
        assert options.schema == "tiberian"
        assert not options.long_vowels

    def test_from_config_ignores_unknown_keys(self, caplog):
        cfg = AppConfig({"syllabification": {"long_vowels": False, "colour": "blue"}})
        options = SylOptions.from_config(cfg)
        assert not options.long_vowels
        assert "colour" in caplog.text

    def test_from_empty_config(self):
        assert SylOptions.from_config(AppConfig()) == SylOptions()
