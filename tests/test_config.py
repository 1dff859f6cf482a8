"""Tests for HookableConfig."""

import dataclasses

import pytest

from hookable.config import HookableConfig


class TestHookableConfig:
    def test_defaults(self):
        config = HookableConfig()
        assert config.validation_action == "validate"
        assert config.legacy_after_alias is False

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("HOOKABLE_VALIDATION_ACTION", raising=False)
        monkeypatch.delenv("HOOKABLE_LEGACY_AFTER_ALIAS", raising=False)
        assert HookableConfig.from_env() == HookableConfig()

    def test_from_env_values(self, monkeypatch):
        monkeypatch.setenv("HOOKABLE_VALIDATION_ACTION", "check")
        monkeypatch.setenv("HOOKABLE_LEGACY_AFTER_ALIAS", " True ")
        config = HookableConfig.from_env()
        assert config.validation_action == "check"
        assert config.legacy_after_alias is True

    def test_from_env_falsy_alias(self, monkeypatch):
        monkeypatch.setenv("HOOKABLE_LEGACY_AFTER_ALIAS", "0")
        assert HookableConfig.from_env().legacy_after_alias is False

    def test_empty_validation_action_falls_back(self, monkeypatch):
        monkeypatch.setenv("HOOKABLE_VALIDATION_ACTION", "")
        assert HookableConfig.from_env().validation_action == "validate"

    def test_config_is_frozen(self):
        config = HookableConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.legacy_after_alias = True
