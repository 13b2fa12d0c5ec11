"""Tests for the TOML configuration layer."""

import pytest
from pydantic import ValidationError

from shared_pages import config as app_config
from shared_pages.config import (
    AppSettings,
    FormSettings,
    deep_merge_dicts,
    get_cli_setting,
    load_app_settings,
    load_cli_config_and_ensure_existence,
    save_setting_to_cli_config,
)


def test_missing_file_is_created_with_defaults(isolated_config):
    assert not isolated_config.exists()

    config = load_cli_config_and_ensure_existence()

    assert isolated_config.exists()
    assert config["general"]["initial_screen"] == "page_one"
    assert config["form"]["required_message"] == "This is a required field"


def test_user_values_are_merged_over_defaults(isolated_config):
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.write_text('[form]\nplaceholder = "Who are you?"\n', encoding="utf-8")

    config = load_cli_config_and_ensure_existence()

    assert config["form"]["placeholder"] == "Who are you?"
    assert config["form"]["label_prefix"] == "Your Data: "
    assert config["logging"]["log_level"] == "INFO"


def test_bad_toml_falls_back_to_defaults(isolated_config):
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.write_text("[form\nplaceholder = ", encoding="utf-8")

    config = load_cli_config_and_ensure_existence()

    assert config == app_config.DEFAULT_CONFIG_FROM_TOML


def test_config_is_cached_until_forced(isolated_config):
    first = load_cli_config_and_ensure_existence()
    isolated_config.write_text('[general]\ntitle = "Changed"\n', encoding="utf-8")

    assert load_cli_config_and_ensure_existence() is first
    assert load_cli_config_and_ensure_existence(force_reload=True)["general"]["title"] == "Changed"


def test_get_cli_setting(isolated_config):
    assert get_cli_setting("general", "theme") == "shared-pages-light"
    assert get_cli_setting("general", "missing", "fallback") == "fallback"
    assert get_cli_setting("no_section", "key", 42) == 42


def test_save_setting_round_trips(isolated_config):
    assert save_setting_to_cli_config("form", "label_prefix", "Name: ")

    assert get_cli_setting("form", "label_prefix") == "Name: "
    assert load_app_settings().form.label_prefix == "Name: "


def test_save_setting_refuses_corrupt_file(isolated_config):
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.write_text("not = [valid", encoding="utf-8")

    assert not save_setting_to_cli_config("form", "label_prefix", "Name: ")


def test_save_setting_reports_structure_conflict(isolated_config):
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.write_text('general = "flat"\n', encoding="utf-8")

    assert not save_setting_to_cli_config("general", "title", "x")


def test_app_settings_defaults(isolated_config):
    settings = load_app_settings()

    assert isinstance(settings, AppSettings)
    assert settings.general.title == "Provider Example"
    assert settings.form.placeholder == "Enter anything you want"
    assert settings.logging.log_to_file is True


def test_invalid_values_fall_back_to_default_settings(isolated_config):
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.write_text('[logging]\nlog_to_file = "sometimes"\n', encoding="utf-8")

    settings = load_app_settings()

    assert settings == AppSettings()


@pytest.mark.parametrize("base,update,expected", [
    ({"a": 1}, {"b": 2}, {"a": 1, "b": 2}),
    ({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}}, {"a": {"x": 1, "y": 3}}),
    ({"a": {"x": 1}}, {"a": "flat"}, {"a": "flat"}),
])
def test_deep_merge_dicts(base, update, expected):
    assert deep_merge_dicts(base, update) == expected


def test_deep_merge_does_not_mutate_base():
    base = {"a": {"x": 1}}
    deep_merge_dicts(base, {"a": {"x": 2}})
    assert base == {"a": {"x": 1}}


def test_blank_required_message_is_rejected(isolated_config):
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.write_text('[form]\nrequired_message = ""\n', encoding="utf-8")

    settings = load_app_settings()

    assert settings.form.required_message == "This is a required field"


def test_form_settings_reject_blank_required_message():
    with pytest.raises(ValidationError):
        FormSettings(required_message="")
