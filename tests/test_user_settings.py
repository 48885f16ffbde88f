"""Tests for the settings service and local settings file."""

import json

from picngo.adapters.json_file_settings_repository import JsonFileSettingsRepository
from picngo.domain.settings import Language, UserSettings
from picngo.services.user_settings import (
    API_KEY_STORAGE_KEY,
    LANGUAGE_STORAGE_KEY,
    SettingsService,
)
from tests.conftest import InMemorySettingsRepository


def test_load_defaults_on_first_run() -> None:
    service = SettingsService(InMemorySettingsRepository())

    settings = service.load()

    assert settings == UserSettings(api_key="", language=Language.ENGLISH)
    assert not settings.has_valid_key


def test_save_api_key_trims_whitespace() -> None:
    repository = InMemorySettingsRepository()
    service = SettingsService(repository)

    settings = service.save_api_key("  sk-test \n")

    assert settings.api_key == "sk-test"
    assert settings.has_valid_key
    assert repository.values[API_KEY_STORAGE_KEY] == "sk-test"


def test_clear_api_key() -> None:
    repository = InMemorySettingsRepository({API_KEY_STORAGE_KEY: "sk-test"})
    service = SettingsService(repository)

    settings = service.clear_api_key()

    assert settings.api_key == ""
    assert not settings.has_valid_key


def test_set_language_persists_tag() -> None:
    repository = InMemorySettingsRepository()
    service = SettingsService(repository)

    settings = service.set_language(Language.CHINESE)

    assert settings.language is Language.CHINESE
    assert repository.values[LANGUAGE_STORAGE_KEY] == "zh"


def test_unknown_stored_language_falls_back_to_english() -> None:
    repository = InMemorySettingsRepository({LANGUAGE_STORAGE_KEY: "fr"})

    assert SettingsService(repository).load().language is Language.ENGLISH


def test_json_file_repository_persists_across_instances(tmp_path) -> None:
    path = tmp_path / "nested" / "settings.json"
    first = SettingsService(JsonFileSettingsRepository(path))
    first.save_api_key("sk-test")
    first.set_language(Language.JAPANESE)

    reloaded = SettingsService(JsonFileSettingsRepository(path)).load()

    assert reloaded == UserSettings(api_key="sk-test", language=Language.JAPANESE)
    assert json.loads(path.read_text(encoding="utf-8")) == {
        API_KEY_STORAGE_KEY: "sk-test",
        LANGUAGE_STORAGE_KEY: "ja",
    }


def test_json_file_repository_missing_file_returns_none(tmp_path) -> None:
    repository = JsonFileSettingsRepository(tmp_path / "absent.json")

    assert repository.get(API_KEY_STORAGE_KEY) is None


def test_json_file_repository_ignores_corrupt_file(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    repository = JsonFileSettingsRepository(path)

    assert repository.get(API_KEY_STORAGE_KEY) is None

    repository.set(API_KEY_STORAGE_KEY, "sk-new")

    assert repository.get(API_KEY_STORAGE_KEY) == "sk-new"


def test_json_file_repository_ignores_non_utf8_file(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_bytes(b"\xff\xfe")
    service = SettingsService(JsonFileSettingsRepository(path))

    assert service.load() == UserSettings()

    service.save_api_key("sk-new")

    assert service.load().api_key == "sk-new"
