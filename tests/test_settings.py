from datetime import date

import pytest

from lexicology.config.settings import SettingsManager
from lexicology.utils.constants import BUNDLED_WORDS_PATH, DEFAULT_CONFIG_PATH, MW_BASE_URL
from lexicology.utils.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def fresh_manager(monkeypatch):
    monkeypatch.delenv("MW_API_KEY", raising=False)
    SettingsManager.reset_instance()
    yield
    SettingsManager.reset_instance()


def test_bundled_defaults(tmp_path):
    settings = SettingsManager(user_config_path=tmp_path / "none.yaml").load()

    assert settings.api.base_url == MW_BASE_URL
    assert settings.api.api_key == ""
    assert settings.word_of_the_day.epoch == date(2024, 1, 1)
    assert settings.storage.word_list_path == str(BUNDLED_WORDS_PATH)
    assert DEFAULT_CONFIG_PATH.exists()


def test_user_overrides_and_env_key(tmp_path, monkeypatch):
    user = tmp_path / "config.yaml"
    user.write_text(
        "api:\n  api_key: from-file\n  timeout: 4\n"
        "word_of_the_day:\n  epoch: '2025-06-01'\n"
        "logging:\n  level: DEBUG\n",
        encoding="utf-8",
    )
    settings = SettingsManager(user_config_path=user).load()
    assert settings.api.api_key == "from-file"
    assert settings.api.timeout == 4.0
    assert settings.word_of_the_day.epoch == date(2025, 6, 1)
    assert settings.logging.level == "DEBUG"

    monkeypatch.setenv("MW_API_KEY", "from-env")
    assert SettingsManager().load().api.api_key == "from-env"


def test_invalid_epoch_raises(tmp_path):
    user = tmp_path / "config.yaml"
    user.write_text("word_of_the_day:\n  epoch: someday\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        SettingsManager(user_config_path=user).load()


def test_unreadable_yaml_is_ignored(tmp_path):
    user = tmp_path / "config.yaml"
    user.write_text("api: [unclosed", encoding="utf-8")
    settings = SettingsManager(user_config_path=user).load()
    assert settings.api.base_url == MW_BASE_URL


def test_save_round_trip(tmp_path):
    user = tmp_path / "sub" / "config.yaml"
    manager = SettingsManager(user_config_path=user)
    manager.load()
    manager.settings.api.api_key = "k"
    manager.save()

    SettingsManager.reset_instance()
    assert SettingsManager(user_config_path=user).load().api.api_key == "k"
