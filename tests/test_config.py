import pytest

from fluentsql import BuilderConfig, ConfigurationError, SelectBuilder
from fluentsql.config import get_default_config, set_debug, set_default_config


@pytest.fixture(autouse=True)
def restore_default_config():
    previous = get_default_config()
    yield
    set_default_config(previous)


def test_defaults():
    config = BuilderConfig()
    assert config.debug is False
    assert config.throw_exceptions is False
    assert config.default_connection == "default"


def test_from_env(monkeypatch):
    monkeypatch.setenv("FLUENTSQL_DEBUG", "yes")
    monkeypatch.setenv("FLUENTSQL_THROW_EXCEPTIONS", "0")
    monkeypatch.setenv("FLUENTSQL_DEFAULT_CONNECTION", " reporting ")
    config = BuilderConfig.from_env()
    assert config == BuilderConfig(debug=True, throw_exceptions=False, default_connection="reporting")


def test_from_env_mapping_with_prefix():
    config = BuilderConfig.from_env("APP_", {"APP_DEBUG": "On", "APP_DEFAULT_CONNECTION": ""})
    assert config.debug is True
    assert config.default_connection == "default"


def test_from_env_rejects_bad_boolean():
    with pytest.raises(ConfigurationError):
        BuilderConfig.from_env(environ={"FLUENTSQL_DEBUG": "maybe"})


def test_with_changes_returns_new_config():
    config = BuilderConfig()
    changed = config.with_changes(debug=True)
    assert changed.debug is True
    assert config.debug is False


def test_builders_capture_process_default():
    set_debug(True)
    assert get_default_config().debug is True
    assert SelectBuilder("s", "t").config.debug is True
    set_debug(False)
    assert SelectBuilder("s", "t").config.debug is False


def test_set_default_config_validates_type():
    with pytest.raises(ConfigurationError):
        set_default_config({"debug": True})
    previous = set_default_config(BuilderConfig(default_connection="other"))
    assert previous.default_connection == "default"
