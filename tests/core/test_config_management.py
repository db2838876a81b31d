# tests/core/test_config_management.py
import json

import pytest

from treeverb.core.errors import ConfError
from treeverb.core.managers.config_manager import ConfigManager
from treeverb.core.utils.path_utils import PathUtils
from treeverb.core.verb_registry import VerbStore

MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING"
    },
    "verbs": [
        {"invocation": "rm", "execution": "/bin/rm -rf {file}", "leave_app": False},
    ],
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    An isolated environment for the ConfigManager: packaged defaults and
    user conf file both live in tmp_path.
    """
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))
    monkeypatch.setattr(PathUtils, "get_default_settings_file", staticmethod(lambda: settings_file))

    user_conf = tmp_path / "conf.json"
    manager = ConfigManager()
    manager.use_user_conf(user_conf)
    yield manager, user_conf
    manager.use_user_conf(None)


def test_config_manager_is_a_singleton():
    assert ConfigManager() is ConfigManager()


def test_config_manager_load(config_env):
    manager, _ = config_env
    assert manager.get_nested("debug") == {"level": "WARNING"}
    assert [verb.invocation for verb in manager.get_verb_confs()] == ["rm"]


def test_config_manager_get_nested(config_env):
    manager, _ = config_env
    assert manager.get_nested("debug.level") == "WARNING"
    assert manager.get_nested("non.existent.key", "default") == "default"


def test_config_manager_reset(config_env):
    """Removing the user conf file brings the defaults back on reset."""
    manager, user_conf = config_env
    user_conf.write_text(json.dumps({"debug": {"level": "DEBUG"}}))
    manager.reset()
    assert manager.get_nested("debug.level") == "DEBUG"
    user_conf.unlink()
    manager.reset()
    assert manager.get_nested("debug.level") == "WARNING"


def test_user_conf_is_merged(config_env):
    """User verbs come before the default ones, other keys override."""
    manager, user_conf = config_env
    user_conf.write_text(json.dumps({
        "debug": {"level": "DEBUG"},
        "verbs": [{"invocation": "view", "key": "enter", "execution": "less {file}"}],
    }))
    manager.reset()
    assert manager.get_nested("debug.level") == "DEBUG"
    assert [verb.invocation for verb in manager.get_verb_confs()] == ["view", "rm"]


def test_invalid_user_json_is_a_conf_error(config_env):
    manager, user_conf = config_env
    user_conf.write_text("{not json")
    with pytest.raises(ConfError):
        manager.reset()


def test_invalid_verb_entry_is_a_conf_error(config_env):
    manager, user_conf = config_env
    user_conf.write_text(json.dumps({"verbs": [{"invocation": "x"}]}))
    manager.reset()
    with pytest.raises(ConfError):
        manager.get_verb_confs()


def test_bad_invocation_prevents_the_verb_store(config_env):
    """A placeholder which can't be compiled stops the startup, naming the invocation."""
    manager, user_conf = config_env
    user_conf.write_text(json.dumps({"verbs": [{"invocation": "x {a-b}", "execution": "x"}]}))
    manager.reset()
    with pytest.raises(ConfError) as excinfo:
        VerbStore(manager.get_verb_confs())
    assert "{a-b}" in str(excinfo.value)


def test_packaged_settings_are_valid():
    """The defaults shipped with the package make a valid verb store."""
    with open(PathUtils.get_default_settings_file(), encoding="utf-8") as f:
        settings = json.load(f)
    from treeverb.core.verb_registry import parse_verb_confs
    store = VerbStore(parse_verb_confs(settings["verbs"]))
    assert store.get("cd").from_shell
    assert store.get("md").name == "mkdir"
