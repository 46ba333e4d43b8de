from pathlib import Path

import pytest

from confstrap.errors import ConfigError
from confstrap.paths import default_config_path, resolve_default_path, user_home


def test_default_config_path_layout(tmp_path):
    assert default_config_path("myapp", tmp_path) == tmp_path / ".config" / "myapp" / "default.conf"


def test_default_config_path_accepts_string_home():
    assert default_config_path("myapp", "/home/user") == Path("/home/user/.config/myapp/default.conf")


def test_resolve_uses_provider(tmp_path):
    assert resolve_default_path("myapp", lambda: str(tmp_path)) == tmp_path / ".config" / "myapp" / "default.conf"


@pytest.mark.parametrize("error", [RuntimeError("no home"), KeyError("HOME"), OSError("lookup failed")])
def test_resolve_wraps_provider_errors(error):
    def provider():
        raise error

    with pytest.raises(ConfigError) as excinfo:
        resolve_default_path("myapp", provider)

    assert excinfo.value.operation == "resolve default path"
    assert excinfo.value.cause is error


def test_resolve_rejects_empty_home():
    with pytest.raises(ConfigError, match="could not determine home directory"):
        resolve_default_path("myapp", lambda: "")


def test_user_home_matches_pathlib(monkeypatch, tmp_path):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    assert user_home() == tmp_path
