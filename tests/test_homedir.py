import sys

import pytest

from serverkit.homedir import home_dir

_VARS = ("HOME", "HOMEDRIVE", "HOMEPATH", "USERPROFILE")


@pytest.fixture
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_posix_uses_home(clean_env, tmp_path):
    clean_env.setattr(sys, "platform", "linux")
    clean_env.setenv("HOME", str(tmp_path))
    assert home_dir() == str(tmp_path)


def test_posix_without_home_is_empty(clean_env):
    clean_env.setattr(sys, "platform", "linux")
    assert home_dir() == ""


def test_windows_prefers_config_holder(clean_env, tmp_path):
    plain = tmp_path / "plain"
    plain.mkdir()
    drive_home = tmp_path / "drive"
    (drive_home / ".apimachinery").mkdir(parents=True)
    (drive_home / ".apimachinery" / "config").write_text("")
    clean_env.setattr(sys, "platform", "win32")
    clean_env.setenv("HOME", str(plain))
    clean_env.setenv("HOMEDRIVE", str(tmp_path))
    clean_env.setenv("HOMEPATH", "/drive")
    assert home_dir() == str(tmp_path) + "/drive"


def test_windows_first_writable(clean_env, tmp_path):
    profile = tmp_path / "profile"
    profile.mkdir()
    clean_env.setattr(sys, "platform", "win32")
    clean_env.setenv("HOME", str(tmp_path / "missing"))
    clean_env.setenv("USERPROFILE", str(profile))
    assert home_dir() == str(profile)


def test_windows_falls_back_to_first_set(clean_env, tmp_path):
    missing = tmp_path / "missing"
    clean_env.setattr(sys, "platform", "win32")
    clean_env.setenv("HOME", str(missing))
    clean_env.setenv("USERPROFILE", str(tmp_path / "other"))
    assert home_dir() == str(missing)


def test_windows_nothing_set(clean_env):
    clean_env.setattr(sys, "platform", "win32")
    assert home_dir() == ""