"""Shared pytest fixtures for hyprhelp tests."""

from pathlib import Path

import pytest

SAMPLE_CONF = """\
# Hyprland keybinds
$mainMod = SUPER

bind = $mainMod, Return, exec, kitty # Terminal
#/ Apps
bind = SUPER, B, exec, firefox
bind = SUPER SHIFT, Q, killactive # Close window
# bind = SUPER, X, exit
#. bind = SUPER, Z, exit
#/ Windows
bindm = SUPER, mouse:272, movewindow
bindel = , XF86AudioRaiseVolume, exec, wpctl set-volume @DEFAULT_AUDIO_SINK@ 5%+
bind = SUPER, left, movefocus, l
#/
bind = CTRL_ALT, code:10, workspace, 1
"""


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at a temp dir and clear HYPRHELP_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("HYPRHELP_KEYBINDS_FILE", "HYPRHELP_CONFIG_FILE", "HYPRHELP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def sample_conf() -> str:
    """Keybinds file content covering every line kind."""
    return SAMPLE_CONF


@pytest.fixture
def keybinds_file(tmp_path) -> Path:
    """Write the sample keybinds file to a temp path."""
    path = tmp_path / "keybinds.conf"
    path.write_text(SAMPLE_CONF, encoding="utf-8")
    return path


@pytest.fixture
def default_keybinds_file(isolated_home) -> Path:
    """Write the sample file at ~/.config/hypr/configs/keybinds.conf."""
    path = isolated_home / ".config" / "hypr" / "configs" / "keybinds.conf"
    path.parent.mkdir(parents=True)
    path.write_text(SAMPLE_CONF, encoding="utf-8")
    return path
