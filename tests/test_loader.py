"""Tests for reading the keybinds file."""

import pytest

from hyprhelp.exceptions import (
    FileOperationError,
    KeybindsFileNotFoundError,
    KeybindsReadError,
)
from hyprhelp.keybinds import load_keybinds, load_keybinds_strict, read_keybinds_text


class TestReadKeybindsText:

    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "keybinds.conf"
        path.write_text("#/ Médias\n", encoding="utf-8")

        assert read_keybinds_text(path) == "#/ Médias\n"

    def test_keeps_line_endings(self, tmp_path):
        path = tmp_path / "keybinds.conf"
        path.write_bytes(b"#/ Apps\r\nbind = SUPER, B, exec, a\rb\n")

        assert read_keybinds_text(path) == "#/ Apps\r\nbind = SUPER, B, exec, a\rb\n"

    def test_lone_carriage_return_stays_in_line(self, tmp_path):
        path = tmp_path / "keybinds.conf"
        path.write_bytes(b"#/ Apps\r\nbind = SUPER, B, exec, a\rb\n")

        binds = load_keybinds(path)

        assert len(binds) == 1
        assert binds[0].category == "Apps"
        assert binds[0].raw_line == "bind = SUPER, B, exec, a\rb"

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.conf"

        with pytest.raises(KeybindsFileNotFoundError) as exc_info:
            read_keybinds_text(path)

        assert exc_info.value.context["path"] == str(path)
        assert isinstance(exc_info.value, FileOperationError)

    def test_directory(self, tmp_path):
        with pytest.raises(KeybindsReadError):
            read_keybinds_text(tmp_path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "keybinds.conf"
        path.write_bytes(b"bind = SUPER, Q, exec, \xff\xfe\n")

        with pytest.raises(KeybindsReadError):
            read_keybinds_text(path)


class TestLoadKeybinds:

    def test_explicit_path(self, keybinds_file):
        binds = load_keybinds(keybinds_file)

        assert len(binds) == 8

    def test_default_path(self, default_keybinds_file):
        assert len(load_keybinds()) == 8

    def test_env_path(self, keybinds_file, monkeypatch):
        monkeypatch.setenv("HYPRHELP_KEYBINDS_FILE", str(keybinds_file))

        assert len(load_keybinds()) == 8

    def test_missing_file_gives_empty_list(self, tmp_path, caplog):
        with caplog.at_level("WARNING", logger="hyprhelp"):
            binds = load_keybinds(tmp_path / "missing.conf")

        assert binds == []
        assert "No keybinds loaded" in caplog.text

    def test_empty_file_gives_empty_list(self, tmp_path):
        path = tmp_path / "keybinds.conf"
        path.write_text("", encoding="utf-8")

        assert load_keybinds(path) == []

    def test_strict_distinguishes_missing(self, tmp_path):
        with pytest.raises(KeybindsFileNotFoundError):
            load_keybinds_strict(tmp_path / "missing.conf")

    def test_rereads_on_every_call(self, keybinds_file):
        first = load_keybinds(keybinds_file)
        keybinds_file.write_text("bind = SUPER, Q, killactive\n", encoding="utf-8")

        second = load_keybinds(keybinds_file)

        assert len(first) == 8
        assert len(second) == 1
