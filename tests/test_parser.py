"""Tests for the keybinds.conf parser."""

import pytest

from hyprhelp.keybinds import Keybind, parse_keybinds


class TestExampleLines:
    """Single-line and two-line inputs with known results."""

    def test_section_then_bind(self):
        """A section marker names the category of the following bind."""
        binds = parse_keybinds("#/ Apps\nbind = SUPER, Return, exec, kitty")

        assert binds == [
            Keybind(
                modifiers="SUPER",
                key="Return",
                action="exec, kitty",
                description="exec, kitty",
                category="Apps",
                is_commented=False,
                raw_line="bind = SUPER, Return, exec, kitty",
            )
        ]

    def test_inline_comment_becomes_description(self):
        binds = parse_keybinds("bind = SUPER SHIFT, Q, killactive # Close window")

        assert len(binds) == 1
        assert binds[0].modifiers == "SUPER + SHIFT"
        assert binds[0].action == "killactive"
        assert binds[0].description == "Close window"
        assert binds[0].category == "General"

    def test_commented_bind_is_kept_and_flagged(self):
        binds = parse_keybinds("# bind = SUPER, X, exit")

        assert len(binds) == 1
        assert binds[0].is_commented is True
        assert binds[0].modifiers == "SUPER"
        assert binds[0].key == "X"
        assert binds[0].action == "exit"

    def test_ignore_marker_drops_bind(self):
        assert parse_keybinds("#. bind = SUPER, Z, exit") == []

    def test_blank_fields_are_dropped(self):
        assert parse_keybinds("bind = , , ") == []

    def test_mouse_bind_gets_label(self):
        binds = parse_keybinds("bindm = SUPER, mouse:272, movewindow")

        assert len(binds) == 1
        assert binds[0].key == "Mouse Left"
        assert binds[0].action == "movewindow"
        assert binds[0].description == "Mouse: movewindow"

    def test_mouse_bind_keeps_inline_description(self):
        binds = parse_keybinds("bindm = SUPER, mouse:273, resizewindow # Resize")

        assert binds[0].description == "Resize"

    def test_comment_only_action_is_dropped(self):
        """An action that is nothing but an inline comment yields no record."""
        assert parse_keybinds("bind = SUPER, Q, # nothing here") == []

    def test_empty_input(self):
        assert parse_keybinds("") == []


class TestSampleFile:
    """Parsing a complete file."""

    def test_record_count(self, sample_conf):
        binds = parse_keybinds(sample_conf)

        assert len(binds) == 8
        assert sum(1 for b in binds if b.is_commented) == 1

    def test_order_matches_file(self, sample_conf):
        binds = parse_keybinds(sample_conf)

        assert [b.key for b in binds] == [
            "Return",
            "B",
            "Q",
            "X",
            "Mouse Left",
            "Xf86audioraisevolume",
            "←",
            "10",
        ]

    def test_categories_follow_markers(self, sample_conf):
        binds = parse_keybinds(sample_conf)

        assert [b.category for b in binds] == [
            "General",
            "Apps",
            "Apps",
            "Apps",
            "Windows",
            "Windows",
            "Windows",
            "Windows",  # An empty "#/" keeps the previous category
        ]

    def test_main_mod_alias(self, sample_conf):
        first = parse_keybinds(sample_conf)[0]

        assert first.modifiers == "SUPER"
        assert first.action == "exec, kitty"
        assert first.description == "Terminal"

    def test_variant_suffix_without_mouse_is_not_labelled(self, sample_conf):
        volume = parse_keybinds(sample_conf)[5]

        assert volume.modifiers == ""
        assert volume.action == "exec, wpctl set-volume @DEFAULT_AUDIO_SINK@ 5%+"
        assert volume.description == volume.action

    def test_keycode_and_underscore_modifiers(self, sample_conf):
        last = parse_keybinds(sample_conf)[-1]

        assert last.modifiers == "CTRL + ALT"
        assert last.key == "10"
        assert last.action == "workspace, 1"

    def test_variable_and_plain_comment_lines_are_skipped(self, sample_conf):
        """'$mainMod = SUPER' and '# Hyprland keybinds' produce nothing."""
        binds = parse_keybinds(sample_conf)

        assert all("$mainMod = SUPER" != b.raw_line for b in binds)
        assert all(not b.raw_line.startswith("# Hyprland") for b in binds)


class TestParserProperties:
    """Invariants that hold for any input."""

    def test_deterministic(self, sample_conf):
        assert parse_keybinds(sample_conf) == parse_keybinds(sample_conf)

    def test_no_state_between_calls(self):
        """A section from one parse does not leak into the next."""
        parse_keybinds("#/ Media\nbind = SUPER, M, exec, mpv")
        binds = parse_keybinds("bind = SUPER, T, exec, foot")

        assert binds[0].category == "General"

    def test_raw_line_is_untouched(self):
        line = "   bind = SUPER, T, exec, foot   # Terminal  "
        binds = parse_keybinds(f"#/ Apps\n{line}\n")

        assert binds[0].raw_line == line
        assert binds[0].description == "Terminal"

    def test_section_persists_across_skipped_lines(self):
        text = "\n".join(
            [
                "#/ Apps",
                "",
                "#. bind = SUPER, Z, exit",
                "# just a note",
                "not a directive",
                "bind = SUPER, B, exec, firefox",
            ]
        )

        binds = parse_keybinds(text)

        assert len(binds) == 1
        assert binds[0].category == "Apps"

    def test_ignored_section_marker_does_not_change_category(self):
        text = "#/ Apps\n#. #/ Hidden\nbind = SUPER, B, exec, firefox"

        assert parse_keybinds(text)[0].category == "Apps"

    def test_plain_comment_does_not_change_category(self):
        text = "#/ Apps\n# Games below\nbind = SUPER, G, exec, steam"

        assert parse_keybinds(text)[0].category == "Apps"

    def test_failed_directive_keeps_category(self):
        text = "#/ Apps\nbind = SUPER, B\nbind = SUPER, C, exec, code"

        binds = parse_keybinds(text)

        assert len(binds) == 1
        assert binds[0].category == "Apps"

    def test_duplicates_are_kept(self):
        text = "bind = SUPER, Q, killactive\nbind = SUPER, Q, killactive"

        assert len(parse_keybinds(text)) == 2

    def test_accepts_iterable_of_lines(self, sample_conf):
        lines = [line + "\n" for line in sample_conf.splitlines()]

        assert parse_keybinds(lines) == parse_keybinds(sample_conf)

    def test_crlf_line_endings(self):
        binds = parse_keybinds("#/ Apps\r\nbind = SUPER, B, exec, firefox\r\n")

        assert binds[0].raw_line == "bind = SUPER, B, exec, firefox"
        assert binds[0].category == "Apps"

    @pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028", "\u2029"])
    def test_only_newline_ends_a_line(self, separator):
        line = f"bind = SUPER, Q, killactive # Close{separator}window"

        binds = parse_keybinds(f"{line}\n")

        assert len(binds) == 1
        assert binds[0].raw_line == line
        assert binds[0].description == f"Close{separator}window"

    def test_separator_does_not_start_a_section(self):
        text = "#/ Apps\x0b#/ Other\nbind = SUPER, B, exec, firefox"

        binds = parse_keybinds(text)

        assert binds[0].category == "Apps\x0b#/ Other"

    def test_non_breaking_space_before_keyword(self):
        assert parse_keybinds("\xa0bind = SUPER, Q, exit") == []

    def test_to_dict_uses_external_names(self):
        bind = parse_keybinds("# bind = SUPER, X, exit")[0]

        assert bind.to_dict() == {
            "mods": "SUPER",
            "key": "X",
            "action": "exit",
            "description": "exit",
            "category": "General",
            "isCommented": True,
            "rawLine": "# bind = SUPER, X, exit",
        }
