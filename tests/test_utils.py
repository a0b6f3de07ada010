"""Unit tests for utility functions (create_bmd.utils).

Tests cover:
- to_camel_case (separators, casing, determinism)
- sanitize_folder_name (whitespace and special characters)
- Rich output helpers
"""

from __future__ import annotations

import re

import pytest

from create_bmd.utils import (
    print_error,
    print_info,
    print_step,
    print_success,
    print_summary_table,
    print_warning,
    sanitize_folder_name,
    to_camel_case,
)


# ---------------------------------------------------------------------------
# to_camel_case
# ---------------------------------------------------------------------------


class TestToCamelCase:
    @pytest.mark.unit
    def test_spaces(self):
        assert to_camel_case("My Cool Mod") == "myCoolMod"

    @pytest.mark.unit
    def test_hyphens_and_underscores(self):
        assert to_camel_case("send-dm_reply") == "sendDmReply"

    @pytest.mark.unit
    def test_runs_of_separators_collapse(self):
        assert to_camel_case("a  --__ b") == "aB"

    @pytest.mark.unit
    def test_mixed_case_is_normalised(self):
        assert to_camel_case("SEND DM NOW") == "sendDmNow"

    @pytest.mark.unit
    def test_surrounding_whitespace_ignored(self):
        assert to_camel_case("  Hello World  ") == "helloWorld"

    @pytest.mark.unit
    def test_single_word(self):
        assert to_camel_case("Ping") == "ping"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name",
        ["My Cool Mod", "ban_user", "Weird!! Name", "x-Y-z", "already camelCase"],
    )
    def test_words_shape(self, name: str):
        words = re.split(r"[\s\-_]+", name.strip())
        result = to_camel_case(name)

        assert result == "".join(
            w.lower() if i == 0 else w[:1].upper() + w[1:].lower()
            for i, w in enumerate(words)
        )
        assert not re.search(r"[\s\-_]", result)
        assert result.startswith(words[0].lower())

    @pytest.mark.unit
    def test_deterministic(self):
        assert to_camel_case("Same Name") == to_camel_case("Same Name")


# ---------------------------------------------------------------------------
# sanitize_folder_name
# ---------------------------------------------------------------------------


class TestSanitizeFolderName:
    @pytest.mark.unit
    def test_strips_spaces_and_punctuation(self):
        assert sanitize_folder_name("Weird!! Name") == "WeirdName"

    @pytest.mark.unit
    def test_keeps_hyphen_and_underscore(self):
        assert sanitize_folder_name("dark-theme_v2") == "dark-theme_v2"

    @pytest.mark.unit
    def test_removes_tabs_and_newlines(self):
        assert sanitize_folder_name("a\tb\nc") == "abc"

    @pytest.mark.unit
    def test_non_ascii_letters_removed(self):
        assert sanitize_folder_name("Café Thème") == "CafThme"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name",
        ["My Cool Mod", "  spaced  out ", "sym@bols#&*()", "über/../path", "a.b.c", ""],
    )
    def test_only_safe_characters(self, name: str):
        assert re.fullmatch(r"[A-Za-z0-9_-]*", sanitize_folder_name(name))


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichOutputHelpers:
    @pytest.mark.unit
    def test_print_summary_table(self):
        # Should not raise
        print_summary_table({"Name": "My Mod", "Type": "Action"}, title="Mod details")

    @pytest.mark.unit
    def test_print_helpers(self):
        print_success("Done")
        print_error("Failed")
        print_warning("Careful")
        print_info("FYI")
        print_step("Working")

    @pytest.mark.unit
    def test_markup_in_message_is_not_interpreted(self, capsys):
        print_info("[not a style] literal")
        assert "[not a style] literal" in capsys.readouterr().out

    @pytest.mark.unit
    def test_summary_table_cells_are_not_markup(self, capsys):
        print_summary_table({"Name": "Fix [/red] Bug", "[b]Key[/b]": "Use [bold] tags"})
        out = capsys.readouterr().out
        assert "Fix [/red] Bug" in out
        assert "[b]Key[/b]" in out
        assert "Use [bold] tags" in out
