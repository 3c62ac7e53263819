"""Tests for abbreviations, command line patterns and argument splitting."""

import pytest

from reqline.commands.abbreviation import (
    abbreviation_for, abbreviations, display_pattern
)
from reqline.commands.pattern import CommandLinePattern, compile_pattern, pattern_for
from reqline.commands.tokenizer import split_arguments
from reqline.errors import UnclosedQuoteError


class TestAbbreviations:
    """Test the abbreviation resolver."""

    def test_siblings_sharing_a_stem(self):
        names = {"fragment-set", "fragment-unset", "fragment-clear"}
        assert abbreviations(names) == {
            "fragment-set": "fragment-s",
            "fragment-unset": "fragment-u",
            "fragment-clear": "fragment-c",
        }

    def test_shortest_unique_prefix(self):
        names = {"path-set", "port-set", "patch", "post", "put"}
        assert abbreviation_for(names, "path-set") == "path"
        assert abbreviation_for(names, "patch") == "patc"
        assert abbreviation_for(names, "port-set") == "por"
        assert abbreviation_for(names, "put") == "pu"

    def test_lone_name_abbreviates_to_first_letter(self):
        assert abbreviation_for({"address", "cd"}, "address") == "a"

    def test_single_character_name(self):
        assert abbreviation_for({"a", "b"}, "a") == "a"

    def test_name_that_prefixes_a_sibling_must_be_typed_in_full(self):
        names = {"cd", "cdx"}
        assert abbreviation_for(names, "cd") == "cd"
        assert abbreviation_for(names, "cdx") == "cdx"

    def test_target_need_not_be_in_names(self):
        assert abbreviation_for({"history"}, "help") == "he"

    def test_duplicates_and_empty_names_ignored(self):
        assert abbreviations(["undo", "undo", ""]) == {"undo": "u"}

    def test_display_pattern(self):
        assert display_pattern("fragment-s", "fragment-set") == "fragment-s[et]"
        assert display_pattern("cd", "cd") == "cd"

    def test_display_pattern_rejects_non_prefix(self):
        with pytest.raises(ValueError):
            display_pattern("x", "cd")

    def test_abbreviations_are_distinct(self):
        names = {"address", "cd", "cookies-add", "cookies-clear", "help",
                 "history", "host-set", "path-set", "port-set", "quit", "query-set"}
        table = abbreviations(names)
        assert len(set(table.values())) == len(names)

    def test_patterns_accept_full_name_and_abbreviation(self):
        names = {"fragment-set", "fragment-unset", "path-set", "port-set", "cd"}
        for name, abbreviation in abbreviations(names).items():
            pattern = compile_pattern(display_pattern(abbreviation, name))
            assert pattern.matches(name)
            assert pattern.matches(abbreviation)

    def test_bracketed_names_match_in_full(self):
        names = {"x[yz", "x[wz"}
        for name, abbreviation in abbreviations(names).items():
            pattern = pattern_for(abbreviation, name)
            assert pattern.matches(name)
            assert pattern.matches(abbreviation)
            assert not pattern.matches("x")
            assert not pattern.matches("x[")

    def test_pattern_for(self):
        assert pattern_for("fragment-s", "fragment-set") == CommandLinePattern(
            mandatory="fragment-s", optional="et"
        )
        assert pattern_for("cd", "cd") == CommandLinePattern(mandatory="cd")
        with pytest.raises(ValueError):
            pattern_for("x", "cd")


class TestCommandLinePattern:
    """Test compiled command line patterns."""

    def test_compile(self):
        pattern = compile_pattern("fragment-s[et]")
        assert pattern == CommandLinePattern(mandatory="fragment-s", optional="et")
        assert pattern.display == "fragment-s[et]"

    def test_compile_without_brackets(self):
        pattern = compile_pattern("cd")
        assert pattern.optional == ""
        assert pattern.display == "cd"

    @pytest.mark.parametrize("line", [
        "fragment-s", "fragment-se", "fragment-set", "FRAGMENT-SET", "Fragment-Se",
    ])
    def test_accepts_partial_expansions(self, line):
        assert compile_pattern("fragment-s[et]").matches(line)

    @pytest.mark.parametrize("line", [
        "fragment-t", "fragment-se1", "fragment-sets", "fragment", "xfragment-s", "",
    ])
    def test_rejects_other_text(self, line):
        assert not compile_pattern("fragment-s[et]").matches(line)

    def test_tail_is_captured(self):
        match = compile_pattern("fragment-s[et]").match("fragment-se  foo bar")
        assert match.command == "fragment-se"
        assert match.tail == "  foo bar"

    def test_no_tail(self):
        match = compile_pattern("fragment-s[et]").match("fragment-set")
        assert match.command == "fragment-set"
        assert match.tail is None

    def test_any_whitespace_separates_tail(self):
        match = compile_pattern("path[-set]").match("path\tfoo")
        assert match.tail == "\tfoo"

    def test_argument_directly_after_command_is_rejected(self):
        assert not compile_pattern("path[-set]").matches("path-setfoo")

    def test_special_characters_are_literal(self):
        pattern = compile_pattern("a.b[*c]")
        assert pattern.matches("a.b")
        assert pattern.matches("a.b*")
        assert pattern.matches("a.b*c")
        assert not pattern.matches("axb")
        assert not pattern.matches("a.bc")

    def test_full_line_without_brackets(self):
        pattern = compile_pattern("cd")
        assert pattern.matches("cd ..")
        assert not pattern.matches("c")
        assert not pattern.matches("cde")


class TestSplitArguments:
    """Test shell-style argument splitting."""

    def test_quotes_and_escapes(self):
        assert split_arguments('foo "bar baz" qux\\ quux') == ["foo", "bar baz", "qux quux"]

    def test_single_quotes(self):
        assert split_arguments("'a b' c") == ["a b", "c"]

    def test_blank(self):
        assert split_arguments("   ") == []

    def test_hash_is_not_a_comment(self):
        assert split_arguments("#top") == ["#top"]

    def test_unclosed_quote(self):
        with pytest.raises(UnclosedQuoteError) as exc_info:
            split_arguments('"unterminated')
        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.text == '"unterminated'

    def test_dangling_escape(self):
        with pytest.raises(UnclosedQuoteError):
            split_arguments("foo\\")
