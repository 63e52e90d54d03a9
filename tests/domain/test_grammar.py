"""Tests for the terminal command grammar."""

from __future__ import annotations

import pytest

from folioterm.domain.grammar import (
    KEYWORDS,
    Clear,
    FilterByTag,
    ListPosts,
    ListTags,
    Navigate,
    OpenPost,
    SearchPosts,
    ShowHelp,
    ToggleTheme,
    Unknown,
    parse_command,
)
from folioterm.domain.types import Section


class TestListPosts:
    @pytest.mark.parametrize("line", ["blogs", "list blogs", "  BLOGS  ", "List Blogs"])
    def test_list_forms(self, line: str) -> None:
        assert parse_command(line) == ListPosts()


class TestSearchPosts:
    @pytest.mark.parametrize(
        "line", ["blogs search llm", "search blogs llm", "BLOGS SEARCH LLM", "blogs search   llm  "]
    )
    def test_search_forms(self, line: str) -> None:
        assert parse_command(line) == SearchPosts("llm")

    def test_multi_word_query(self) -> None:
        assert parse_command("blogs search chain of thought") == SearchPosts("chain of thought")

    @pytest.mark.parametrize("line", ["blogs search", "search blogs", "blogs search   "])
    def test_missing_query_is_empty_search(self, line: str) -> None:
        """A missing query is its own outcome, never ListPosts."""
        assert parse_command(line) == SearchPosts("")


class TestFilterByTag:
    def test_tag_forms(self) -> None:
        assert parse_command("blogs tag ai") == FilterByTag("ai")
        assert parse_command("tag blogs ai") == FilterByTag("ai")

    def test_case_insensitive(self) -> None:
        assert parse_command("BLOGS TAG ai") == parse_command("blogs tag ai")

    def test_multi_word_tag(self) -> None:
        assert parse_command("blogs tag Machine Learning") == FilterByTag("machine learning")

    @pytest.mark.parametrize("line", ["blogs tag", "tag blogs"])
    def test_missing_tag_is_empty_filter(self, line: str) -> None:
        assert parse_command(line) == FilterByTag("")


class TestListTags:
    @pytest.mark.parametrize("line", ["blogs tags", "list tags", "tags", "TAGS"])
    def test_tag_list_forms(self, line: str) -> None:
        assert parse_command(line) == ListTags()

    def test_blogs_tags_is_not_a_tag_filter(self) -> None:
        assert not isinstance(parse_command("blogs tags"), FilterByTag)


class TestOpenPost:
    def test_blog_with_id(self) -> None:
        assert parse_command("blog ai-model-taxonomy-2025") == OpenPost("ai-model-taxonomy-2025")

    def test_id_is_lower_cased(self) -> None:
        assert parse_command("Blog Large-Reasoning-Models") == OpenPost("large-reasoning-models")

    def test_reserved_word_id_still_opens(self) -> None:
        """The id form always wins over bare navigation."""
        assert parse_command("blog about") == OpenPost("about")

    def test_extra_whitespace_collapses(self) -> None:
        assert parse_command("blog   some   post") == OpenPost("some post")


class TestFixedCommands:
    def test_bare_blog_navigates(self) -> None:
        assert parse_command("blog") == Navigate(Section.BLOG)

    @pytest.mark.parametrize(
        ("line", "section"),
        [
            ("about", Section.ABOUT),
            ("contact", Section.CONTACT),
            ("home", Section.HOME),
            ("HOME", Section.HOME),
        ],
    )
    def test_navigation(self, line: str, section: Section) -> None:
        assert parse_command(line) == Navigate(section)

    def test_args_ignored(self) -> None:
        assert parse_command("about me please") == Navigate(Section.ABOUT)
        assert parse_command("clear everything") == Clear()

    def test_help_theme_clear(self) -> None:
        assert parse_command("help") == ShowHelp()
        assert parse_command("theme") == ToggleTheme()
        assert parse_command("clear") == Clear()

    def test_keywords_listed(self) -> None:
        assert set(KEYWORDS) == {"about", "blog", "contact", "home", "help", "theme", "clear"}


class TestUnknown:
    def test_unknown_keeps_original_input(self) -> None:
        cmd = parse_command("  XYZ123 foo ")
        assert cmd == Unknown("XYZ123 foo")
        assert isinstance(cmd, Unknown)
        assert cmd.first_token == "xyz123"

    def test_blank_input(self) -> None:
        cmd = parse_command("   ")
        assert isinstance(cmd, Unknown)
        assert cmd.first_token == ""

    @pytest.mark.parametrize("line", ["blogsearch x", "blogs  search x", "list", "search x"])
    def test_near_misses(self, line: str) -> None:
        assert isinstance(parse_command(line), Unknown)
