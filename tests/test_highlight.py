# tests/test_highlight.py
import pytest

from listing import highlight_in_badge, highlight_match, render_player_list_with_highlight


class TestHighlightMatch:
    def test_wraps_every_case_insensitive_match(self):
        result = highlight_match("Foo bar FOO", "foo")

        assert result == (
            '<mark class="bg-accent text-accent-content">Foo</mark> bar '
            '<mark class="bg-accent text-accent-content">FOO</mark>'
        )

    def test_custom_class(self):
        assert highlight_match("abc", "b", "hl") == 'a<mark class="hl">b</mark>c'

    def test_regex_metacharacters_are_literal(self):
        assert highlight_match("a.b axb", ".", "x") == 'a<mark class="x">.</mark>b axb'
        assert highlight_match("[EU] (1)", "(1)", "x") == '[EU] <mark class="x">(1)</mark>'

    def test_adjacent_matches(self):
        assert highlight_match("aaa", "a", "x") == (
            '<mark class="x">a</mark><mark class="x">a</mark><mark class="x">a</mark>'
        )

    @pytest.mark.parametrize("text", ["", "plain", "  spaced  ", "<b>markup</b>"])
    @pytest.mark.parametrize("query", ["", None, "   "])
    def test_empty_query_is_identity(self, text, query):
        assert highlight_match(text, query) == text

    @pytest.mark.parametrize("query", ["a", "xyz", "."])
    def test_empty_text_is_identity(self, query):
        assert highlight_match("", query) == ""


def test_badge_uses_span():
    assert highlight_in_badge("Player1", "play") == '<span class="bg-accent">Play</span>er1'


class TestRenderPlayerList:
    def test_empty_list(self):
        assert render_player_list_with_highlight([]) == "-"
        assert render_player_list_with_highlight((), "x") == "-"

    def test_badges_without_query(self):
        html = render_player_list_with_highlight(["Ann", "Bob"])

        assert html.startswith('<div class="flex flex-wrap gap-1 items-start w-full">')
        assert html.count('<span class="badge gap-0 badge-neutral text-xs whitespace-nowrap flex-shrink-0">') == 2
        assert "Ann" in html and "Bob" in html
        assert "bg-accent" not in html

    def test_each_player_highlighted(self):
        html = render_player_list_with_highlight(["Ann", "Joanna"], "an")

        assert '<span class="bg-accent">An</span>n' in html
        assert 'Jo<span class="bg-accent">an</span>na' in html
