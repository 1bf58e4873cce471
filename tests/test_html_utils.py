"""Tests for HTML utilities module."""

from __future__ import annotations

import pytest

from docs2index.html_utils import flatten_text, get_content, normalize_text, parse_html


class TestNormalizeText:
    """Tests for normalize_text function."""

    def test_escapes_html_special_characters(self) -> None:
        """Escapes &, <, > and double quotes."""
        result = normalize_text('A & B <tag> "quoted"')

        assert result == "A &amp; B &lt;tag&gt; &quot;quoted&quot;"

    def test_leaves_single_quotes(self) -> None:
        """Single quotes are not part of the escaped set."""
        assert normalize_text("it's") == "it's"

    def test_collapses_whitespace_runs(self) -> None:
        """Runs of two or more whitespace characters become one space."""
        assert normalize_text("a  \t b") == "a b"

    def test_replaces_line_terminators(self) -> None:
        """Single CR, LF and CRLF terminators become spaces."""
        assert normalize_text("one\ntwo\rthree") == "one two three"
        assert normalize_text("a\r\nb") == "a b"

    @pytest.mark.parametrize(
        "text",
        [
            'A & B <tag> "quoted"',
            "a  \n b & c",
            "already &amp; escaped &lt;x&gt;",
            "plain text",
            "",
        ],
    )
    def test_is_idempotent(self, text: str) -> None:
        """Normalizing twice gives the same result as once."""
        once = normalize_text(text)

        assert normalize_text(once) == once


class TestFlattenText:
    """Tests for flatten_text function."""

    def test_separates_paragraphs(self) -> None:
        """Paragraphs are separated by a blank line."""
        soup = parse_html("<div><p>One</p><p>Two</p></div>")

        assert flatten_text(soup.div) == "One\n\nTwo"

    def test_joins_inline_text(self) -> None:
        """Inline elements and collapsed whitespace join into one line."""
        soup = parse_html("<p>Hello   <b>big</b>\n world</p>")

        assert flatten_text(soup.p) == "Hello big world"

    def test_skips_hidden_elements(self) -> None:
        """Script and style content is not visible text."""
        soup = parse_html(
            "<div>Hello<script>var x = 1;</script><style>p {}</style> world</div>"
        )

        assert flatten_text(soup.div) == "Hello world"

    def test_skips_comments(self) -> None:
        """HTML comments contribute nothing."""
        soup = parse_html("<p>a<!-- note -->b</p>")

        assert flatten_text(soup.p) == "ab"

    def test_line_break_element(self) -> None:
        """A br element breaks the line."""
        soup = parse_html("<p>a<br>b</p>")

        assert flatten_text(soup.p) == "a\nb"

    def test_preformatted_keeps_line_breaks(self) -> None:
        """Line breaks inside pre survive flattening."""
        soup = parse_html("<div><pre>line 1\nline 2</pre></div>")

        assert flatten_text(soup.div) == "line 1\nline 2"

    def test_text_node_returned_as_is(self) -> None:
        """A bare text node flattens to its own value."""
        soup = parse_html("<p>  spaced  </p>")

        assert flatten_text(soup.p.contents[0]) == "  spaced  "

    def test_empty_element(self) -> None:
        """Elements without text flatten to an empty string."""
        soup = parse_html("<div><img src='x.png'></div>")

        assert flatten_text(soup.div) == ""


class TestGetContent:
    """Tests for get_content function."""

    def test_flattens_and_normalizes(self) -> None:
        """Block structure collapses into one escaped line."""
        soup = parse_html(
            "<div><p>A &amp; B</p><ul><li>&lt;one&gt;</li><li>two</li></ul></div>"
        )

        assert get_content(soup.div) == "A &amp; B &lt;one&gt; two"


class TestParseHtml:
    """Tests for parse_html function."""

    def test_tolerates_malformed_markup(self) -> None:
        """Unclosed tags produce a usable tree instead of raising."""
        soup = parse_html("<div><p>unclosed <b>bold")

        assert soup.find("b") is not None
        assert "bold" in flatten_text(soup)


class TestFlattenTextStructure:
    """Tables, deep nesting and existing entities."""

    def test_table_cells_stay_separate(self) -> None:
        """Adjacent cells are separated and rows start new lines."""
        soup = parse_html(
            "<table><tr><th>Name</th><th>Type</th></tr>"
            "<tr><td>alpha</td><td>beta</td></tr></table>"
        )

        assert flatten_text(soup.table) == "Name Type\nalpha beta"

    def test_deeply_nested_markup(self) -> None:
        """Nesting deeper than the interpreter recursion limit flattens."""
        soup = parse_html("<div>" * 3000 + "deep" + "</div>" * 3000)

        assert get_content(soup.body) == "deep"

    def test_existing_entities_not_escaped_again(self) -> None:
        """Text that literally reads an entity keeps it as is."""
        soup = parse_html("<p>&amp;lt;tag&amp;gt; &amp;amp; &amp;copy;</p>")

        assert get_content(soup.p) == "&lt;tag&gt; &amp; &amp;copy;"
