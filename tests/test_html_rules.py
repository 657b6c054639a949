"""Tests for the default HTML rules."""

from __future__ import annotations

from bs4 import BeautifulSoup

from slidepress.capabilities import playable_languages
from slidepress.html_rules import TEMPLATES, html_rules
from slidepress.parser import parse_deck
from slidepress.renderer import Renderer
from slidepress.schemas import RULE_KINDS


def _render(text: str, **options) -> BeautifulSoup:
    html = Renderer(html_rules(), **options).render(parse_deck(text))
    return BeautifulSoup(html, "lxml")


class TestHtmlRules:
    """Tests for html_rules function."""

    def test_complete_rule_set(self) -> None:
        """A template exists for every rule kind."""
        assert set(TEMPLATES) == RULE_KINDS
        Renderer(html_rules()).check()

    def test_section_heading_and_number(self) -> None:
        """Sections render a heading matching their depth."""
        soup = _render("# Intro\n## Part *one*\n")
        sub = soup.find("section", id="slide-1.1")
        assert sub is not None
        heading = sub.find("h2")
        assert heading.find("span", class_="number").get_text() == "1.1"
        assert heading.find("b").get_text() == "one"

    def test_prose_lines_joined_with_breaks(self) -> None:
        """Prose lines are separated by explicit line breaks."""
        soup = _render("# T\nfirst\nsecond\n")
        paragraph = soup.find("p")
        assert len(paragraph.find_all("br")) == 1
        assert paragraph.get_text() == "first\nsecond"

    def test_pre_text_preserved(self) -> None:
        """Preformatted text keeps its whitespace and is not styled."""
        soup = _render("# T\n  a  *b*\n")
        assert soup.find("pre").get_text() == "  a  *b*"
        assert soup.find("b") is None

    def test_media_dimensions_omitted_when_absent(self) -> None:
        """Absent height and width produce no attribute at all."""
        soup = _render("# T\n.image a.png _ 40\n.iframe https://x.test\n")
        image = soup.find("img")
        assert "height" not in image.attrs
        assert image["width"] == "40"
        assert soup.find("iframe").attrs == {"src": "https://x.test"}

    def test_video_source(self) -> None:
        """Video carries its source type."""
        soup = _render("# T\n.video v.webm video/webm\n")
        source = soup.find("video").find("source")
        assert source["src"] == "v.webm"
        assert source["type"] == "video/webm"

    def test_background(self) -> None:
        """Background renders as a classed image."""
        soup = _render("# T\n.background bg.jpg\n")
        assert soup.find("img", class_="background")["src"] == "bg.jpg"

    def test_code_is_escaped(self) -> None:
        """Code content is escaped, never interpreted."""
        soup = _render("# T\n```\n<script>alert(1)</script>\n```\n")
        assert soup.find("script") is None
        assert "<script>" in soup.find("pre").get_text()

    def test_code_playable_and_editable(self) -> None:
        """Capability flags select the markup variant."""
        soup = _render(
            "# T\n```go -edit -numbers\na\nb\n```\n",
            is_playable=playable_languages("go"),
        )
        block = soup.find("div", class_="code")
        assert "playground" in block["class"]
        assert block["contenteditable"] == "true"
        assert [span["num"] for span in block.find_all("span")] == ["1", "2"]

    def test_link_fallback_label(self) -> None:
        """A link without label shows its URL."""
        soup = _render("# T\n.link https://go.dev\n")
        anchor = soup.find("a")
        assert anchor["href"] == "https://go.dev"
        assert anchor.get_text() == "https://go.dev"

    def test_raw_html_passthrough(self) -> None:
        """The html directive bypasses escaping."""
        soup = _render('# T\n.html <em class="raw">trusted</em>\n')
        assert soup.find("em", class_="raw").get_text() == "trusted"

    def test_caption_escapes_html(self) -> None:
        """Caption text is escaped before styling is applied."""
        soup = _render("# T\n.caption <em>x</em> _y_\n")
        caption = soup.find("figcaption")
        assert caption.find("em") is None
        assert caption.find("i").get_text() == "y"
