"""
HTML body text extraction tests for lawtext.
"""

from unittest.mock import patch

import pytest
from bs4.builder import ParserRejectedMarkup

from lawtext.exceptions import ExtractionError
from lawtext.extractor import body_text, extract_file


class TestBodyText:

    def test_script_is_dropped(self):
        html = "<html><body><p>Hello&nbsp;World</p><script>ignored()</script></body></html>"

        text = body_text(html)

        assert "Hello" in text and "World" in text
        assert "ignored()" not in text

    def test_nbsp_collapses_to_space(self):
        assert body_text("<body><p>Hello&nbsp;World</p></body>") == "Hello World"

    def test_style_and_head_are_dropped(self):
        html = ("<html><head><title>Title</title><style>p {color: red}</style></head>"
                "<body><style>.x{}</style><p>Body</p><noscript>enable js</noscript></body></html>")

        assert body_text(html) == "Body"

    def test_block_whitespace_collapsed(self):
        html = "<body>\n  <h1>Закон</h1>\n\n<p>Стаття   1.\n  Загальні положення</p></body>"

        assert body_text(html) == "Закон Стаття 1. Загальні положення"

    def test_malformed_markup(self):
        html = "<html><body><p>Unclosed <b>bold<div class=law id=x>Text<td>cell</body>"

        text = body_text(html)

        for word in ("Unclosed", "bold", "Text", "cell"):
            assert word in text

    def test_fragment_without_body(self):
        assert body_text("<p>just a fragment</p>") == "just a fragment"

    def test_empty_body(self):
        assert body_text("<html><body></body></html>") == ""

    def test_inline_tag_inside_word(self):
        assert body_text("<body><p>Зак<b>он</b> України</p></body>") == "Закон України"

    def test_punctuation_after_link(self):
        html = '<body><p>згідно зі статтею <a href="#s5">5</a>.</p></body>'

        assert body_text(html) == "згідно зі статтею 5."

    def test_adjacent_blocks_are_separated(self):
        html = "<body><h2>Розділ I</h2><p>Стаття 1</p><table><tr><td>a</td><td>b</td></tr></table>x<br>y</body>"

        assert body_text(html) == "Розділ I Стаття 1 a b x y"


class TestExtractFile:

    def test_reads_utf8_file(self, tmp_path):
        path = tmp_path / "d188.htm"
        path.write_text("<html><body><p>Постанова&nbsp;№ 1</p></body></html>", encoding="utf-8")

        assert extract_file(path) == "Постанова № 1"

    def test_missing_file_is_fatal(self, tmp_path, caplog):
        path = tmp_path / "missing.htm"

        with pytest.raises(ExtractionError, match="missing.htm"):
            extract_file(path)
        assert "No such file" in caplog.text

    def test_rejected_markup_is_fatal(self, tmp_path, caplog):
        path = tmp_path / "d188.htm"
        path.write_text("<html><body>text</body></html>", encoding="utf-8")

        with patch("lawtext.extractor.BeautifulSoup",
                   side_effect=ParserRejectedMarkup("markup rejected by html.parser")):
            with pytest.raises(ExtractionError, match="Cannot parse"):
                extract_file(path)
        assert "markup rejected by html.parser" in caplog.text

    def test_non_utf8_file_is_fatal(self, tmp_path, legacy_file):
        path = legacy_file(tmp_path / "d0001.htm", "<body>Закон</body>")

        with pytest.raises(ExtractionError):
            extract_file(path)
