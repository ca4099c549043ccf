# extractor.py
#   Renders the <body> of one HTML document to plain text.

import logging
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from . import config
from .exceptions import ExtractionError

logger = logging.getLogger(__name__)

# never visible in a browser
INVISIBLE_TAGS = ["script", "style", "noscript", "template"]

# rendered on their own line, so their text never runs into a neighbour
BLOCK_TAGS = {
    "address", "article", "aside", "blockquote", "br", "caption", "center",
    "dd", "div", "dl", "dt", "fieldset", "figcaption", "figure", "footer",
    "form", "h1", "h2", "h3", "h4", "h5", "h6", "header", "hr", "li", "main",
    "nav", "ol", "p", "pre", "section", "table", "tbody", "td", "tfoot", "th",
    "thead", "tr", "ul",
}


def body_text(html: str) -> str:
    """
    Visible text of the document body. Block-level elements are separated by
    a space, inline elements are not, and all whitespace (including &nbsp;)
    is collapsed to single spaces. html.parser copes with unclosed tags and
    unquoted attributes, so malformed markup still yields text.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(INVISIBLE_TAGS):
        tag.decompose()
    node = soup.body or soup
    for tag in node.find_all(BLOCK_TAGS):
        tag.insert_before(" ")
        tag.insert_after(" ")
    # inline tags add nothing, so "Зак<b>он</b>" stays one word
    text = node.get_text("")
    # str.split() also splits on \xa0
    return " ".join(text.split())


def extract_file(path: Path, log: logging.Logger = logger) -> str:
    try:
        html = Path(path).read_text(encoding=config.UNIVERSAL_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        log.error(str(e))
        raise ExtractionError(f"Cannot read {path}: {e}") from e
    try:
        return body_text(html)
    except ParserRejectedMarkup as e:
        log.error(str(e))
        raise ExtractionError(f"Cannot parse {path}: {e}") from e
