"""Convert HTML (LMS descriptions, saved pages) into clean plain text."""
import re

from bs4 import BeautifulSoup

BLOCK_TAGS = ["p", "div", "h1", "h2", "h3", "h4", "h5", "h6", "li", "tr"]
DROPPED_TAGS = ["script", "style"]

_WHITESPACE = re.compile(r"\s+")


def html_to_text(html: str) -> str:
    """Strip tags, keep line structure, normalise whitespace."""
    if not html or not html.strip():
        return ""

    soup = BeautifulSoup(html, "html.parser")

    for tag in soup.find_all(DROPPED_TAGS):
        tag.decompose()

    for br in soup.find_all("br"):
        br.replace_with("\n")

    for tag in soup.find_all(BLOCK_TAGS):
        tag.insert_before("\n")
        tag.insert_after("\n")

    # get_text() decodes entities (&amp;, &nbsp;, ...)
    text = soup.get_text()

    lines = (_WHITESPACE.sub(" ", line).strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line)
