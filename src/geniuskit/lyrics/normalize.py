"""Turn Genius song page markup into plain lyrics text.

The page is parsed with BeautifulSoup; every element matching the lyrics
container selector contributes its inner markup, which is then flattened to
text with line breaks preserved.
"""

from __future__ import annotations

import re
from typing import Final, Protocol

from bs4 import BeautifulSoup

from geniuskit.config import DEFAULT_LYRICS_CONTAINER_SELECTOR

# Line breaks in any spelling: <br>, <br/>, <BR />
BR_PATTERN: Final[re.Pattern[str]] = re.compile(r"<br\s*/?>", re.IGNORECASE)

TAG_PATTERN: Final[re.Pattern[str]] = re.compile(r"<[^>]*>")

# One or more [Section] markers at the start of a line, plus the newline after them
SECTION_MARKER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:\[[^\]\n]+\])+\n?",
    re.MULTILINE,
)

# Order matters: "&amp;" last so "&amp;lt;" decodes to the literal "&lt;".
_ENTITIES: Final[tuple[tuple[str, str], ...]] = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#039;", "'"),
    ("&nbsp;", " "),
    ("\xa0", " "),
    ("&amp;", "&"),
)


class ContainerExtractor(Protocol):
    """Finds lyrics containers in a page and returns their inner markup."""

    def __call__(self, page: str, selector: str) -> list[str]: ...


def soup_containers(page: str, selector: str = DEFAULT_LYRICS_CONTAINER_SELECTOR) -> list[str]:
    """Return the inner HTML of every element matching ``selector``, in document order."""
    soup = BeautifulSoup(page, "html.parser")
    return [node.decode_contents() for node in soup.select(selector)]


def decode_entities(text: str) -> str:
    """Decode the small set of HTML entities Genius emits in lyrics."""
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def markup_to_text(markup: str) -> str:
    """Convert one container's inner markup to text.

    ``<br>`` variants become newlines, other tags are dropped, then entities
    are decoded.
    """
    text = BR_PATTERN.sub("\n", markup)
    text = TAG_PATTERN.sub("", text)
    return decode_entities(text)


def extract_lyrics(
    page: str,
    selector: str = DEFAULT_LYRICS_CONTAINER_SELECTOR,
    extractor: ContainerExtractor = soup_containers,
) -> tuple[str, int]:
    """Extract the lyrics text of a song page.

    Args:
        page: Full HTML document.
        selector: CSS selector of the lyrics containers.
        extractor: Parsing backend returning each container's inner markup.

    Returns:
        Tuple of (trimmed text, number of containers found). The text is empty
        when nothing matched or the containers held no text.
    """
    containers = extractor(page, selector)
    text = "\n".join(markup_to_text(markup) for markup in containers)
    return text.strip(), len(containers)


def strip_section_markers(lyrics: str) -> str:
    """Remove bracketed annotations such as ``[Chorus]`` that start a line.

    A single newline following the marker goes with it, so a line holding only
    a marker disappears entirely.

    Example:
        >>> strip_section_markers("[Chorus]\\nI love you\\n[Verse]\\nYou love me")
        'I love you\\nYou love me'
    """
    return SECTION_MARKER_PATTERN.sub("", lyrics)
