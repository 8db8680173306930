# deepwiki_dl/parsing/splitter.py

from __future__ import annotations

import logging
from typing import Dict, Sequence

from deepwiki_dl.models import WikiStructure
from deepwiki_dl.parsing.sanitize import sanitize_filename

logger = logging.getLogger(__name__)

PAGE_MARKER = "# Page: "


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class WikiContentError(ValueError):
    """
    Base class for payloads that cannot be split into pages.

    ``detail`` holds the trimmed payload that triggered the error so callers
    can show what the server actually returned.
    """

    def __init__(self, message: str, *, detail: str) -> None:
        super().__init__(message)
        self.detail = detail


class InvalidContentError(WikiContentError):
    """
    The contents don't start with a page marker.

    DeepWiki answers with a plain-text message (e.g. "Repository not found")
    instead of failing the tool call, so the message is re-raised verbatim.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(detail, detail=detail)


class InvalidStructureError(WikiContentError):
    """
    The contents look valid but the structure produced no sections, which
    usually means the structure call returned an error message.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(
            "Wiki structure contained no sections; cannot number the wiki pages.",
            detail=detail,
        )


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------


def _anchor(title: str) -> str:
    return f"{PAGE_MARKER}{title}"


def _find_page_end(contents: str, next_anchors: Sequence[str], start: int) -> int:
    """
    Position of the textually nearest anchor among ``next_anchors`` at or
    after ``start``, or ``len(contents)`` if none of them occur.
    """
    end = len(contents)
    for anchor in next_anchors:
        pos = contents.find(anchor, start)
        if pos != -1 and pos < end:
            end = pos
    return end


def split_wiki_contents(contents: str, structure: WikiStructure) -> Dict[str, str]:
    """
    Split the output of ``read_wiki_contents`` into one document per section.

    The contents are every page concatenated, each introduced by
    ``# Page: <title>`` (often with no newline before the marker). Sections
    are consumed strictly in outline order: for each one we look for its
    marker after the current position, and the page body runs up to the
    nearest marker of any *later* section. Markers whose title is not a later
    section (unexpected pages) stay inside the current body.

    Returns an insertion-ordered ``{filename: markdown}`` dict. Sections whose
    marker is never found are left out, so the result may hold fewer entries
    than the structure has sections.

    Raises
    ------
    InvalidContentError
        Non-empty contents that don't start with ``# Page: ``.
    InvalidStructureError
        Valid-looking contents but a structure with no sections.
    """
    files: Dict[str, str] = {}

    if not contents.strip():
        return files

    if not contents.startswith(PAGE_MARKER):
        raise InvalidContentError(contents.strip())

    sections = structure.sections
    if not sections:
        raise InvalidStructureError(contents.strip())

    anchors = [_anchor(section.title) for section in sections]
    cursor = 0

    for index, section in enumerate(sections):
        if cursor >= len(contents):
            break

        start = contents.find(anchors[index], cursor)
        if start == -1:
            logger.debug("Page marker for %r not found; stopping", section.full_title)
            break

        body_start = start + len(anchors[index])
        body_end = _find_page_end(contents, anchors[index + 1:], body_start)
        body = contents[body_start:body_end].strip()

        filename = sanitize_filename(f"{section.number} {section.title}.md")
        files[filename] = f"# {section.full_title}\n\n{body}"

        cursor = body_end

    return files
