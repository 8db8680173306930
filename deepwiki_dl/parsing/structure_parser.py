# deepwiki_dl/parsing/structure_parser.py

from __future__ import annotations

import re
from typing import List

from deepwiki_dl.models import WikiSection, WikiStructure

# "- 1 Overview", "  - 1.1 Installation and Setup", "- 2.3.4 Deep Section"
_SECTION_LINE_RE = re.compile(r"^\s*-\s+([0-9]+(?:\.[0-9]+)*)\s+(.+)$")


def parse_wiki_structure(structure_text: str) -> WikiStructure:
    """
    Parse the output of the ``read_wiki_structure`` tool.

    Expected format::

        Available pages for owner/repo:

        - 1 Overview
          - 1.1 Installation and Setup
          - 1.2 Core Concepts
        - 2 Architecture

    Lines that don't look like an outline entry (headers, blank lines,
    prose) are skipped. Indentation is ignored; the dotted number is kept
    verbatim and is the only hierarchy information.
    """
    sections: List[WikiSection] = []

    for line in structure_text.split("\n"):
        match = _SECTION_LINE_RE.match(line)
        if not match:
            continue
        sections.append(WikiSection(number=match.group(1), title=match.group(2).strip()))

    return WikiStructure(sections=sections, raw_text=structure_text)
