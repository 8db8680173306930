# deepwiki_dl/models/structure.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .section import WikiSection


@dataclass(frozen=True)
class WikiStructure:
    """
    Parsed table of contents of a wiki.

    Attributes:
        sections: Sections in outline order. This is also the order in which
            pages are expected to appear in the concatenated contents.
        raw_text: The structure text as returned by the server, kept for
            diagnostics.
    """

    sections: Tuple[WikiSection, ...] = field(default_factory=tuple)
    raw_text: str = ""

    def __post_init__(self) -> None:
        # Accept any iterable (usually a list) but always store a tuple.
        object.__setattr__(self, "sections", tuple(self.sections))
