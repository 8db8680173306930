# deepwiki_dl/parsing/__init__.py

"""
Pure text transformations: structure text -> sections, and concatenated
wiki contents -> one markdown document per section.
"""

from .sanitize import sanitize_filename
from .splitter import (
    PAGE_MARKER,
    InvalidContentError,
    InvalidStructureError,
    WikiContentError,
    split_wiki_contents,
)
from .structure_parser import parse_wiki_structure

__all__ = [
    "PAGE_MARKER",
    "InvalidContentError",
    "InvalidStructureError",
    "WikiContentError",
    "parse_wiki_structure",
    "sanitize_filename",
    "split_wiki_contents",
]
