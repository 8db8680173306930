# deepwiki_dl/models/__init__.py

from .section import WikiSection
from .structure import WikiStructure

__all__ = ["WikiSection", "WikiStructure"]
