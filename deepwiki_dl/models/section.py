# deepwiki_dl/models/section.py
from dataclasses import dataclass


@dataclass(frozen=True)
class WikiSection:
    number: str  # "1", "1.1", "2.3.4", ...
    title: str

    @property
    def full_title(self) -> str:
        return f"{self.number} {self.title}"
