# deepwiki_dl/downloader.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol, Union

from deepwiki_dl.config.settings import settings
from deepwiki_dl.deepwiki_client import DeepWikiClient
from deepwiki_dl.parsing import parse_wiki_structure, split_wiki_contents
from deepwiki_dl.storage import save_documents, save_structure

logger = logging.getLogger(__name__)


class WikiSource(Protocol):
    """Anything that can return the two DeepWiki payloads for a repository."""

    def read_wiki_structure(self, repo_name: str) -> str:
        ...

    def read_wiki_contents(self, repo_name: str) -> str:
        ...


# -----------------------------------------------------------------------------
# Public result type
# -----------------------------------------------------------------------------

@dataclass
class DownloadResult:
    """
    Outcome of a wiki download:

    - output_dir: directory the files were written to
    - structure_path: the raw structure dump
    - files: page files, in outline order
    - section_count: number of sections parsed from the structure
      (can be larger than len(files) when pages are missing)
    """
    repo_name: str
    output_dir: Path
    structure_path: Path
    files: List[Path] = field(default_factory=list)
    section_count: int = 0

    @property
    def file_count(self) -> int:
        return len(self.files)


def default_output_dir(repo_name: str) -> Path:
    """``owner/repo`` -> ``repo-deepwiki`` (suffix configurable)."""
    repo = repo_name.split("/")[-1] or "unknown"
    return Path(f"{repo}-{settings.OUTPUT_DIR_SUFFIX}")


def download_wiki(
    repo_name: str,
    output_dir: Optional[Union[str, Path]] = None,
    client: Optional[WikiSource] = None,
) -> DownloadResult:
    """
    Download the DeepWiki wiki of ``repo_name`` into ``output_dir``.

    Steps:
      1. fetch and save the raw structure (kept even if later steps fail)
      2. parse the structure into numbered sections
      3. fetch the contents and split them into one document per section
      4. write the documents

    Errors from the client (DeepWikiClientError) and from splitting
    (InvalidContentError / InvalidStructureError) propagate unchanged;
    no page files are written in that case.
    """
    out_dir = Path(output_dir) if output_dir is not None else default_output_dir(repo_name)

    logger.info(f"Downloading wiki for {repo_name}...")
    logger.info(f"Output directory: {out_dir}")

    if client is None:
        client = DeepWikiClient()

    logger.info("Fetching wiki structure...")
    structure_text = client.read_wiki_structure(repo_name)

    structure_path = save_structure(structure_text, out_dir)
    logger.info(f"Saved structure to {structure_path}")

    structure = parse_wiki_structure(structure_text)
    logger.info(f"Found {len(structure.sections)} sections")

    logger.info("Fetching wiki contents...")
    contents_text = client.read_wiki_contents(repo_name)

    files = split_wiki_contents(contents_text, structure)
    if len(files) < len(structure.sections):
        logger.warning(
            "Only %d of %d sections were found in the wiki contents",
            len(files),
            len(structure.sections),
        )

    written = save_documents(files, out_dir)
    for path in written:
        logger.info(f"Saved {path.name}")

    logger.info(f"Successfully saved {len(written)} files to {out_dir}")

    return DownloadResult(
        repo_name=repo_name,
        output_dir=out_dir,
        structure_path=structure_path,
        files=written,
        section_count=len(structure.sections),
    )
