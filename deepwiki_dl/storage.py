# deepwiki_dl/storage.py

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Optional, Union

from deepwiki_dl.config.settings import settings

PathLike = Union[str, Path]


def _ensure_dir(directory: PathLike) -> Path:
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def save_structure(
    raw_text: str,
    output_dir: PathLike,
    filename: Optional[str] = None,
) -> Path:
    """
    Write the raw structure text verbatim next to the page files.

    The file is written before any parsing happens, so it is still there
    for inspection when splitting the contents fails.
    """
    directory = _ensure_dir(output_dir)
    path = directory / (filename or settings.STRUCTURE_FILENAME)
    path.write_text(raw_text, encoding="utf-8")
    return path


def save_documents(files: Mapping[str, str], output_dir: PathLike) -> List[Path]:
    """
    Write one UTF-8 file per ``{filename: markdown}`` entry, in mapping order.

    Filenames are used as-is; they are expected to be sanitized already.
    Returns the written paths.
    """
    directory = _ensure_dir(output_dir)
    written: List[Path] = []

    for filename, text in files.items():
        path = directory / filename
        path.write_text(text, encoding="utf-8")
        written.append(path)

    return written
