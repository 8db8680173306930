# deepwiki_dl/parsing/sanitize.py

import re

# Characters rejected by at least one common filesystem, plus ASCII control chars.
_UNSAFE_FILENAME_CHARS_RE = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def sanitize_filename(name: str) -> str:
    """Replace each unsafe character with '-' (one for one, length is preserved)."""
    return _UNSAFE_FILENAME_CHARS_RE.sub("-", name)
