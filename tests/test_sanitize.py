# tests/test_sanitize.py

import pytest

from deepwiki_dl.parsing import sanitize_filename


@pytest.mark.parametrize(
    "name, expected",
    [
        ("1 Overview.md", "1 Overview.md"),
        ("1 Test:Title.md", "1 Test-Title.md"),
        ('a<b>c:d"e/f\\g|h?i*j', "a-b-c-d-e-f-g-h-i-j"),
        ("tab\there\nnewline", "tab-here-newline"),
        ("\x00\x1f", "--"),
        ("::", "--"),
        ("", ""),
        ("Überblick (intro) & more.md", "Überblick (intro) & more.md"),
    ],
)
def test_sanitize_filename(name, expected):
    assert sanitize_filename(name) == expected


def test_sanitize_preserves_length_and_safe_characters():
    name = 'x<y> 1.2 "quoted" \x7f é'

    result = sanitize_filename(name)

    assert len(result) == len(name)
    for original, replaced in zip(name, result):
        if original in '<>:"/\\|?*' or ord(original) < 0x20:
            assert replaced == "-"
        else:
            assert replaced == original


def test_sanitize_is_idempotent():
    name = 'a/b\\c:d*e?f"g<h>i|j\tk'

    once = sanitize_filename(name)

    assert sanitize_filename(once) == once
