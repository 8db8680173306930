# tests/test_structure_parser.py

from deepwiki_dl.models import WikiSection, WikiStructure
from deepwiki_dl.parsing import parse_wiki_structure


def test_parse_top_level_sections():
    text = """Available pages for test/repo:

- 1 Overview
- 2 Architecture"""

    structure = parse_wiki_structure(text)

    assert isinstance(structure, WikiStructure)
    assert structure.sections == (
        WikiSection(number="1", title="Overview"),
        WikiSection(number="2", title="Architecture"),
    )
    assert structure.sections[0].full_title == "1 Overview"
    assert structure.raw_text == text


def test_parse_nested_sections_keeps_outline_order():
    text = """Available pages for modelcontextprotocol/typescript-sdk:

- 1 Overview
  - 1.1 Installation and Setup
  - 1.2 Core Concepts
- 2 Architecture
  - 2.1 Protocol Foundation
  - 2.2 Type System and Message Schemas"""

    structure = parse_wiki_structure(text)

    assert [s.full_title for s in structure.sections] == [
        "1 Overview",
        "1.1 Installation and Setup",
        "1.2 Core Concepts",
        "2 Architecture",
        "2.1 Protocol Foundation",
        "2.2 Type System and Message Schemas",
    ]


def test_parse_empty_input():
    structure = parse_wiki_structure("")

    assert structure.sections == ()
    assert structure.raw_text == ""


def test_parse_ignores_non_matching_lines():
    text = """Some header text
- 1 Valid Section
Not a section line
  - 1.1 Valid Sub-Section
Another random line
-1 Missing space after dash
- 1..2 Double dot
- 3"""

    structure = parse_wiki_structure(text)

    assert [s.title for s in structure.sections] == ["Valid Section", "Valid Sub-Section"]


def test_parse_error_message_yields_no_sections():
    text = "Error fetching wiki for foo/bar: Repository not found."

    structure = parse_wiki_structure(text)

    assert structure.sections == ()
    assert structure.raw_text == text


def test_parse_deeply_nested_number_and_trims_title():
    structure = parse_wiki_structure("- 1.2.3   Deep Nested Section   \r")

    assert len(structure.sections) == 1
    section = structure.sections[0]
    assert section.number == "1.2.3"
    assert section.title == "Deep Nested Section"
    assert section.full_title == "1.2.3 Deep Nested Section"


def test_parse_keeps_unsafe_characters_in_title():
    structure = parse_wiki_structure("- 4 Client/Server: Transports")

    assert structure.sections[0].title == "Client/Server: Transports"


def test_structure_sections_are_immutable():
    structure = WikiStructure(sections=[WikiSection("1", "Overview")], raw_text="- 1 Overview")

    assert isinstance(structure.sections, tuple)


def test_parse_only_accepts_ascii_digits_in_numbers():
    structure = parse_wiki_structure("- ١ Overview\n- ２ Next\n- 3 Ascii")

    assert [s.full_title for s in structure.sections] == ["3 Ascii"]
