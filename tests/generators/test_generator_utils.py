import pytest
from generators.generator_utils import format_enum_name, extract_translate_directive


@pytest.mark.parametrize("name, expected", [
    ("READY_TO_START", "Ready To Start"),
    ("ACTIVE", "Active"),
    ("A", "A"),
    ("", ""),
    ("UNSPECIFIED$", "Unspecified$"),
    ("already mixed_Case", "Already Mixed Case"),
    ("MY2ND_VALUE", "My2nd Value"),
    ("_LEADING", " Leading"),
])
def test_format_enum_name(name, expected):
    assert format_enum_name(name) == expected


def test_format_enum_name_only_capitalizes_word_starts():
    # Digits after a separator are kept, the next letter is not promoted
    assert format_enum_name("LEVEL_2B") == "Level 2b"


@pytest.mark.parametrize("comment, expected", [
    ("@Translate: Foo", "Foo"),
    ("Some docs.\n@Translate: GoTime\nMore docs.", "GoTime"),
    ("@Translate: First @Translate: Second", "First"),
    ("@Translate: Foo Bar", "Foo"),
    ("@Translate: Go-Time", "Go"),
    ("@Translate: snake_case_9", "snake_case_9"),
])
def test_extract_translate_directive(comment, expected):
    assert extract_translate_directive(comment) == expected


@pytest.mark.parametrize("comment", [
    None,
    "",
    "@Translate:",
    "@Translate:   ",
    "@translate: Foo",
    "@Translate:Foo",
    "@Translate: \"Quoted\"",
    "no directive here",
])
def test_extract_translate_directive_absent(comment):
    assert extract_translate_directive(comment) is None
