import pytest

from wallgen.language import (
    ARABIC,
    CYRILLIC,
    HEBREW,
    contains_reserved_script,
    get_reserved_script,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("חתול", True),
        ("a cat on the moon", False),
        ("cat חתול mixed", True),
        ("", False),
        (None, False),
        ("café, naïve, 東京", False),
        ("ﬠ", True),  # Hebrew presentation form
    ],
)
def test_contains_reserved_script_hebrew(text, expected):
    assert contains_reserved_script(text) is expected


def test_script_is_swappable():
    assert contains_reserved_script("кошка", CYRILLIC)
    assert not contains_reserved_script("кошка", HEBREW)
    assert contains_reserved_script("قطة", ARABIC)


def test_get_reserved_script_is_case_insensitive():
    assert get_reserved_script("Hebrew") is HEBREW


def test_get_reserved_script_unknown():
    with pytest.raises(ValueError, match="Unknown reserved script"):
        get_reserved_script("klingon")
